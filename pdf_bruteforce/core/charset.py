"""
Alphabet construction for the brute-force search.
"""

import string

from pdf_bruteforce.utils.exceptions import EmptyCharsetError

DIGITS = string.digits
LETTERS = string.ascii_lowercase + string.ascii_uppercase
SYMBOLS = "!@#$%^&*()-_=+[]{}|\\:;\"',.<>/?`~"


def build_charset(digits: bool = False, letters: bool = False,
                  symbols: bool = False, custom: str = "") -> str:
    """Assemble the ordered candidate alphabet

    Categories are appended in a fixed order (digits, letters, symbols,
    custom) and repeated characters keep their first position, so the same
    flags always give the same index-to-password mapping.

    Raises:
        EmptyCharsetError: if nothing was selected
    """
    pool = ""
    if digits:
        pool += DIGITS
    if letters:
        pool += LETTERS
    if symbols:
        pool += SYMBOLS
    if custom:
        pool += custom

    charset = "".join(dict.fromkeys(pool))
    if not charset:
        raise EmptyCharsetError(
            "Provide at least one candidate set via --digit, --alphabet, --symbol or --custom"
        )
    return charset
