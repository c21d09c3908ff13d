"""
Keyspace model for the brute-force search.

Every candidate of every length is numbered by a single global index. Lengths
are laid out as contiguous sub-ranges ordered by increasing length, each
``base ** length`` wide, and a position inside a sub-range is decoded with
fixed-radix positional encoding, most significant character first.
"""

from bisect import bisect_right
from typing import List, Tuple

from pdf_bruteforce.utils.exceptions import CapacityError, ConfigError

# Largest candidate count accepted for a single run (unsigned 64-bit).
MAX_CANDIDATES = 2 ** 64 - 1


def _check_range(min_length: int, max_length: int) -> None:
    if min_length < 1 or max_length < 1:
        raise ConfigError(f"Password lengths must be positive (got {min_length}..{max_length})")
    if min_length > max_length:
        raise ConfigError(
            f"--min ({min_length}) must be less than or equal to --max ({max_length})"
        )


def _width(charset_size: int, length: int, ceiling: int) -> int:
    width = 1
    for _ in range(length):
        width *= charset_size
        if width > ceiling:
            raise CapacityError(
                f"Search space too large (overflow when computing {length}-length candidates)"
            )
    return width


def total_candidates(charset_size: int, min_length: int, max_length: int,
                     ceiling: int = MAX_CANDIDATES) -> int:
    """Count the candidates of every length in ``[min_length, max_length]``

    Raises:
        ConfigError: on an empty charset or an invalid length range
        CapacityError: if a single length or the running total exceeds ``ceiling``
    """
    if charset_size < 1:
        raise ConfigError("Charset must contain at least one character")
    _check_range(min_length, max_length)

    total = 0
    for length in range(min_length, max_length + 1):
        total += _width(charset_size, length, ceiling)
        if total > ceiling:
            raise CapacityError(
                f"Total search space exceeds supported size ({ceiling:,} candidates)"
            )
    return total


def length_of(index: int, charset_size: int, min_length: int, max_length: int) -> int:
    """Return the password length whose sub-range holds ``index``"""
    _check_range(min_length, max_length)
    if index < 0:
        raise IndexError(f"Index must not be negative: {index}")

    offset = 0
    for length in range(min_length, max_length + 1):
        offset += charset_size ** length
        if index < offset:
            return length
    raise IndexError(f"Index {index} is outside the search space of {offset} candidates")


def decode(index: int, charset: str, length: int) -> str:
    """Convert an index local to its length sub-range into a password"""
    base = len(charset)
    if not 0 <= index < base ** length:
        raise IndexError(f"Index {index} out of range for length {length}")

    chars = [""] * length
    for pos in range(length - 1, -1, -1):
        index, digit = divmod(index, base)
        chars[pos] = charset[digit]
    return "".join(chars)


def encode(password: str, charset: str) -> int:
    """Convert a password back to its index local to its length sub-range"""
    base = len(charset)
    position = 0
    for char in password:
        digit = charset.find(char)
        if digit < 0:
            raise ValueError(f"Invalid character in password: {char!r}")
        position = position * base + digit
    return position


class Keyspace:
    """Immutable index space of one search run"""

    def __init__(self, charset: str, min_length: int, max_length: int,
                 ceiling: int = MAX_CANDIDATES):
        """Validate the configuration and precompute sub-range offsets

        Raises:
            ConfigError: on duplicate characters or an invalid length range
            CapacityError: if the space exceeds ``ceiling``
        """
        if len(set(charset)) != len(charset):
            raise ConfigError("Charset contains duplicate characters")

        self.charset = charset
        self.base = len(charset)
        self.min_length = min_length
        self.max_length = max_length
        self.total = total_candidates(self.base, min_length, max_length, ceiling)

        self.widths: List[int] = [self.base ** length for length in self.lengths]
        self.offsets: List[int] = []
        offset = 0
        for width in self.widths:
            self.offsets.append(offset)
            offset += width

        self._digits = {char: i for i, char in enumerate(charset)}

    @property
    def lengths(self) -> range:
        return range(self.min_length, self.max_length + 1)

    def get_total_count(self) -> int:
        """Get the total number of candidates"""
        return self.total

    def locate(self, index: int) -> Tuple[int, int]:
        """Split a global index into ``(length, local index)``"""
        if not 0 <= index < self.total:
            raise IndexError(f"Index must be between 0 and {self.total - 1}: {index}")
        slot = bisect_right(self.offsets, index) - 1
        return self.min_length + slot, index - self.offsets[slot]

    def length_of(self, index: int) -> int:
        return self.locate(index)[0]

    def position_to_password(self, position: int) -> str:
        """Convert a global index to its candidate password"""
        length, local = self.locate(position)
        return decode(local, self.charset, length)

    def password_to_position(self, password: str) -> int:
        """Convert a candidate password to its global index"""
        length = len(password)
        if length not in self.lengths:
            raise ValueError(
                f"Password length must be between {self.min_length} and {self.max_length}"
            )

        position = 0
        for char in password:
            try:
                digit = self._digits[char]
            except KeyError:
                raise ValueError(f"Invalid character in password: {char!r}") from None
            position = position * self.base + digit
        return self.offsets[length - self.min_length] + position

    def __repr__(self) -> str:
        return (f"Keyspace(charset_size={self.base}, lengths={self.min_length}.."
                f"{self.max_length}, total={self.total})")
