#!/usr/bin/env python3
"""
Command-line interface for the PDF brute-forcer.
"""

import argparse
import json
import os
import sys
import time
from typing import List, Optional

from pdf_bruteforce.core.charset import build_charset
from pdf_bruteforce.core.cracker import PDFCracker
from pdf_bruteforce.core.state import StopPolicy
from pdf_bruteforce.utils.config import Config, verbosity_to_level
from pdf_bruteforce.utils.logger import Logger
from pdf_bruteforce.utils.exceptions import (
    PDFBruteForceError,
    PDFNotEncryptedError,
    VerificationError,
)

EXIT_FOUND = 0
EXIT_ERROR = 1
EXIT_NOT_FOUND = 2
EXIT_VERIFICATION = 3
EXIT_INTERRUPTED = 130


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser

    Options left unset (None) fall back to the configuration file.
    """
    parser = argparse.ArgumentParser(
        prog="pdf-bruteforce",
        description="Brute-force the password of an encrypted PDF",
    )

    parser.add_argument(
        "-i", "--input", dest="pdf_file", metavar="PDF", required=True,
        help="Path to the password-protected PDF",
    )

    charset_group = parser.add_argument_group("Candidate Options")
    charset_group.add_argument(
        "--min", dest="min_length", type=int, help="Minimum password length (default: 1)"
    )
    charset_group.add_argument(
        "--max", dest="max_length", type=int, help="Maximum password length (default: 8)"
    )
    charset_group.add_argument(
        "-d", "--digit", action="store_true", default=None,
        help="Include digits in the candidate alphabet",
    )
    charset_group.add_argument(
        "-a", "--alphabet", action="store_true", default=None,
        help="Include alphabetic characters in the candidate alphabet",
    )
    charset_group.add_argument(
        "-s", "--symbol", action="store_true", default=None,
        help="Include common symbols in the candidate alphabet",
    )
    charset_group.add_argument(
        "-c", "--custom", help="Extra characters to include in the candidate alphabet"
    )

    performance_group = parser.add_argument_group("Performance Options")
    performance_group.add_argument(
        "-t", "--threads", dest="workers", type=int,
        help="Number of worker threads (default: 1)",
    )
    performance_group.add_argument(
        "--report-every", type=int,
        help="Candidates a worker tries between progress counter updates",
    )
    performance_group.add_argument(
        "--stop-policy", choices=[p.value for p in StopPolicy],
        help="'lowest' (default) always reports the lowest match, but workers below "
             "a match finish their chunks first, so a late match can take nearly a "
             "full search; 'first' stops all workers at the first match found and "
             "returns sooner",
    )
    performance_group.add_argument(
        "--timeout", type=float, help="Give up after this many seconds"
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "-v", "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level (default: info)",
    )
    output_group.add_argument("--log-file", help="Save log output to this file")
    output_group.add_argument("--output-file", help="Save the search summary (JSON) to this file")
    output_group.add_argument(
        "--no-progress", action="store_true", help="Do not draw a progress bar"
    )
    output_group.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress standard output messages"
    )

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Path to configuration file")
    config_group.add_argument(
        "--save-config",
        action="store_true",
        help="Save current settings as default configuration",
    )

    return parser


ARG_TO_CONFIG = {
    "min_length": "min_length",
    "max_length": "max_length",
    "digit": "digits",
    "alphabet": "letters",
    "symbol": "symbols",
    "custom": "custom",
    "workers": "workers",
    "report_every": "report_every",
    "stop_policy": "stop_policy",
    "timeout": "timeout",
    "verbosity": "verbosity",
    "log_file": "log_file",
}


def merge_args_into_config(args, config: Config) -> None:
    """Command-line values override configuration values"""
    for arg_name, key in ARG_TO_CONFIG.items():
        value = getattr(args, arg_name, None)
        if value is not None:
            config.set(key, value)


def setup_logger(args, config: Config) -> Logger:
    """Set up logging based on command-line arguments and config"""
    return Logger(
        name="pdf_bruteforce",
        log_file=config.get("log_file"),
        level=verbosity_to_level(config.get("verbosity", "info")),
        console=not args.quiet,
    )


def print_system_info(logger) -> None:
    """Log system information useful for debugging"""
    import platform
    import pikepdf

    logger.debug("=== System Information ===")
    logger.debug(f"Python version: {platform.python_version()}")
    logger.debug(f"Platform: {platform.platform()}")
    logger.debug(f"CPU count: {os.cpu_count()}")
    logger.debug(f"pikepdf version: {pikepdf.__version__}")
    logger.debug("=========================")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the PDF brute-forcer CLI

    Returns:
        Exit code: 0 found (or nothing to crack), 1 error, 2 not found,
        3 verification error, 130 interrupted
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except PDFBruteForceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    merge_args_into_config(args, config)

    logger = setup_logger(args, config).get_logger()
    start_time = time.time()

    try:
        print_system_info(logger)

        if args.save_config:
            config.save()
            logger.info(f"Configuration saved to {config.config_path}")

        # Configuration is validated before the document is opened.
        charset = build_charset(
            digits=config.get("digits", False),
            letters=config.get("letters", False),
            symbols=config.get("symbols", False),
            custom=config.get("custom") or "",
        )

        cracker = PDFCracker(
            pdf_path=args.pdf_file,
            workers=config.get("workers", 1),
            logger=logger,
        )
        cracker.report_every = config.get("report_every", cracker.report_every)
        cracker.progress_interval = config.get("progress_interval", cracker.progress_interval)

        result = cracker.crack(
            charset,
            config.get("min_length", 1),
            config.get("max_length", 8),
            stop_policy=StopPolicy(config.get("stop_policy", "lowest")),
            timeout=config.get("timeout"),
            show_progress=not (args.no_progress or args.quiet),
        )

        if args.output_file:
            with open(args.output_file, "w") as f:
                json.dump(cracker.describe(result), f, indent=2)
            logger.info(f"Summary saved to {args.output_file}")

        if result.found:
            logger.info(f"Password found: {result.password}")
            logger.info(f"Index: {result.index:,} of {result.total:,}")
            logger.info(f"Elapsed: {result.elapsed:.2f}s")
            return EXIT_FOUND

        if result.cause:
            logger.warning(f"Search aborted: {result.cause}")
            logger.info(f"Candidates tried: {result.attempts:,} of {result.total:,}")
            logger.info(f"Elapsed: {result.elapsed:.2f}s")
            return EXIT_INTERRUPTED if cracker.interrupted else EXIT_NOT_FOUND

        logger.warning("Password not found in provided search space.")
        logger.info(f"Candidates tried: {result.attempts:,}")
        logger.info(f"Elapsed: {result.elapsed:.2f}s")
        return EXIT_NOT_FOUND

    except PDFNotEncryptedError:
        logger.info("Not Encrypted")
        logger.info(f"Elapsed: {time.time() - start_time:.2f}s")
        return EXIT_FOUND
    except VerificationError as e:
        logger.error(f"Decryption error: {e}")
        logger.info(f"Elapsed: {time.time() - start_time:.2f}s")
        return EXIT_VERIFICATION
    except PDFBruteForceError as e:
        logger.error(f"Error: {str(e)}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Process interrupted by user.")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.exception(f"Unexpected error: {str(e)}")
        return EXIT_ERROR


def display_examples():
    """Display usage examples"""
    examples = [
        "Four-digit PIN:",
        "  pdf-bruteforce -i document.pdf -d --min 4 --max 4",
        "",
        "Letters and digits up to six characters on 8 threads:",
        "  pdf-bruteforce -i document.pdf -d -a --min 1 --max 6 -t 8",
        "",
        "Add your own characters to the alphabet:",
        "  pdf-bruteforce -i document.pdf -d -c 'äöü' --max 5",
        "",
        "Stop after ten minutes:",
        "  pdf-bruteforce -i document.pdf -a --max 5 --timeout 600",
        "",
        "Save configuration for future use:",
        "  pdf-bruteforce -i document.pdf -d -a --min 4 --max 8 -t 4 --save-config",
        "",
        "For more options:",
        "  pdf-bruteforce -h",
    ]

    print("\n".join(examples))


if __name__ == "__main__":
    if len(sys.argv) == 1:
        display_examples()
        sys.exit(1)

    sys.exit(main())
