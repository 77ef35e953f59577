#!/usr/bin/env python3
"""
Command-line interface for pdf2hash.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional, TextIO

from pdf2hash.core.batch import BatchExtractor
from pdf2hash.utils.config import Config, verbosity_to_level
from pdf2hash.utils.logger import Logger
from pdf2hash.utils.exceptions import ConfigError

# Settings that can come from either the config file or the command line
SETTING_KEYS = ("show_filename", "verbosity", "log_file", "progress", "strict", "output_file")


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="pdf2hash",
        description="Extract password hashes from encrypted PDFs for John the Ripper and hashcat",
    )

    parser.add_argument("pdf_files", nargs="+", help="Encrypted PDF file(s)")

    # Output options
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "-s",
        "--show-filename",
        action="store_true",
        default=None,
        help="Prefix each hash with the filename",
    )
    output_group.add_argument(
        "-o", "--output-file", help="Write hashes to this file instead of stdout"
    )
    output_group.add_argument(
        "--progress",
        action="store_true",
        default=None,
        help="Show a progress bar on stderr",
    )

    # Parsing options
    parsing_group = parser.add_argument_group("Parsing Options")
    parsing_group.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject PDFs with recoverable structural errors",
    )

    # Logging options
    logging_group = parser.add_argument_group("Logging Options")
    logging_group.add_argument(
        "-v",
        "--verbosity",
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging verbosity level (default: warning)",
    )
    logging_group.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Log every encryption dictionary (same as -v debug)",
    )
    logging_group.add_argument("--log-file", help="Save log output to this file")
    logging_group.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors to the console"
    )

    # Config management
    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument("--config", help="Path to configuration file")
    config_group.add_argument(
        "--save-config",
        action="store_true",
        help="Save current settings as default configuration",
    )

    return parser


def resolve_settings(args, config: Config) -> Dict[str, Any]:
    """Merge config values with command-line arguments

    Command-line args override config.
    """
    settings = {key: config.get(key) for key in SETTING_KEYS}
    for key in SETTING_KEYS:
        value = getattr(args, key, None)
        if value is not None:
            settings[key] = value

    if args.debug:
        settings["verbosity"] = "debug"

    return settings


def setup_logger(settings: Dict[str, Any], quiet: bool = False) -> Logger:
    """Set up logging based on the effective settings"""
    return Logger(
        name="pdf2hash",
        log_file=settings.get("log_file"),
        level=verbosity_to_level(settings.get("verbosity") or "warning"),
        quiet=quiet,
    )


def print_system_info(logger) -> None:
    """Log version information useful for debugging"""
    import platform
    import pypdf

    logger.info(f"Python version: {platform.python_version()}")
    logger.info(f"pypdf version: {pypdf.__version__}")


def write_hashes(extractor: BatchExtractor, pdf_files: List[str], out: TextIO,
                 show_filename: bool, logger) -> bool:
    """Write one line per successful file, log the failures

    Returns:
        True if every file produced a hash
    """
    all_ok = True
    for result in extractor.run(pdf_files):
        if result.ok:
            print(result.line(show_filename), file=out)
        else:
            logger.error(f"{result.path}: {result.error}")
            all_ok = False
    return all_ok


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the pdf2hash CLI

    Returns:
        Exit code (0 if every file produced a hash, 1 otherwise)
    """
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        display_examples()
        return 1

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    settings = resolve_settings(args, config)
    logger = setup_logger(settings, quiet=args.quiet).get_logger()

    try:
        print_system_info(logger)

        if args.save_config:
            config.update(settings)
            config.save()
            logger.info(f"Configuration saved to {config.config_path}")

        extractor = BatchExtractor(
            strict=bool(settings["strict"]),
            progress=bool(settings["progress"]),
            logger=logger,
        )
        show_filename = bool(settings["show_filename"])

        output_file = settings.get("output_file")
        if output_file:
            with open(output_file, "w") as f:
                all_ok = write_hashes(extractor, args.pdf_files, f, show_filename, logger)
            logger.info(f"Hashes saved to {output_file}")
        else:
            all_ok = write_hashes(extractor, args.pdf_files, sys.stdout, show_filename, logger)

        return 0 if all_ok else 1

    except ConfigError as e:
        logger.error(f"Error: {str(e)}")
        return 1
    except OSError as e:
        logger.error(f"Error writing output: {str(e)}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130


def display_examples():
    """Display usage examples"""
    examples = [
        "Basic usage:",
        "  pdf2hash document.pdf",
        "",
        "Several files, prefixed with their names:",
        "  pdf2hash -s *.pdf",
        "",
        "Write hashes to a file for John the Ripper:",
        "  pdf2hash -o hashes.txt *.pdf && john hashes.txt",
        "",
        "Show the encryption dictionaries being read:",
        "  pdf2hash -d document.pdf",
        "",
        "Save configuration for future use:",
        "  pdf2hash -s --progress --save-config document.pdf",
        "",
        "For more options:",
        "  pdf2hash -h",
    ]

    print("\n".join(examples))


if __name__ == "__main__":
    sys.exit(main())
