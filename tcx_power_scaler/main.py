"""CLI entry point for TCX Power Scaler."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import LEGACY_FOLDER_PREFIX, LEGACY_SCALE_PREFIX
from .errors import ConfigurationError
from .prompts import resolve_config, scale_factor_type
from .reporter import print_run_summary
from .scaler import process_folder


class ConsoleFormatter(logging.Formatter):
    """Bare messages, with a marker on warnings and errors."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            return f"[{record.levelname}] {message}"
        return message


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    if verbose:
        formatter = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
    else:
        formatter = ConsoleFormatter('%(message)s')

    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def translate_legacy_arguments(argv: List[str]) -> List[str]:
    """Rewrite scale:<factor> and folder:<path> tokens as options.

    Args:
        argv: Raw command-line arguments

    Returns:
        Arguments argparse understands
    """
    translated = []
    for arg in argv:
        lowered = arg.lower()
        if lowered.startswith(LEGACY_SCALE_PREFIX):
            translated.extend(['--scale', arg[len(LEGACY_SCALE_PREFIX):]])
        elif lowered.startswith(LEGACY_FOLDER_PREFIX):
            folder = arg[len(LEGACY_FOLDER_PREFIX):]
            if len(folder) >= 2 and folder.startswith('"') and folder.endswith('"'):
                folder = folder[1:-1]
            translated.extend(['--folder', folder])
        else:
            translated.append(arg)
    return translated


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='tcx_power_scaler',
        description='Scale the power readings in .tcx activity files, keeping a backup of each file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --scale 0.95
  %(prog)s --folder ./rides --scale 1.05 --dry-run
  %(prog)s scale:0.95 folder:"./rides"
        """
    )

    parser.add_argument(
        '--folder', '-f',
        help='Folder containing .tcx files (default: current directory)'
    )

    parser.add_argument(
        '--scale', '-s',
        type=scale_factor_type,
        help='Multiplier for every power value, e.g. 0.95 for 95%% (prompted for if omitted)'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Report what would change without writing files'
    )

    parser.add_argument(
        '--no-input',
        action='store_true',
        help='Never prompt; fail if --scale is missing'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging, including every scaled value'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()
    args = parser.parse_args(translate_legacy_arguments(argv))

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    # Print banner
    print("=" * 60)
    print("TCX Power Scaler")
    print("Scale power readings in .tcx files")
    print("=" * 60)
    print()

    try:
        config = resolve_config(args)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    if not config.working_folder.is_dir():
        logger.warning(f"Folder not found: {config.working_folder}")

    print(f"Scaling power by {config.percent:g}% in {config.working_folder}")
    if config.dry_run:
        print("DRY RUN - No files will be written")
    print()

    results = process_folder(config)

    if not results:
        logger.warning(f"No .tcx files found in {config.working_folder}")

    print_run_summary(results)

    if any(r.failed for r in results):
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
