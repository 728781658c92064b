"""Main entry point for the mentiontag console."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import Config, load_config
from .console import Console, build_session

DEFAULT_CONFIG = "config.yaml"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def resolve_config(path: str, logger: logging.Logger) -> Config:
    """Load the config file, falling back to defaults when the default file is absent."""
    if path == DEFAULT_CONFIG and not Path(path).exists():
        logger.info("No %s found, using the built-in user directory", path)
        return Config()
    logger.info("Loading configuration from %s", path)
    return load_config(path)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Type comments with live @mention tagging",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Each input line is typed onto the draft, joined to the previous line by a space.

Commands:
  :pick [N]      Insert candidate N (default 1) for the current @ search
  :back [N]      Delete N characters (default 1)
  :send          Submit the comment
  :comments      Show posted comments
  :quit          Exit

Examples:
  %(prog)s                         # Interactive, default config.yaml
  %(prog)s -c myconfig.yaml        # Run with custom config
  %(prog)s --script session.txt    # Replay input lines from a file
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG,
        help=f"Path to configuration file (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose/debug logging",
    )
    parser.add_argument(
        "--script",
        type=Path,
        help="Read input lines from a file instead of stdin",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = resolve_config(args.config, logger)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        logger.error(str(e))
        return 1

    console = Console(build_session(config))

    try:
        if args.script:
            with args.script.open(encoding="utf-8") as f:
                posted = console.run(f)
        else:
            posted = console.run(sys.stdin)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0

    logger.info("Posted %d comment(s)", posted)
    return 0


if __name__ == "__main__":
    sys.exit(main())
