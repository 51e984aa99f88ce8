"""Main entry point for tablemorph package."""

import sys

from loguru import logger

from tablemorph.cli import create_parser
from tablemorph.core import load_config
from tablemorph.processing import run_pipeline
from tablemorph.utils.logging import setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Logging first, so configuration problems are reported consistently
    setup_logger(verbose=args.verbose, debug=args.debug)

    try:
        config = load_config(args.config, args, parser)
    except (OSError, ValueError):
        sys.exit(1)

    # Reconfigure in case the JSON config enabled verbose or debug output
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Validate
    if not config.dictionary:
        parser.error("A dictionary file is required")
    if not config.tables:
        parser.error("At least one substitution table is required (-t/--table)")

    if config.verbose:
        logger.info("=" * 60)
        logger.info("tablemorph - Substitution Table Variant Generator")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        logger.info(f"  Dictionary: {config.dictionary}")
        for table in config.tables:
            logger.info(f"  Table: {table}")
        logger.info(f"  Min substitutions: {config.min_substitutions}")
        logger.info(f"  Max substitutions: {config.max_substitutions}")
        logger.info(f"  Substitute all: {config.substitute_all}")
        logger.info(f"  Reverse: {config.reverse}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")

    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except OSError:
        # Already reported where the file was opened
        sys.exit(1)
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
