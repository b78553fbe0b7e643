"""Apply command implementation."""

import logging
from argparse import Namespace
from pathlib import Path

from configtool.exceptions import ConfigtoolError
from configtool.loader import ConfigLoader, ThemeLoader
from configtool.paths import resolve_config_dir
from configtool.themes import ThemeSubstitutor


logger = logging.getLogger(__name__)

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'error': logging.ERROR,
}


def configure_logging(args: Namespace) -> None:
    """Set up root logging from the CLI flags."""
    log_level = LOG_LEVELS[args.log_level]
    if args.debug:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    elif args.verbose:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def apply_theme(args: Namespace) -> int:
    """
    Load the config and theme, then rewrite every configured file.

    Every failure is fatal: it is logged and mapped to a nonzero exit code.
    Files processed before a failure keep their new contents.
    """
    configure_logging(args)

    try:
        config_dir = resolve_config_dir()
        logger.debug(f"Config directory: {config_dir}")

        config_path = Path(args.config_path) if args.config_path is not None else None
        config = ConfigLoader(config_dir).load(config_path)
        if config is None:
            # First run: layout scaffolded, nothing to apply yet
            logger.info(f"Initialized {config_dir}; add files and a theme to config.json")
            return 0

        theme_path = Path(args.theme_path) if args.theme_path is not None else None
        theme = ThemeLoader(config_dir).load(theme_path, config.theme_name)

        processed = ThemeSubstitutor().apply(theme, config.files)
        logger.info(f"Applied theme to {len(processed)} file(s)")
        return 0

    except ConfigtoolError as e:
        logger.error(f"Error: {e}")
        return e.exit_code
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
