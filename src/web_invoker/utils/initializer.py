# utils/initializer.py
"""
The web_invoker.utils.initializer module loads the package configuration and sets up logging when the
package is first imported. `initialize_package` can also be called directly to reinitialize the package
with a different .env file or logging settings.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from web_invoker.utils.config_loader import ConfigLoader
from web_invoker.utils.logger import setup_logging

config_settings = ConfigLoader()


def initialize_package(
    log: bool = True,
    env_path: Optional[str | Path] = None,
    config_params: Optional[Dict[str, Any]] = None,
    logging_params: Optional[Dict[str, Any]] = None,
) -> Tuple[Dict[str, Any], logging.Logger]:
    """
    Loads the package configuration and configures the `web_invoker` logger.

    Args:
        log (bool): Whether logging should be set up. When `ENABLE_LOGGING` is FALSE in the config,
                    logging is skipped regardless.
        env_path (Optional[str | Path]): The .env file to read settings from
        config_params (Optional[Dict[str, Any]]): Overrides applied on top of the loaded configuration
        logging_params (Optional[Dict[str, Any]]): Keyword arguments passed directly to `setup_logging`

    Returns:
        Tuple[Dict[str, Any], logging.Logger]: the loaded config dictionary and the package logger
    """
    config_settings.load_config(reload_env=True, env_path=env_path)
    if config_params:
        config_settings.config.update(config_params)

    config = config_settings.config
    logger = logging.getLogger("web_invoker")

    logging_enabled = str(config.get("ENABLE_LOGGING", "TRUE")).upper() not in ("FALSE", "0", "NO")

    if log and logging_enabled:
        level_name = str(config.get("LOG_LEVEL") or "INFO").upper()
        log_level = getattr(logging, level_name, None)
        if not isinstance(log_level, int):
            log_level = logging.INFO

        params: Dict[str, Any] = {
            "logger": logger,
            "log_directory": config.get("LOG_DIRECTORY"),
            "log_level": log_level,
        }
        params.update(logging_params or {})
        setup_logging(**params)
    else:
        logger.addHandler(logging.NullHandler())

    return config, logger
