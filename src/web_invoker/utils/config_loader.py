import os
import logging
from dotenv import set_key, load_dotenv, dotenv_values

from pathlib import Path
from typing import Dict, Any, Optional, Union

config_logger = logging.getLogger(__name__)


class ConfigLoader:
    DEFAULT_ENV_PATH: Path = Path(__file__).resolve().parent.parent / '.env'  # Default location of the package env file

    # Values already present within the environment before loading
    DEFAULT_ENV: Dict[str, Any] = {
        'CONNECTION_TIMEOUT': os.getenv('WEB_INVOKER_CONNECTION_TIMEOUT') or 60,
        'SOCKET_TIMEOUT': os.getenv('WEB_INVOKER_SOCKET_TIMEOUT') or 60,
        'USER_AGENT': os.getenv('WEB_INVOKER_USER_AGENT') or None,
        'LOG_DIRECTORY': os.getenv('WEB_INVOKER_LOG_DIR') or None,
        'LOG_LEVEL': os.getenv('WEB_INVOKER_LOG_LEVEL') or 'INFO',
        'ENABLE_LOGGING': os.getenv('WEB_INVOKER_ENABLE_LOGGING') or 'TRUE',
    }

    # Maps the names of variables in an .env file to config keys
    ENV_ALIASES: Dict[str, str] = {
        'WEB_INVOKER_CONNECTION_TIMEOUT': 'CONNECTION_TIMEOUT',
        'WEB_INVOKER_SOCKET_TIMEOUT': 'SOCKET_TIMEOUT',
        'WEB_INVOKER_USER_AGENT': 'USER_AGENT',
        'WEB_INVOKER_LOG_DIR': 'LOG_DIRECTORY',
        'WEB_INVOKER_LOG_LEVEL': 'LOG_LEVEL',
        'WEB_INVOKER_ENABLE_LOGGING': 'ENABLE_LOGGING',
    }

    def __init__(self, env_path: Optional[Path | str] = None):
        """Utility class for loading package settings from the environment and an optional .env file"""

        self.env_path: Path = self._process_env_path(env_path)
        self.config: Dict[str, Any] = self.DEFAULT_ENV.copy()  # Use a copy to avoid modifying the class attribute

    def try_loadenv(self, env_path: Optional[Path | str] = None, verbose: bool = False) -> Optional[Dict[str, Any]]:
        """
        Try to load environment variables from a specified .env file into the environment and return as a dict.
        """
        env_path = self._process_env_path(env_path or self.env_path)
        if load_dotenv(env_path):
            return dotenv_values(env_path)
        else:
            if verbose:
                config_logger.debug(f"No environment file located at {env_path}. Loading defaults.")
            return {}

    def load_config(self, reload_env: bool = False, env_path: Optional[Path | str] = None, verbose: bool = False) -> None:
        """
        Load configuration settings from a .env file. Prefixed variable names are mapped onto their config keys.
        """
        if reload_env:
            env_path = self._process_env_path(env_path or self.env_path)
            if verbose:
                config_logger.debug(f"Attempting to load environment file located at {env_path}.")
            env_config = self.try_loadenv(env_path, verbose=False)
            if env_config:
                self.config.update({self.ENV_ALIASES.get(k, k): v for k, v in env_config.items() if v is not None})

    def save_config(self, env_path: Optional[Path | str] = None) -> None:
        """
        Save configuration settings to a .env file.
        """
        env_path = env_path or self.env_path
        for key, value in self.config.items():
            if value is not None:
                self.write_key(key, str(value), env_path)

    def write_key(self, key_name: str, key_value: str, env_path: Optional[Path | str] = None, create: bool = True) -> None:
        """
        Write a key-value pair to a .env file.
        """
        env_path = self._process_env_path(env_path or self.env_path)
        try:
            if create and not env_path.exists():
                env_path.touch()
            set_key(str(env_path), key_name, key_value)
        except IOError as e:
            config_logger.error(f"Failed to create .env file at {env_path}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieves a configuration value, returning the default when the key is missing or None"""
        value = self.config.get(key)
        return value if value is not None else default

    def get_float(self, key: str, default: float) -> float:
        """Retrieves a numeric configuration value, falling back to the default on invalid input"""
        value = self.config.get(key)
        try:
            return float(value) if value is not None else default
        except (TypeError, ValueError):
            config_logger.warning(f"The value of {key} ({value!r}) is not numeric. Using the default, {default}")
            return default

    @classmethod
    def _process_env_path(cls, env_path: Optional[Union[str, Path]]) -> Path:
        """Try to load from the provided `env_path` variable first. Otherwise try to load from DEFAULT_ENV_PATH"""
        if not env_path:
            return cls.DEFAULT_ENV_PATH

        raw_env_path = Path(str(env_path))
        return raw_env_path.resolve() if raw_env_path.parent.exists() else cls.DEFAULT_ENV_PATH
