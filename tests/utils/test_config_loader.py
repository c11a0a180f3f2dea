import logging
import pytest
from dotenv import dotenv_values

from web_invoker.utils.config_loader import ConfigLoader
from web_invoker.utils.initializer import initialize_package, config_settings


@pytest.fixture
def temp_env_file(tmp_path):
    """Uses a temporary environment path variable to setup subsequent config tests"""
    return tmp_path / ".env"


@pytest.fixture
def restore_config():
    """Restores the package configuration and logger after tests that reinitialize the package"""
    original = config_settings.config.copy()
    package_logger = logging.getLogger("web_invoker")
    level, handlers = package_logger.level, list(package_logger.handlers)
    yield
    config_settings.config = original
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.setLevel(level)
    package_logger.handlers = handlers


def test_process_env_file(temp_env_file):
    """Verifies whether the configuration path is set as intended when provided"""
    loader = ConfigLoader(temp_env_file)
    assert loader.env_path == temp_env_file.resolve()

    missing_directory_file = temp_env_file.parent / "non-existent-directory" / ".env"
    loader = ConfigLoader(missing_directory_file)
    assert loader.env_path == ConfigLoader.DEFAULT_ENV_PATH


def test_defaults():
    loader = ConfigLoader()
    assert loader.get_float("CONNECTION_TIMEOUT", 1.0) == 60.0
    assert loader.get_float("SOCKET_TIMEOUT", 1.0) == 60.0
    assert loader.get("MISSING_KEY", "fallback") == "fallback"


def test_load_config_maps_prefixed_names(temp_env_file, monkeypatch):
    # registered with monkeypatch so that the variables exported by load_dotenv are removed afterwards
    monkeypatch.setenv("WEB_INVOKER_CONNECTION_TIMEOUT", "60")
    monkeypatch.setenv("CUSTOM_SETTING", "unset")
    temp_env_file.write_text("WEB_INVOKER_CONNECTION_TIMEOUT=5\nCUSTOM_SETTING=value\n")

    loader = ConfigLoader(temp_env_file)
    loader.load_config(reload_env=True)

    assert loader.get_float("CONNECTION_TIMEOUT", 60.0) == 5.0
    assert loader.config["CUSTOM_SETTING"] == "value"


def test_invalid_numeric_values(caplog):
    loader = ConfigLoader()
    loader.config["SOCKET_TIMEOUT"] = "soon"
    assert loader.get_float("SOCKET_TIMEOUT", 60.0) == 60.0
    assert "is not numeric" in caplog.text


def test_missing_env_file_loads_nothing(temp_env_file):
    loader = ConfigLoader(temp_env_file)
    assert loader.try_loadenv(temp_env_file) == {}


def test_config_saving(temp_env_file):
    """Validates whether the creation of a new env file on `save_config` is successful when not already created"""
    loader = ConfigLoader(env_path=temp_env_file)
    assert not temp_env_file.exists()

    loader.config["USER_AGENT"] = "web-invoker-tests"
    loader.save_config(temp_env_file)

    saved = dotenv_values(temp_env_file)
    assert saved["USER_AGENT"] == "web-invoker-tests"
    assert saved["CONNECTION_TIMEOUT"] == str(loader.config["CONNECTION_TIMEOUT"])


def test_initialize_package(tmp_path, restore_config):
    config, logger = initialize_package(
        config_params={"LOG_LEVEL": "WARNING", "USER_AGENT": "initialized"},
        logging_params={"log_directory": tmp_path},
    )
    assert config["USER_AGENT"] == "initialized"
    assert logger.name == "web_invoker"
    assert logger.level == logging.WARNING


def test_initialize_package_without_logging(restore_config):
    _, logger = initialize_package(config_params={"ENABLE_LOGGING": "FALSE"})
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)
