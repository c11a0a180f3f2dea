"""
The web_invoker.utils module contains the ambient tooling used throughout the package.

Modules:
    - initializer.py: Contains the tools used to initialize (or reinitialize) the web_invoker package.
                      The initializer creates the following package components:
                        - config: Contains the environment variables and defaults used to configure the package
                        - logger: created by calling setup_logging function with inputs or defaults from an .env file

    - logger.py: Contains the setup_logging function used to set the logging level and output location for logs

    - config_loader.py: Holds the ConfigLoader class that starts from the web_invoker defaults and reads from an
                        .env file and environment variables to configure timeouts, the user agent and logging.

    - helpers.py: Contains helpers for header lookups, charset extraction and HTTP date parsing.

    - repr_utils.py: Generates readable representations of configured objects.

    - response_protocol.py: Defines the response-like interface that WebResponse snapshots are created from.
"""

from web_invoker.utils.logger import setup_logging
from web_invoker.utils.config_loader import ConfigLoader
from web_invoker.utils.initializer import config_settings, initialize_package
from web_invoker.utils.helpers import parse_charset, parse_http_date_millis, get_header_value
from web_invoker.utils.repr_utils import generate_repr, format_repr_value
from web_invoker.utils.response_protocol import ResponseProtocol

__all__ = [
    "setup_logging",
    "ConfigLoader",
    "config_settings",
    "initialize_package",
    "parse_charset",
    "parse_http_date_millis",
    "get_header_value",
    "generate_repr",
    "format_repr_value",
    "ResponseProtocol",
]
