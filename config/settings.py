"""
Settings for the IP address validator.
"""
import logging
import json
import os
from colorama import Fore, Style

logger = logging.getLogger(__name__)

# Map of level names accepted in the settings file
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR
}

DEFAULT_SETTINGS = {
    "log_file": "ip_validator.log",
    "log_level": "INFO",
    "max_log_size_mb": 1,
    "log_backup_count": 3,
    "use_color": True,
    "show_guidance": True
}

SETTINGS_FILE_PATH = os.path.join(os.path.dirname(__file__), "settings.json")

def load_settings(path=SETTINGS_FILE_PATH):
    """
    Load settings from a JSON file on top of the defaults.

    Args:
        path: Location of the settings file (default: bundled settings.json)

    Returns:
        dict: The merged settings
    """
    settings = dict(DEFAULT_SETTINGS)

    if not os.path.exists(path):
        logger.warning(f"{Fore.YELLOW}Warning: Settings file not found at {path}. Using defaults.{Style.RESET_ALL}")
        return settings

    try:
        with open(path, 'r') as f:
            overrides = json.load(f)
    except json.JSONDecodeError:
        logger.error(f"{Fore.RED}Error: Could not decode JSON from {path}. Using defaults.{Style.RESET_ALL}")
        return settings
    except OSError as e:
        logger.error(f"{Fore.RED}Error reading settings file {path}: {e}{Style.RESET_ALL}")
        return settings

    if not isinstance(overrides, dict):
        logger.error(f"{Fore.RED}Error: Settings file {path} must contain a JSON object. Using defaults.{Style.RESET_ALL}")
        return settings

    for key, value in overrides.items():
        if key not in DEFAULT_SETTINGS:
            logger.warning(f"{Fore.YELLOW}Ignoring unknown setting '{key}' in {path}{Style.RESET_ALL}")
            continue
        settings[key] = value

    logger.info(f"Loaded settings from {path}")
    return settings

def get_log_level(settings):
    """
    Resolve the configured log level name.

    Args:
        settings: Settings dictionary

    Returns:
        int: A logging level, INFO when the name is not recognised
    """
    name = str(settings.get("log_level", "INFO")).upper()
    level = LOG_LEVELS.get(name)
    if level is None:
        logger.warning(f"{Fore.YELLOW}Invalid log_level '{name}'. Valid levels are: {', '.join(LOG_LEVELS.keys())}{Style.RESET_ALL}")
        return logging.INFO
    return level
