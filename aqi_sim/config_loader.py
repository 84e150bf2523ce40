# File: aqi_sim/config_loader.py

"""
Handles loading and caching of the project's YAML configuration file (`config/config.yaml`)
and sets up centralized logging based on the loaded configuration.

Provides a globally accessible CONFIG dictionary after initial import.
A `.env` file at the project root is read first, so AQI_SIM_CONFIG and
AQI_SIM_SEED can be supplied there instead of the shell environment.
"""

import os
import sys
import logging
import logging.handlers
from functools import lru_cache

import yaml
from dotenv import load_dotenv

from aqi_sim.exceptions import ConfigError, ConfigFileNotFoundError

# --- Determine Project Root ---
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# --- Environment ---
DOTENV_PATH = os.path.join(PROJECT_ROOT, '.env')
if os.path.exists(DOTENV_PATH):
    load_dotenv(dotenv_path=DOTENV_PATH)

CONFIG_ENV_VAR = 'AQI_SIM_CONFIG'
SEED_ENV_VAR = 'AQI_SIM_SEED'

# --- Define Config Path ---
CONFIG_FILE_NAME = 'config.yaml'
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, 'config', CONFIG_FILE_NAME)
CONFIG_PATH = os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH


# --- Configuration Loading Function ---
@lru_cache()
def load_config(config_path=CONFIG_PATH):
    """Loads the configuration from the YAML file.
    Uses LRU cache to load the file only once per path.

    Args:
        config_path (str): The path to the configuration YAML file.

    Raises:
        ConfigFileNotFoundError: If the config file doesn't exist.
        ConfigError: If the file cannot be parsed or does not hold a mapping.

    Returns:
        dict: A dictionary containing the configuration settings.
    """
    log = logging.getLogger(__name__)
    log.info(f"Attempting to load configuration from: {config_path}")
    if not os.path.exists(config_path):
        msg = f"Configuration file not found at: {config_path}"
        log.info(msg)
        raise ConfigFileNotFoundError(msg)
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML configuration file: {config_path}. Error: {e}"
        log.error(msg, exc_info=True)
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Could not read configuration file {config_path}: {e}"
        log.error(msg, exc_info=True)
        raise ConfigError(msg) from e
    if config is None:
        log.warning(f"Configuration file is empty: {config_path}")
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration root must be a mapping, got {type(config).__name__}.")
    log.info("Configuration loaded successfully.")
    return config


# --- Central Logging Setup Function ---
def setup_logging(config):
    """Configures root logger with console and optional file handlers.

    Reads logging level, format, and file settings from the provided config dict.
    Removes pre-existing handlers before adding new ones.

    Args:
        config (dict): The loaded configuration dictionary (expects a 'logging' key).
    """
    if not isinstance(config, dict):
        config = {}
    log_cfg = config.get('logging') or {}
    log_level_str = log_cfg.get('level', 'INFO')
    log_format = log_cfg.get('format', '%(asctime)s - [%(levelname)s] - %(name)s - %(message)s')
    log_to_file = log_cfg.get('log_to_file', False)
    log_filename = log_cfg.get('log_filename', 'aqi_sim.log')
    log_file_level_str = log_cfg.get('log_file_level', 'DEBUG')
    log_console_level_str = log_cfg.get('log_console_level', 'WARNING')

    root_log_level = getattr(logging, str(log_level_str).upper(), logging.INFO)
    file_log_level = getattr(logging, str(log_file_level_str).upper(), logging.DEBUG)
    console_log_level = getattr(logging, str(log_console_level_str).upper(), logging.WARNING)

    root_logger = logging.getLogger()
    levels = [root_log_level, console_log_level] + ([file_log_level] if log_to_file else [])
    root_logger.setLevel(min(levels))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    logging.debug(f"Console logging configured at level: {logging.getLevelName(console_log_level)}")

    if log_to_file:
        log_file_path = os.path.join(PROJECT_ROOT, log_filename)
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file_path, maxBytes=5*1024*1024, backupCount=3, encoding='utf-8')
        except OSError as e:
            logging.error(f"Failed to configure file logging: {e}", exc_info=True)
        else:
            file_handler.setLevel(file_log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logging.info(f"File logging configured at level: {logging.getLevelName(file_log_level)} to {log_file_path}")
    else:
        logging.debug("File logging is disabled in configuration.")


# --- Load config and Setup Logging on Import ---
def init_config(config_path=CONFIG_PATH):
    """Loads the config and configures logging, falling back to an empty config.

    A missing default config is expected for a plain (non-editable) install,
    where the repository's `config/` folder is not shipped, so it is only
    reported at INFO. Any other load failure is reported as a warning.

    Returns:
        dict: The loaded configuration, or {} on failure.
    """
    try:
        config = load_config(config_path)
    except ConfigFileNotFoundError as e:
        logging.basicConfig(level=logging.WARNING, format='%(asctime)s [%(levelname)s] %(message)s')
        if os.path.abspath(config_path) == os.path.abspath(DEFAULT_CONFIG_PATH):
            logging.getLogger(__name__).info(f"No default configuration found ({e}). Using built-in defaults.")
        else:
            logging.getLogger(__name__).warning(f"Failed to load configuration: {e}. Using fallback logging and empty config.")
        return {}
    except ConfigError as e:
        logging.basicConfig(level=logging.WARNING, format='%(asctime)s [%(levelname)s] %(message)s')
        logging.getLogger(__name__).warning(f"Failed to load configuration: {e}. Using fallback logging and empty config.")
        return {}
    setup_logging(config)
    return config


CONFIG = init_config()


# --- Convenience Accessors ---
def get_config():
    """Returns the cached configuration dictionary."""
    return CONFIG


def _check_seed(seed, source):
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ConfigError(f"{source} must be an integer or null, got {seed!r}.")
    if seed < 0:
        raise ConfigError(f"{source} must be a non-negative integer, got {seed}.")
    return seed


def get_seed(config=None, override=None):
    """Resolves the RNG seed for a run.

    Precedence is: explicit override, the AQI_SIM_SEED environment variable,
    then `simulation.seed` from the config. Returns None when no seed is set,
    which means the generator draws fresh entropy.

    Raises:
        ConfigError: If the chosen value is not a non-negative integer.
    """
    if override is not None:
        return _check_seed(override, "--seed")
    env_seed = os.getenv(SEED_ENV_VAR)
    if env_seed not in (None, ''):
        try:
            value = int(env_seed)
        except ValueError as e:
            raise ConfigError(f"{SEED_ENV_VAR} must be an integer, got {env_seed!r}.") from e
        return _check_seed(value, SEED_ENV_VAR)
    if config is None:
        config = CONFIG
    seed = (config.get('simulation') or {}).get('seed')
    if seed is None:
        return None
    return _check_seed(seed, "simulation.seed")
