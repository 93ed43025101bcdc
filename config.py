import json
import os

from errors import ConfigError
from logging_config import get_logger

logger = get_logger(__name__)

CONFIG_FILE = 'config.json'

DEFAULTS = {
    'DB_HOST': 'localhost',
    'DB_PORT': 3306,
    'DB_USER': 'root',
    'DB_PASSWORD': '',
    'DB_NAME': 'simplecrud',
    'DB_CONNECT_TIMEOUT': 10,
    'PASSWORD_HASHING': True,
    'BCRYPT_ROUNDS': 12,
    'LOG_LEVEL': 'INFO',
    'LOG_DIR': 'logs',
    'ADMIN_USERNAME': 'admin',
    'ADMIN_PASSWORD': 'admin123',
}


def _check_type(path, key, value):
    expected = type(DEFAULTS[key])
    # bool is an int subclass; keep them apart
    if expected is int and isinstance(value, bool):
        raise ConfigError(path, f"{key} must be an integer")
    if not isinstance(value, expected):
        raise ConfigError(path, f"{key} must be of type {expected.__name__}")


def load_config(path=CONFIG_FILE):
    """
    Load settings from config.json on top of DEFAULTS.
    A missing file is fine; the defaults are used as-is.
    """
    config = dict(DEFAULTS)
    if not os.path.exists(path):
        logger.info(f"Config file {path} not found, using defaults")
        return config
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
            error_line = lines[e.lineno - 1] if e.lineno <= len(lines) else "Unknown"
        raise ConfigError(path, f"{e.msg} at line {e.lineno}: {error_line.strip()}")

    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a JSON object")

    for key, value in data.items():
        if key not in DEFAULTS:
            logger.warning(f"Ignoring unknown config key {key}")
            continue
        _check_type(path, key, value)
        config[key] = value

    if config['BCRYPT_ROUNDS'] < 4 or config['BCRYPT_ROUNDS'] > 31:
        raise ConfigError(path, "BCRYPT_ROUNDS must be between 4 and 31")
    return config
