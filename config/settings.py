"""
Unified configuration settings for Prompt Studio
"""
import logging
import os
from pathlib import Path
from typing import Dict, Any, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _load_env_file() -> Optional[str]:
    """
    Load the .env file into the process environment.

    Priority:
    1) ENV_FILE (explicit path)
    2) CWD/.env
    3) project root .env
    """
    candidates = []
    env_file_override = os.environ.get("ENV_FILE")
    if env_file_override:
        candidates.append(Path(env_file_override))
    candidates.extend([Path.cwd() / ".env", Path(__file__).resolve().parent.parent / ".env"])

    for candidate in candidates:
        try:
            if candidate.is_file():
                load_dotenv(dotenv_path=str(candidate), override=False)
                return str(candidate)
        except OSError:
            continue
    return None


def _env_int(name: str, default: int) -> int:
    """Read an integer setting; unset or empty falls back to the default"""
    return int(os.environ.get(name) or default)


ENV_FILE_PATH = _load_env_file()

# Database Configuration
DATABASE_CONFIG = {
    'DATABASE_URL': os.environ.get('DATABASE_URL', ''),
    'DB_USER': os.environ.get('DB_USER', ''),
    'DB_PASSWORD': os.environ.get('DB_PASSWORD', ''),
    'DB_HOST': os.environ.get('DB_HOST', ''),
    'DB_PORT': os.environ.get('DB_PORT', ''),
    'DB_NAME': os.environ.get('DB_NAME', ''),
    'SQLALCHEMY_ECHO': os.environ.get('SQLALCHEMY_ECHO', 'false'),
}

# Flask Configuration
FLASK_CONFIG = {
    'SECRET_KEY': os.environ.get('SECRET_KEY', 'your-secret-key-change-this'),
}

# Server Configuration
SERVER_CONFIG = {
    'HOST': os.environ.get('SERVER_HOST', '0.0.0.0'),
    'PORT': _env_int('SERVER_PORT', 8088),
    'DEBUG': os.environ.get('FLASK_DEBUG', 'false').lower() == 'true',
    'LOG_LEVEL': os.environ.get('LOG_LEVEL', 'INFO').upper(),
}


def get_config() -> Dict[str, Any]:
    """Get all configuration settings as a single dictionary"""
    config = {}
    config.update(DATABASE_CONFIG)
    config.update(FLASK_CONFIG)
    config.update(SERVER_CONFIG)
    return config
