"""
Configuration management for the ScriptHub site
Handles environment-based configuration with defaults
"""

import os
import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


class Settings:
    """Application settings"""

    # Server
    PORT = int(os.environ.get('PORT', 3000))
    HOST = os.environ.get('HOST', '0.0.0.0')

    # Security
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'dev_secret')

    # Admin credentials (plain values, single shared account)
    ADMIN_USER = os.environ.get('ADMIN_USER', 'admin')
    ADMIN_PASS = os.environ.get('ADMIN_PASS', 'admin123')

    # Database
    DB_DIR = os.environ.get('DB_DIR', str(BASE_DIR / 'db'))
    DB_FILE = os.environ.get('DB_FILE', os.path.join(DB_DIR, 'data.db'))
    LEGACY_DB_FILE = str(BASE_DIR / 'data.db')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Seeded on first boot when the categories table is empty
    DEFAULT_CATEGORIES = ['Combat', 'Utilidades', 'Teleport', 'UI', 'Misceláneo']

    OVERRIDABLE = (
        'PORT', 'HOST', 'SECRET_KEY', 'ADMIN_USER', 'ADMIN_PASS',
        'DB_DIR', 'DB_FILE', 'LOG_LEVEL', 'DEFAULT_CATEGORIES',
    )

    @staticmethod
    def load_config(config_path=None):
        """Load configuration overrides from config.py file"""
        try:
            import importlib.util

            config_path = Path(config_path) if config_path else BASE_DIR / 'config.py'
            if config_path.exists():
                spec = importlib.util.spec_from_file_location("config", config_path)
                config_module = importlib.util.module_from_spec(spec)
                spec.loader.exec_module(config_module)

                for key in Settings.OVERRIDABLE:
                    if hasattr(config_module, key):
                        setattr(Settings, key, getattr(config_module, key))

                # A DB_DIR override moves the default file along with it
                if hasattr(config_module, 'DB_DIR') and not hasattr(config_module, 'DB_FILE'):
                    Settings.DB_FILE = os.path.join(Settings.DB_DIR, 'data.db')

                return True
            return False
        except Exception as e:
            logger.error(f"Error loading config.py: {e}")
            return False


# Load config on import
Settings.load_config()
