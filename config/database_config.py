import logging
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = 'sqlite:///prompt_studio.db'


class DatabaseConfig:
    """Relational store configuration"""

    @staticmethod
    def get_database_url(app_configs: Mapping[str, Any]) -> str:
        """Resolve the SQLAlchemy connection URL"""
        # DATABASE_URL wins over the individual parts
        database_url = app_configs.get('DATABASE_URL')
        if database_url:
            return database_url

        db_host = app_configs.get('DB_HOST', '')
        db_name = app_configs.get('DB_NAME', '')
        if not db_host or not db_name:
            logger.info(f"DATABASE_URL not set, falling back to {DEFAULT_DATABASE_URL}")
            return DEFAULT_DATABASE_URL

        db_user = app_configs.get('DB_USER', '')
        db_password = app_configs.get('DB_PASSWORD', '')
        db_port = app_configs.get('DB_PORT', '') or '5432'

        return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"

    @staticmethod
    def get_config(app_configs: Mapping[str, Any]) -> Dict[str, Any]:
        """Build the Flask-SQLAlchemy configuration dictionary"""
        database_url = DatabaseConfig.get_database_url(app_configs)
        config = {'SQLALCHEMY_DATABASE_URI': database_url, 'SQLALCHEMY_TRACK_MODIFICATIONS': False,
                  'SQLALCHEMY_ECHO': str(app_configs.get('SQLALCHEMY_ECHO', 'false')).lower() == 'true'}
        if not database_url.startswith('sqlite'):
            config['SQLALCHEMY_ENGINE_OPTIONS'] = {
                'pool_size': 10,
                'pool_recycle': 3600,
                'pool_pre_ping': True
            }
        return config
