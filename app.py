import logging
from typing import Any, Mapping, Optional

import click
from flask import Flask
from sqlalchemy.engine import make_url

from api import projects_bp, prompts_bp
from config.database_config import DatabaseConfig
from config.settings import ENV_FILE_PATH, get_config
from core.models import db

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask application.

    ``overrides`` replaces any loaded setting, e.g. ``{'DATABASE_URL': 'sqlite://'}``.
    """
    app_configs = get_config()
    if overrides:
        app_configs.update(overrides)

    app = Flask(__name__)
    app.config.update(app_configs)
    app.config.update(DatabaseConfig.get_config(app_configs))

    db.init_app(app)

    app.register_blueprint(projects_bp)
    app.register_blueprint(prompts_bp)

    @app.cli.command('init-db')
    def init_db_command():
        """Create all database tables."""
        db.create_all()
        click.echo("Database tables created.")

    masked_url = make_url(app.config['SQLALCHEMY_DATABASE_URI']).render_as_string(hide_password=True)
    logger.info(f"Application created, database: {masked_url}")
    return app


# --- Entry point ---
if __name__ == '__main__':
    settings = get_config()
    logging.basicConfig(level=getattr(logging, settings['LOG_LEVEL'], logging.INFO),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        handlers=[logging.StreamHandler()])
    if ENV_FILE_PATH:
        logger.info(f"Loaded settings from {ENV_FILE_PATH}")
    else:
        logger.warning("No .env file found (set ENV_FILE to point at one), using environment and defaults.")

    app = create_app()
    with app.app_context():
        db.create_all()

    logger.info(f"Starting Prompt Studio API on {settings['HOST']}:{settings['PORT']}")
    logger.info(f"Projects: http://localhost:{settings['PORT']}/api/projects")
    logger.info(f"Prompts:  http://localhost:{settings['PORT']}/api/prompts?projectId=<id>")
    app.run(host=settings['HOST'], port=settings['PORT'], debug=settings['DEBUG'])
