"""
Core models package
"""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# Import all models
from .project import Project
from .prompt import Prompt
from .asset import Asset

__all__ = ['db', 'Project', 'Prompt', 'Asset']
