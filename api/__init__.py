"""
API package
"""
from .projects import projects_bp
from .prompts import prompts_bp

__all__ = ['projects_bp', 'prompts_bp']
