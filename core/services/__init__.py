"""
Core services package
"""
from .project import ProjectService, get_project_service
from .prompt import PromptService, get_prompt_service

__all__ = ['ProjectService', 'PromptService', 'get_project_service', 'get_prompt_service']
