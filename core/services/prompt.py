"""
Prompt service for read-side prompt queries
"""
import logging
from typing import List

from sqlalchemy.orm import selectinload

from core.models import Prompt

logger = logging.getLogger(__name__)


class PromptService:
    """Read access to stored prompts"""

    def list_prompts_for_project(self, project_id: str) -> List[Prompt]:
        """Prompts of one project, oldest first, with assets and parent loaded"""
        prompts = (Prompt.query
                   .filter_by(project_id=project_id)
                   .options(selectinload(Prompt.assets), selectinload(Prompt.parent))
                   .order_by(Prompt.created_at.asc())
                   .all())
        logger.debug(f"Loaded {len(prompts)} prompts for project {project_id}")
        return prompts


# Global instance
_prompt_service = None

def get_prompt_service() -> PromptService:
    """Get global prompt service instance"""
    global _prompt_service
    if _prompt_service is None:
        _prompt_service = PromptService()
    return _prompt_service
