"""
Project service for read-side project queries
"""
import logging
from typing import List, Tuple

from sqlalchemy import func

from core.models import Project, Prompt, db

logger = logging.getLogger(__name__)


class ProjectService:
    """Read access to stored projects"""

    def list_projects_with_prompt_counts(self) -> List[Tuple[Project, int]]:
        """Return every project, most recently updated first, paired with its prompt count.

        Counting happens in the same statement through an outer join, so
        projects without prompts come back with a count of 0.
        """
        prompt_count = func.count(Prompt.id).label('prompt_count')
        rows = (db.session.query(Project, prompt_count)
                .outerjoin(Prompt, Prompt.project_id == Project.id)
                .group_by(Project.id)
                .order_by(Project.updated_at.desc())
                .all())
        logger.debug(f"Loaded {len(rows)} projects")
        return [(project, int(count)) for project, count in rows]


# Global instance
_project_service = None

def get_project_service() -> ProjectService:
    """Get global project service instance"""
    global _project_service
    if _project_service is None:
        _project_service = ProjectService()
    return _project_service
