"""
Project API routes
"""
import logging
from flask import Blueprint, jsonify
from core.adapters import to_frontend_projects
from core.models import db
from core.services.project import get_project_service

logger = logging.getLogger(__name__)

projects_bp = Blueprint('projects', __name__, url_prefix='/api')


@projects_bp.route('/projects', methods=['GET'])
def list_projects():
    """List projects, most recently updated first, with their prompt counts."""
    try:
        rows = get_project_service().list_projects_with_prompt_counts()
        projects = []
        for project, prompt_count in rows:
            item = to_frontend_projects([project])[0]
            item['_count'] = {'prompts': prompt_count}
            projects.append(item)
        return jsonify(projects)
    except Exception as exc:
        logger.error(f"Failed to fetch projects: {exc}")
        try:
            db.session.rollback()
        except Exception as rollback_exc:
            logger.error(f"Session rollback failed: {rollback_exc}")
        return jsonify({
            'error': 'Failed to fetch projects',
            'message': str(exc) or 'Unknown error'
        }), 500
