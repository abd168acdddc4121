"""
Prompt API routes
"""
import logging
from flask import Blueprint, jsonify, request
from core.adapters import to_frontend_assets, to_frontend_prompts
from core.models import db
from core.services.prompt import get_prompt_service

logger = logging.getLogger(__name__)

prompts_bp = Blueprint('prompts', __name__, url_prefix='/api')


@prompts_bp.route('/prompts', methods=['GET'])
def list_prompts():
    """List the prompts of one project, including their assets."""
    # The id is used verbatim; only a missing or empty value is rejected
    project_id = request.args.get('projectId')
    if not project_id:
        return jsonify({'error': 'Missing required parameter: projectId'}), 400

    try:
        rows = get_prompt_service().list_prompts_for_project(project_id)
        prompts = to_frontend_prompts(rows)
        for prompt, item in zip(rows, prompts):
            if prompt.assets:
                item['assets'] = to_frontend_assets(prompt.assets)
        return jsonify(prompts)
    except Exception as exc:
        logger.error(f"Failed to fetch prompts: {exc}")
        try:
            db.session.rollback()
        except Exception as rollback_exc:
            logger.error(f"Session rollback failed: {rollback_exc}")
        return jsonify({
            'error': 'Failed to fetch prompts',
            'message': str(exc) or 'Unknown error'
        }), 500
