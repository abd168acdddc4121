"""
Type adapters

Convert stored entities (upper-case enum strings, flattened asset metadata,
NULL columns) into the JSON shape served to API consumers (lower-case enum
strings, nested metadata, camelCase keys, absent optionals).
"""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from core.models import Asset, Project, Prompt


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Serialize a datetime as ISO-8601 UTC with millisecond precision, e.g. 2025-01-01T00:00:00.000Z.

    Naive datetimes are treated as UTC, which is how the models store them.
    """
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'


# Enum converters

def to_frontend_prompt_type(prompt_type: str) -> str:
    """'IMAGE' -> 'image'"""
    return prompt_type.lower()


def to_frontend_asset_type(asset_type: str) -> str:
    return asset_type.lower()


def to_frontend_asset_provider(provider: str) -> str:
    return provider.lower()


# Entity converters

def to_frontend_project(project: Project) -> Dict[str, Any]:
    """Convert a stored project into its external representation.

    Related-record counts are not part of this shape; callers attach them.
    """
    return {
        'id': project.id,
        'name': project.name,
        'createdAt': format_timestamp(project.created_at),
        'updatedAt': format_timestamp(project.updated_at),
    }


def to_frontend_prompt(prompt: Prompt) -> Dict[str, Any]:
    """Convert a stored prompt into its external representation.

    NULL optional columns are left out of the result. ``assets`` always starts
    empty; the caller fills it when the relation was loaded. ``parent`` is
    reduced to ``{id, content}``.
    """
    data = {
        'id': prompt.id,
        'projectId': prompt.project_id,
        'type': to_frontend_prompt_type(prompt.type),
        'content': prompt.content,
        'createdAt': format_timestamp(prompt.created_at),
        'updatedAt': format_timestamp(prompt.updated_at),
        'assets': [],
    }
    optional = {
        'userFeedback': prompt.user_feedback,
        'aiComment': prompt.ai_comment,
        'mastraMessageId': prompt.mastra_message_id,
        'parentId': prompt.parent_id,
    }
    data.update({key: value for key, value in optional.items() if value is not None})

    if prompt.parent is not None:
        data['parent'] = {'id': prompt.parent.id, 'content': prompt.parent.content}
    return data


def to_frontend_asset(asset: Asset) -> Dict[str, Any]:
    """Convert a stored asset, nesting its flattened metadata columns"""
    metadata = {}
    if asset.width is not None:
        metadata['width'] = asset.width
    if asset.height is not None:
        metadata['height'] = asset.height
    if asset.duration is not None:
        metadata['duration'] = asset.duration
    if asset.file_size is not None:
        metadata['fileSize'] = asset.file_size
    if asset.mime_type is not None:
        metadata['mimeType'] = asset.mime_type

    return {
        'id': asset.id,
        'promptId': asset.prompt_id,
        'type': to_frontend_asset_type(asset.type),
        'url': asset.url,
        'provider': to_frontend_asset_provider(asset.provider),
        'metadata': metadata,
        'createdAt': format_timestamp(asset.created_at),
    }


# Batch converters

def to_frontend_projects(projects: Iterable[Project]) -> List[Dict[str, Any]]:
    return [to_frontend_project(p) for p in projects]


def to_frontend_prompts(prompts: Iterable[Prompt]) -> List[Dict[str, Any]]:
    return [to_frontend_prompt(p) for p in prompts]


def to_frontend_assets(assets: Iterable[Asset]) -> List[Dict[str, Any]]:
    return [to_frontend_asset(a) for a in assets]
