"""
Shared fixtures and factory helpers
"""
import sys
from datetime import datetime
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from app import create_app
from core.models import Asset, Project, Prompt, db


@pytest.fixture
def app():
    """Application bound to a fresh in-memory SQLite database"""
    app = create_app({'DATABASE_URL': 'sqlite://', 'TESTING': True})
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_project(app):
    """Insert a project; timestamps accept ISO strings"""
    def _make(name='Project', created_at='2024-01-01T00:00:00', updated_at=None, **kwargs):
        project = Project(name=name,
                          created_at=datetime.fromisoformat(created_at),
                          updated_at=datetime.fromisoformat(updated_at or created_at),
                          **kwargs)
        db.session.add(project)
        db.session.commit()
        return project
    return _make


@pytest.fixture
def make_prompt(app):
    def _make(project, content='a castle at dawn', type='IMAGE', created_at='2024-01-01T00:00:00', **kwargs):
        prompt = Prompt(project_id=project.id, content=content, type=type,
                        created_at=datetime.fromisoformat(created_at),
                        updated_at=datetime.fromisoformat(created_at),
                        **kwargs)
        db.session.add(prompt)
        db.session.commit()
        return prompt
    return _make


@pytest.fixture
def make_asset(app):
    def _make(prompt, url='https://cdn.example.com/a.png', type='IMAGE', provider='MIDJOURNEY',
              created_at='2024-01-01T00:00:00', **kwargs):
        asset = Asset(prompt_id=prompt.id, url=url, type=type, provider=provider,
                      created_at=datetime.fromisoformat(created_at), **kwargs)
        db.session.add(asset)
        db.session.commit()
        return asset
    return _make
