"""
Project model for prompt projects
"""
import uuid
from datetime import datetime
from . import db

class Project(db.Model):
    """A named collection of prompts"""

    __tablename__ = 'projects'

    id = db.Column(db.String(36), primary_key=True, default=lambda: uuid.uuid4().hex)
    name = db.Column(db.String(255), nullable=False)
    created_at = db.Column('createdAt', db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column('updatedAt', db.DateTime, nullable=False, default=datetime.utcnow,
                           onupdate=datetime.utcnow)

    # Relationships
    prompts = db.relationship('Prompt', back_populates='project', lazy=True, cascade='all, delete-orphan')

    def __repr__(self):
        return f'<Project {self.name}>'
