"""
Prompt model
"""
import uuid
from datetime import datetime
from . import db


class Prompt(db.Model):
    """A generation prompt that belongs to exactly one project"""

    __tablename__ = 'prompts'

    id = db.Column(db.String(36), primary_key=True, default=lambda: uuid.uuid4().hex)
    project_id = db.Column('projectId', db.String(36), db.ForeignKey('projects.id', ondelete='CASCADE'),
                           nullable=False, index=True)

    type = db.Column(db.String(20), nullable=False)  # IMAGE or VIDEO
    content = db.Column(db.Text, nullable=False)
    user_feedback = db.Column('userFeedback', db.Text, nullable=True)
    ai_comment = db.Column('aiComment', db.Text, nullable=True)
    mastra_message_id = db.Column('mastraMessageId', db.String(100), unique=True, nullable=True, index=True)

    # Derivative prompts point back at the prompt they were derived from
    parent_id = db.Column('parentId', db.String(36), db.ForeignKey('prompts.id'), nullable=True, index=True)

    created_at = db.Column('createdAt', db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column('updatedAt', db.DateTime, nullable=False, default=datetime.utcnow,
                           onupdate=datetime.utcnow)

    # Relationships
    project = db.relationship('Project', back_populates='prompts')
    parent = db.relationship('Prompt', remote_side=[id], backref='derivatives')
    assets = db.relationship('Asset', back_populates='prompt', lazy=True, cascade='all, delete-orphan',
                             order_by='Asset.created_at')

    def __repr__(self):
        return f'<Prompt {self.type}:{self.id}>'
