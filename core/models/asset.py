"""
Asset model for generated media
"""
import uuid
from datetime import datetime
from . import db


class Asset(db.Model):
    """Generated image or video attached to a prompt"""

    __tablename__ = 'assets'

    id = db.Column(db.String(36), primary_key=True, default=lambda: uuid.uuid4().hex)
    prompt_id = db.Column('promptId', db.String(36), db.ForeignKey('prompts.id', ondelete='CASCADE'),
                          nullable=False, index=True)

    type = db.Column(db.String(20), nullable=False)  # IMAGE or VIDEO
    url = db.Column(db.Text, nullable=False)
    provider = db.Column(db.String(20), nullable=False)  # MIDJOURNEY or VEO

    # Flattened media metadata
    width = db.Column(db.Integer, nullable=True)
    height = db.Column(db.Integer, nullable=True)
    duration = db.Column(db.Integer, nullable=True)
    file_size = db.Column('fileSize', db.Integer, nullable=True)
    mime_type = db.Column('mimeType', db.String(100), nullable=True)

    created_at = db.Column('createdAt', db.DateTime, nullable=False, default=datetime.utcnow)

    prompt = db.relationship('Prompt', back_populates='assets')

    def __repr__(self):
        return f'<Asset {self.provider}:{self.type}>'
