"""
SocialContent model: the current version of a generated post.
"""

from datetime import datetime, timezone
from extensions import db


class SocialContent(db.Model):
    __tablename__ = "social_content"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    platform = db.Column(db.Text, nullable=False)  # twitter, linkedin, facebook, instagram
    content = db.Column(db.Text, nullable=False)
    status = db.Column(db.Text, nullable=False, default="draft")
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship("User", back_populates="social_content")
    history = db.relationship(
        "SocialContentHistory",
        back_populates="social_content",
        lazy="dynamic",
        cascade="all, delete-orphan",
        order_by="SocialContentHistory.id.desc()",
    )

    @classmethod
    def get_for_user(cls, content_id, user_id):
        """Return the content row if it exists and belongs to the user, else None."""
        return cls.query.filter_by(id=content_id, user_id=user_id).first()

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "platform": self.platform,
            "content": self.content,
            "status": self.status,
            "createdAt": _isoformat(self.created_at),
            "updatedAt": _isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<SocialContent {self.id}: {self.platform} ({self.status})>"


def _isoformat(value):
    # Columns hold naive UTC datetimes
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc).isoformat()
