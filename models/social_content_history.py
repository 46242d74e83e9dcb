from datetime import datetime, timezone
from extensions import db


class SocialContentHistory(db.Model):
    """Append-only record of one AI edit applied to a SocialContent row."""

    __tablename__ = "social_content_history"

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    # Foreign keys
    content_id = db.Column(
        db.Integer,
        db.ForeignKey("social_content.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_by = db.Column(
        db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    # Edit details
    previous_content = db.Column(db.Text, nullable=False)
    updated_content = db.Column(db.Text, nullable=False)
    update_prompt = db.Column(db.Text, nullable=False)
    model_used = db.Column(db.Text, nullable=False)  # 'gemini' or 'deepseek'

    # Relationships
    social_content = db.relationship("SocialContent", back_populates="history")
    author = db.relationship("User")

    def __repr__(self):
        return f"<SocialContentHistory {self.id}: content {self.content_id} via {self.model_used}>"

    def to_dict(self):
        return {
            "id": self.id,
            "contentId": self.content_id,
            "previousContent": self.previous_content,
            "updatedContent": self.updated_content,
            "updatePrompt": self.update_prompt,
            "modelUsed": self.model_used,
            "createdBy": self.created_by,
            "createdAt": self.created_at.replace(tzinfo=timezone.utc).isoformat(),
        }
