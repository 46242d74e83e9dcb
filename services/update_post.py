"""
Update-post operation.

Edits an existing social post with an AI backend and records the edit. The
caller supplies the current text and an instruction; the selected backend
rewrites the post under platform guidance, and the result either replaces an
existing row (recording a history entry) or is stored as a new draft.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from extensions import db
from models import SocialContent, SocialContentHistory
from helpers.ai_models import AIModel, DEFAULT_MODEL, generate_text
from helpers.platforms import Platform, get_platform_config, validate_post_length
from helpers.prompts import render_update_prompt
from helpers.content_diff import is_significant_change
from services.errors import BadRequestError, InternalServerError, NotFoundError
from services.validation import (
    optional_bool,
    optional_int,
    require_choice,
    require_payload,
    require_text,
)

logger = logging.getLogger(__name__)


@dataclass
class UpdatePostInput:
    """Validated input of the updatePost operation."""

    platform: Platform
    original_content: str
    update_prompt: str
    model: AIModel = DEFAULT_MODEL
    save_history: bool = True
    content_id: Optional[int] = None

    @classmethod
    def from_dict(cls, payload):
        payload = require_payload(payload)
        return cls(
            content_id=optional_int(payload, "contentId"),
            platform=require_choice(payload, "platform", Platform),
            original_content=require_text(
                payload, "originalContent", "Original content"
            ),
            update_prompt=require_text(payload, "updatePrompt", "Update prompt"),
            model=require_choice(payload, "model", AIModel, default=DEFAULT_MODEL),
            save_history=optional_bool(payload, "saveHistory", default=True),
        )

    @property
    def updates_in_place(self):
        """Whether this request edits an existing row and records history."""
        return bool(self.content_id) and self.save_history


@dataclass
class UpdatePostResult:
    updated_content: str
    is_significant_change: bool
    content_id: int

    def to_dict(self):
        return {
            "updatedContent": self.updated_content,
            "isSignificantChange": self.is_significant_change,
            "contentId": self.content_id,
        }


def update_social_post(user, payload):
    """
    Rewrite a post with the selected AI backend and persist the result.

    Args:
        user: The acting user (anything with an ``id``).
        payload: Request dict with contentId, platform, originalContent,
            updatePrompt, model and saveHistory.

    Returns:
        Dict with updatedContent, isSignificantChange and contentId.

    Raises:
        BadRequestError: Invalid input, or output over the platform limit.
        NotFoundError: contentId does not name one of the user's posts.
        InternalServerError: The backend produced no text, or persisting failed.
    """
    data = UpdatePostInput.from_dict(payload)

    logger.info(
        f"Updating {data.platform.value} post for user_id: {user.id}, content_id: {data.content_id}, model: {data.model.value}"
    )

    existing = None
    if data.updates_in_place:
        try:
            existing = SocialContent.get_for_user(data.content_id, user.id)
        except Exception as e:
            db.session.rollback()
            logger.exception(f"Error loading content {data.content_id}: {e}")
            raise InternalServerError(
                "Failed to update social media content", cause=e
            ) from e
        if existing is None:
            logger.warning(
                f"User {user.id} tried to update missing content {data.content_id}"
            )
            raise NotFoundError(f"Content with ID {data.content_id} not found")

    prompt = render_update_prompt(
        data.platform, data.original_content, data.update_prompt
    )
    text = generate_text(prompt, data.model)

    if not text or not text.strip():
        logger.error(
            f"{data.model.value} returned no content for user_id: {user.id}, platform: {data.platform.value}"
        )
        raise InternalServerError("Failed to update social media content")

    updated_content = text.strip()

    is_valid, length = validate_post_length(updated_content, data.platform)
    if not is_valid:
        platform_config = get_platform_config(data.platform)
        logger.warning(
            f"Updated {data.platform.value} post was too long ({length}/{platform_config.max_length}); nothing saved."
        )
        raise BadRequestError(
            f"Updated content exceeds {platform_config.name}'s character limit"
        )

    significant = is_significant_change(data.original_content, updated_content)

    try:
        if existing is not None:
            history = SocialContentHistory(
                content_id=existing.id,
                previous_content=data.original_content,
                updated_content=updated_content,
                update_prompt=data.update_prompt,
                model_used=data.model.value,
                created_by=user.id,
            )
            db.session.add(history)

            existing.content = updated_content
            existing.updated_at = datetime.utcnow()
            db.session.commit()

            content_id = existing.id
            logger.info(f"Recorded history {history.id} and updated content {content_id}")
        else:
            new_content = SocialContent(
                user_id=user.id,
                platform=data.platform.value,
                content=updated_content,
                status="draft",
            )
            db.session.add(new_content)
            db.session.commit()

            content_id = new_content.id
            logger.info(f"Created draft content {content_id} from update")
    except Exception as e:
        db.session.rollback()
        logger.exception(f"Error saving updated social media content: {e}")
        raise InternalServerError(
            "Failed to update social media content", cause=e
        ) from e

    return UpdatePostResult(
        updated_content=updated_content,
        is_significant_change=significant,
        content_id=content_id,
    ).to_dict()
