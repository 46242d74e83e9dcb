"""
Create-post operation: generate a new draft post from a topic prompt.
"""

import logging
from dataclasses import dataclass

from extensions import db
from models import SocialContent
from helpers.ai_models import AIModel, DEFAULT_MODEL, generate_text
from helpers.platforms import Platform, get_platform_config, validate_post_length
from helpers.prompts import render_create_prompt
from services.errors import BadRequestError, InternalServerError
from services.validation import require_choice, require_payload, require_text

logger = logging.getLogger(__name__)


@dataclass
class CreatePostInput:
    """Validated input of the createPost operation."""

    platform: Platform
    prompt: str
    model: AIModel = DEFAULT_MODEL

    @classmethod
    def from_dict(cls, payload):
        payload = require_payload(payload)
        return cls(
            platform=require_choice(payload, "platform", Platform),
            prompt=require_text(payload, "prompt", "Prompt"),
            model=require_choice(payload, "model", AIModel, default=DEFAULT_MODEL),
        )


def generate_social_post(user, payload):
    """
    Generate a post for a platform and store it as a new draft.

    Args:
        user: The acting user (anything with an ``id``).
        payload: Request dict with platform, prompt and model.

    Returns:
        Dict with content, contentId and platform.

    Raises:
        BadRequestError: Invalid input, or output over the platform limit.
        InternalServerError: The backend produced no text, or persisting failed.
    """
    data = CreatePostInput.from_dict(payload)

    logger.info(
        f"Generating {data.platform.value} post for user_id: {user.id} with {data.model.value}"
    )

    text = generate_text(render_create_prompt(data.platform, data.prompt), data.model)
    if not text or not text.strip():
        logger.error(
            f"{data.model.value} returned no content for user_id: {user.id}, platform: {data.platform.value}"
        )
        raise InternalServerError("Failed to generate social media content")

    content = text.strip()

    is_valid, length = validate_post_length(content, data.platform)
    if not is_valid:
        platform_config = get_platform_config(data.platform)
        logger.warning(
            f"Generated {data.platform.value} post was too long ({length}/{platform_config.max_length}); nothing saved."
        )
        raise BadRequestError(
            f"Generated content exceeds {platform_config.name}'s character limit"
        )

    try:
        new_content = SocialContent(
            user_id=user.id,
            platform=data.platform.value,
            content=content,
            status="draft",
        )
        db.session.add(new_content)
        db.session.commit()
        logger.info(f"Created draft content {new_content.id} for user_id: {user.id}")
    except Exception as e:
        db.session.rollback()
        logger.exception(f"Error saving generated social media content: {e}")
        raise InternalServerError(
            "Failed to generate social media content", cause=e
        ) from e

    return {
        "content": content,
        "contentId": new_content.id,
        "platform": data.platform.value,
    }
