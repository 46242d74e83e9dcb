"""
Platform Guidance

Closed set of social platforms the assistant writes for, each paired with the
style guidance injected into prompts and, where the platform enforces one, a
hard character limit.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Tuple


class Platform(Enum):
    """Supported social media platforms."""

    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"


@dataclass(frozen=True)
class PlatformConfig:
    """Platform-specific configuration."""

    name: str
    guidelines: str
    max_length: Optional[int] = None


PLATFORM_CONFIGS = {
    Platform.TWITTER: PlatformConfig(
        name="Twitter",
        guidelines="280 characters max, casual tone, use hashtags",
        max_length=280,
    ),
    Platform.LINKEDIN: PlatformConfig(
        name="LinkedIn",
        guidelines="Professional tone, industry-focused, longer form",
    ),
    Platform.FACEBOOK: PlatformConfig(
        name="Facebook",
        guidelines="Engaging, conversational, can include calls-to-action",
    ),
    Platform.INSTAGRAM: PlatformConfig(
        name="Instagram",
        guidelines="Visual-first description, heavy on hashtags, emoji-friendly",
    ),
}


def get_platform_config(platform: Platform) -> PlatformConfig:
    """Get configuration for a specific platform."""
    return PLATFORM_CONFIGS[platform]


def get_supported_platforms() -> list[Platform]:
    """Get list of supported platforms."""
    return list(PLATFORM_CONFIGS.keys())


def post_length(content: str) -> int:
    """Length of a post in UTF-16 code units, the unit platform limits use."""
    return len(content.encode("utf-16-le")) // 2


def validate_post_length(content: str, platform: Platform) -> Tuple[bool, int]:
    """
    Validate if a post is within platform character limits.

    Args:
        content: The post content (already trimmed).
        platform: The social platform to validate against.

    Returns:
        Tuple of (is_valid, current_length). Platforms without a hard limit
        always validate.
    """
    current_length = post_length(content)
    max_length = get_platform_config(platform).max_length

    if max_length is None:
        return True, current_length

    return current_length <= max_length, current_length
