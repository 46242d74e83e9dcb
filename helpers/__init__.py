"""
Content Assistant Helpers Package

This package contains the building blocks the content operations are made of:

- ai_models: Generative-text backends (Gemini, DeepSeek) behind one interface
- platforms: Platform enum with per-platform guidance and length limits
- prompts: Prompt rendering for post generation and editing
- content_diff: Lexical change estimate between two versions of a post
"""

from .ai_models import AIModel, DEFAULT_MODEL, generate_text, get_text_model
from .platforms import (
    Platform,
    PlatformConfig,
    get_platform_config,
    get_supported_platforms,
    post_length,
    validate_post_length,
)
from .prompts import render_create_prompt, render_update_prompt
from .content_diff import (
    SIGNIFICANT_CHANGE_THRESHOLD,
    calculate_content_difference,
    is_significant_change,
)

__all__ = [
    "AIModel",
    "DEFAULT_MODEL",
    "generate_text",
    "get_text_model",
    "Platform",
    "PlatformConfig",
    "get_platform_config",
    "get_supported_platforms",
    "post_length",
    "validate_post_length",
    "render_create_prompt",
    "render_update_prompt",
    "SIGNIFICANT_CHANGE_THRESHOLD",
    "calculate_content_difference",
    "is_significant_change",
]
