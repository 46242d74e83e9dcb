from flask import render_template

from helpers.platforms import Platform, get_platform_config


def render_update_prompt(platform: Platform, original_content, update_prompt):
    """
    Render the editing instruction sent to the AI backend for an update.

    Args:
        platform: The Platform the post is written for.
        original_content: The current post text.
        update_prompt: The user's instruction describing the change.

    Returns:
        Rendered prompt string.
    """
    return render_template(
        "prompts/update_post.txt",
        platform=platform.value,
        platform_config=get_platform_config(platform),
        original_content=original_content,
        update_prompt=update_prompt,
    )


def render_create_prompt(platform: Platform, prompt):
    """Render the generation instruction sent to the AI backend for a new post."""
    return render_template(
        "prompts/create_post.txt",
        platform=platform.value,
        platform_config=get_platform_config(platform),
        prompt=prompt,
    )
