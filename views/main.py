from flask import Blueprint, render_template, request
from flask_login import current_user, login_required
import logging

from helpers.ai_models import AIModel, DEFAULT_MODEL
from helpers.platforms import Platform, get_platform_config
from services.errors import OperationError
from services.router import create_caller

logger = logging.getLogger(__name__)

# Create a blueprint for main routes
bp = Blueprint("main", __name__)

MODEL_LABELS = {AIModel.GEMINI: "Gemini", AIModel.DEEPSEEK: "DeepSeek"}


def _form_context(**overrides):
    context = {
        "platforms": [(p.value, get_platform_config(p).name) for p in Platform],
        "models": [(m.value, MODEL_LABELS[m]) for m in AIModel],
        "platform": Platform.TWITTER.value,
        "model": DEFAULT_MODEL.value,
        "prompt": "",
        "result": "",
        "error": "",
    }
    context.update(overrides)
    return context


@bp.route("/", methods=["GET", "POST"])
@login_required
def index():
    """Create-post form: submit a generation request and show the result."""
    if request.method == "GET":
        return render_template("create_post.html", **_form_context())

    payload = {
        "platform": request.form.get("platform", ""),
        "prompt": request.form.get("prompt", ""),
        "model": request.form.get("model") or DEFAULT_MODEL.value,
    }

    try:
        data = create_caller(current_user).createPost(payload)
    except OperationError as e:
        logger.info(f"createPost from form failed for user {current_user.id}: {e.message}")
        return (
            render_template("create_post.html", **_form_context(error=e.message, **payload)),
            e.status,
        )

    return render_template(
        "create_post.html",
        **_form_context(result=data["content"], content_id=data["contentId"], **payload),
    )
