from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user
from models import SocialContent
from helpers.platforms import Platform
from services.errors import OperationError
from services.router import APP_ROUTER, create_caller
from tasks.generation import run_operation_task
import logging

logger = logging.getLogger(__name__)  # Initialize the logger for this module

# Create a blueprint for API routes
bp = Blueprint("api", __name__, url_prefix="/api")


def _unknown_operation(operation):
    return (
        jsonify(
            {
                "error": f"Unknown operation: {operation}. Valid operations: {sorted(APP_ROUTER)}",
                "code": "NOT_FOUND",
            }
        ),
        404,
    )


@bp.route("/<operation>", methods=["POST"])
@login_required
def call_operation(operation):
    """Dispatch a named operation through the router table."""
    if operation not in APP_ROUTER:
        return _unknown_operation(operation)

    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"error": "No data provided", "code": "BAD_REQUEST"}), 400

    try:
        result = create_caller(current_user).call(operation, payload)
    except OperationError as e:
        if e.cause is not None:
            logger.error(
                f"{operation} failed for user {current_user.id}: {e.message} (cause: {e.cause!r})"
            )
        return jsonify(e.to_dict()), e.status
    except Exception:
        logger.exception(f"Unexpected error in {operation} for user {current_user.id}")
        return (
            jsonify(
                {
                    "error": "An unexpected error occurred",
                    "code": "INTERNAL_SERVER_ERROR",
                }
            ),
            500,
        )

    return jsonify(result)


@bp.route("/<operation>/async", methods=["POST"])
@login_required
def call_operation_async(operation):
    """Dispatch a Celery task that runs a named operation in the background."""
    if operation not in APP_ROUTER:
        return _unknown_operation(operation)

    payload = request.get_json(silent=True)
    if payload is None:
        return jsonify({"error": "No data provided", "code": "BAD_REQUEST"}), 400

    try:
        task = run_operation_task.delay(
            operation=operation, user_id=current_user.id, payload=payload
        )
    except Exception as e:
        logger.error(f"Error dispatching {operation} task: {str(e)}", exc_info=True)
        return (
            jsonify(
                {
                    "error": f"An unexpected error occurred while starting {operation}",
                    "code": "INTERNAL_SERVER_ERROR",
                }
            ),
            500,
        )

    logger.info(
        f"Dispatched run_operation_task for {operation}, user_id: {current_user.id}, task_id: {task.id}"
    )
    return (
        jsonify(
            {
                "task_id": task.id,
                "operation": operation,
                "message": f"{operation} has started.",
            }
        ),
        202,
    )  # Accepted


@bp.route("/tasks/<task_id>", methods=["GET"])
@login_required
def task_status(task_id):
    """Check the status of a run_operation_task."""
    task = run_operation_task.AsyncResult(task_id)

    # Pending tasks carry no metadata yet; anything else must belong to the caller
    owner_id = (task.kwargs or {}).get("user_id")
    if owner_id is not None and owner_id != current_user.id:
        logger.warning(
            f"User {current_user.id} polled task {task_id} owned by user {owner_id}"
        )
        return (
            jsonify({"error": f"Task {task_id} not found", "code": "NOT_FOUND"}),
            404,
        )

    response_data = {"task_id": task_id, "status": task.state}

    logger.debug(f"Operation task {task_id} state: {task.state}")

    if task.state == "PENDING":
        response_data["message"] = "Operation is pending."
    elif task.state == "STARTED":
        response_data["message"] = "Operation is running."
    elif task.state == "FAILURE":
        response_data["message"] = f"Operation failed: {str(task.info)}"
        logger.error(f"Operation task {task_id} FAILED. Info: {task.info}")
    elif task.state == "SUCCESS":
        response_data["message"] = "Operation completed successfully."
        response_data["result"] = task.result
    else:
        response_data["message"] = f"Task is in an unknown state: {task.state}"
        logger.warning(f"Operation task {task_id} is in an UNKNOWN state: {task.state}")

    return jsonify(response_data)


@bp.route("/content", methods=["GET"])
@login_required
def list_content():
    """List the current user's posts, newest first."""
    platform = request.args.get("platform")

    query = SocialContent.query.filter_by(user_id=current_user.id)
    if platform:
        try:
            query = query.filter_by(platform=Platform(platform).value)
        except ValueError:
            return (
                jsonify(
                    {
                        "error": f"Invalid platform: {platform}. Valid options: {[p.value for p in Platform]}",
                        "code": "BAD_REQUEST",
                    }
                ),
                400,
            )

    items = query.order_by(SocialContent.updated_at.desc(), SocialContent.id.desc())
    return jsonify({"content": [item.to_dict() for item in items]})


@bp.route("/content/<int:content_id>/history", methods=["GET"])
@login_required
def content_history(content_id):
    """List the recorded AI edits of one of the current user's posts."""
    content = SocialContent.get_for_user(content_id, current_user.id)
    if content is None:
        return (
            jsonify(
                {
                    "error": f"Content with ID {content_id} not found",
                    "code": "NOT_FOUND",
                }
            ),
            404,
        )

    return jsonify(
        {
            "content": content.to_dict(),
            "history": [entry.to_dict() for entry in content.history],
        }
    )

