from flask import Blueprint, current_app, request, jsonify
from werkzeug.exceptions import HTTPException

from Utils.appError import AppError, InternalError

error_bp = Blueprint('errors', __name__)


@error_bp.app_errorhandler(AppError)
def handle_app_error(err):
    """Operational errors raised by controllers and the post service."""
    if err.status_code >= 500:
        current_app.logger.error(f"AppError {err.status_code} at {request.path}: {err}")
    else:
        current_app.logger.warning(f"AppError {err.status_code} at {request.path}: {err}")
    return jsonify(err.to_json()), err.status_code


@error_bp.app_errorhandler(429)
def ratelimit_handler(err):
    return jsonify({
        "success": False,
        "message": "Rate limit exceeded. Please slow down."
    }), 429


@error_bp.app_errorhandler(HTTPException)
def handle_http_error(err):
    current_app.logger.warning(
        f"{err.code} {err.name} | URL: {request.url} | Method: {request.method} | IP: {request.remote_addr}"
    )
    return jsonify({"success": False, "message": err.description or err.name}), err.code


@error_bp.app_errorhandler(Exception)
def handle_unexpected_error(err):
    # This includes traceback automatically
    current_app.logger.exception(
        f"Unexpected Application Error: {err} | URL: {request.url} | Method: {request.method} | IP: {request.remote_addr}"
    )
    return jsonify(InternalError().to_json()), 500
