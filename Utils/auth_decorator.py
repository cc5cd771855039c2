# Utils/auth_decorator.py
from functools import wraps
from bson import ObjectId
from flask import request, jsonify, current_app
from Utils.jwt_utils import decode_token
from Models.userModel import User


def _bearer_token():
    auth_header = request.headers.get("Authorization")
    token = None

    # Prefer Authorization header if present and well-formed
    if auth_header:
        try:
            token_type, token_val = auth_header.split(" ")
            if token_type.lower() == "bearer" and token_val:
                token = token_val
        except ValueError:
            pass

    # Fallback to cookies
    return token or request.cookies.get("access_token")


def token_required(f):
    """Resolve the caller from a valid JWT and pass it as the first argument."""
    @wraps(f)
    def decorated(*args, **kwargs):
        token = _bearer_token()
        if not token:
            return jsonify({"success": False, "message": "Authorization token missing"}), 401

        decoded = decode_token(token, current_app.config.get("JWT_SECRET"))
        if not decoded:
            return jsonify({"success": False, "message": "Invalid or expired token"}), 401

        user_id = decoded.get("user_id")
        user = User.objects(id=user_id).first() if ObjectId.is_valid(user_id) else None
        if not user or not user.active:
            return jsonify({"success": False, "message": "User not found"}), 404

        # Attach user to the wrapped function
        return f(user, *args, **kwargs)

    return decorated
