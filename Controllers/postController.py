import logging
from flask import request, jsonify, current_app
from werkzeug.exceptions import HTTPException

from Services.postFilter import PostFilter
from Utils.appError import AppError, InternalError
from Utils.auth_decorator import token_required
from Utils.hashid_utils import resolve_post_id
from Utils.uploads import get_uploaded_file, stage_upload, discard_staged

logger = logging.getLogger(__name__)


def _service():
    return current_app.extensions["post_service"]


def _request_fields():
    """Form fields for multipart requests, JSON body otherwise."""
    if request.form:
        return request.form.to_dict()
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise AppError("Request body must be a JSON object", 400)
    return body


def _staged_upload():
    file = get_uploaded_file(request.files)
    if not file:
        return None
    return stage_upload(file, current_app.config["UPLOAD_FOLDER"])


@token_required
def create_post(user):
    """Create a new lost/found post with an image."""
    staged = None
    try:
        staged = _staged_upload()
        post = _service().create_post(user, _request_fields(), staged)

        logger.info(f"✅ Post created by {user.email}: {post.id}")
        return jsonify({
            "success": True,
            "message": "Post created successfully",
            "data": post.to_json()
        }), 201

    except (AppError, HTTPException) as e:
        raise e
    except Exception as e:
        logger.exception(f"Error creating post: {str(e)}")
        raise InternalError()
    finally:
        discard_staged(staged)


def get_all_posts():
    """List posts, optionally filtered by type, category and location."""
    try:
        post_filter = PostFilter.from_args(request.args)
        posts = [post.to_json(populate_owner=True) for post in _service().list_posts(post_filter)]

        return jsonify({
            "success": True,
            "count": len(posts),
            "data": posts
        }), 200

    except (AppError, HTTPException) as e:
        raise e
    except Exception as e:
        logger.exception(f"Error fetching posts: {str(e)}")
        raise InternalError()


@token_required
def update_post(user, post_id):
    """Update a post owned by the caller."""
    staged = None
    try:
        staged = _staged_upload()
        post = _service().update_post(user, resolve_post_id(post_id), _request_fields(), staged)

        logger.info(f"✅ Post updated by {user.email}: {post.id}")
        return jsonify({
            "success": True,
            "message": "Post updated successfully",
            "data": post.to_json()
        }), 200

    except (AppError, HTTPException) as e:
        raise e
    except Exception as e:
        logger.exception(f"Error updating post {post_id}: {str(e)}")
        raise InternalError()
    finally:
        discard_staged(staged)


@token_required
def delete_post(user, post_id):
    """Permanently delete a post owned by the caller."""
    try:
        _service().delete_post(user, resolve_post_id(post_id))

        logger.info(f"✅ Post deleted by {user.email}: {post_id}")
        return jsonify({
            "success": True,
            "message": "Post deleted successfully"
        }), 200

    except (AppError, HTTPException) as e:
        raise e
    except Exception as e:
        logger.exception(f"Error deleting post {post_id}: {str(e)}")
        raise InternalError()
