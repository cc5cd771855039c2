from flask import Blueprint
from Controllers.postController import (
    create_post, get_all_posts, update_post, delete_post
)

# ----------------------------
# Post API routes
# ----------------------------
post_routes = Blueprint('post_routes', __name__, url_prefix='/api/v1/posts')

post_routes.add_url_rule('', view_func=create_post, methods=['POST'])
post_routes.add_url_rule('', view_func=get_all_posts, methods=['GET'])
post_routes.add_url_rule('/<post_id>', view_func=update_post, methods=['PUT', 'PATCH'])
post_routes.add_url_rule('/<post_id>', view_func=delete_post, methods=['DELETE'])
