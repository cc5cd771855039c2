from flask import Blueprint
from Controllers.imageController import get_image

# ----------------------------
# Stored image routes
# ----------------------------
image_routes = Blueprint('image_routes', __name__)

image_routes.add_url_rule('/uploads/<filename>', view_func=get_image, methods=['GET'])
