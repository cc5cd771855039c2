import os

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Import blueprints
from Controllers.errorController import error_bp
from Routes.postRoutes import post_routes
from Routes.imageRoutes import image_routes
from Services.imageStore import GridFSImageStore
from Services.postService import PostService
from Services.postStore import MongoPostStore
from Utils.config import Config
from Utils.db import init_db
from Utils.logger import setup_logging


def create_app(config=None, image_store=None, connect_db=True):
    """Build the Flask app.

    ``image_store`` defaults to GridFS storage; pass ``connect_db=False`` when
    a mongoengine connection is already registered.
    """
    # ----------------------------
    # Flask app configuration
    # ----------------------------
    app = Flask(__name__)
    app.config.from_object(config or Config)

    # ----------------------------
    # Logging Configuration
    # ----------------------------
    setup_logging(app)

    # initialize database
    if connect_db:
        init_db(app.config["MONGODB_URI"])

    # ----------------------------
    # Rate Limiter
    # ----------------------------
    Limiter(
        get_remote_address,
        app=app,
        default_limits=[
            app.config["LIMIT_DEFAULT_HOURLY"],
            app.config["LIMIT_DEFAULT_SECONDLY"]
        ],
        storage_uri=app.config["RATELIMIT_STORAGE_URI"],
    )

    # ----------------------------
    # Post service wiring
    # ----------------------------
    if image_store is None:
        image_store = GridFSImageStore(
            base_url=app.config["PUBLIC_BASE_URL"],
            max_size=app.config["IMAGE_MAX_SIZE"]
        )
    app.extensions["post_service"] = PostService(MongoPostStore(), image_store)

    # ----------------------------
    # Register blueprints
    # ----------------------------
    app.register_blueprint(error_bp)
    app.register_blueprint(post_routes)
    app.register_blueprint(image_routes)

    return app


# ----------------------------
# Run the app
# ----------------------------
if __name__ == '__main__':
    port = int(os.getenv('PORT', 4000))
    print(f"App running on port {port}...")
    create_app().run(host='0.0.0.0', port=port, debug=False)
