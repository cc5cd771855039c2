import io
import os
from datetime import datetime, timedelta

import mongomock
import mongomock.gridfs
import pytest
from mongoengine import connect, disconnect
from PIL import Image

from app import create_app
from Models.postModel import Post
from Models.userModel import User
from Services.postService import PostService
from Services.postStore import MongoPostStore
from Utils.config import TestingConfig
from Utils.jwt_utils import create_access_token

# GridFS-backed image storage runs against the in-memory client
mongomock.gridfs.enable_gridfs_integration()


class FakeImageStore:
    """Image store double recording every staged path it receives."""

    def __init__(self, url="https://images.test/photo.jpg"):
        self.url = url
        self.error = None
        self.uploads = []

    def upload(self, path):
        self.uploads.append((path, os.path.exists(str(path))))
        if self.error:
            raise self.error
        return self.url


def png_bytes(size=(32, 32), fmt="PNG"):
    buf = io.BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buf, format=fmt)
    buf.seek(0)
    return buf


@pytest.fixture(autouse=True)
def mongo():
    connect(
        "lostandfound_test",
        host="mongodb://localhost",
        mongo_client_class=mongomock.MongoClient,
        alias="default"
    )
    yield
    disconnect(alias="default")


@pytest.fixture
def owner():
    return User(username="alice", email="alice@example.com").save()


@pytest.fixture
def stranger():
    return User(username="bob", email="bob@example.com").save()


@pytest.fixture
def image_store():
    return FakeImageStore()


@pytest.fixture
def service(image_store):
    return PostService(MongoPostStore(), image_store)


@pytest.fixture
def make_post(owner):
    base = datetime(2024, 5, 1, 12, 0, 0)

    def _make(minutes=0, user=None, **fields):
        values = {
            "title": "Lost Wallet",
            "type": "lost",
            "description": "black leather",
            "category": "wallet",
            "location": "Central Park",
            "image": "https://images.test/wallet.jpg",
        }
        values.update(fields)
        post = Post(owner=user or owner, created_at=base + timedelta(minutes=minutes), **values)
        post.save()
        return post

    return _make


@pytest.fixture
def app(tmp_path, image_store):
    app = create_app(TestingConfig, image_store=image_store, connect_db=False)
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_header():
    def _header(user):
        token = create_access_token(user.id, secret=TestingConfig.JWT_SECRET)
        return {"Authorization": f"Bearer {token}"}

    return _header
