import logging

from Models.postModel import PostType
from Services.postFilter import PostFilter
from Utils.appError import (
    MissingFieldsError, InvalidTypeError, MissingImageError,
    ImageUploadFailedError, NotFoundError, ForbiddenError
)

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("posts")

REQUIRED_FIELDS = ('title', 'type', 'description', 'category', 'location')
UPDATABLE_FIELDS = REQUIRED_FIELDS
IGNORED_IMAGE_FIELDS = ('image', 'imageUrl', 'image_url')


def _text(fields, name):
    value = fields.get(name)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _normalize_type(value):
    normalized = value.lower()
    if normalized not in PostType.values():
        raise InvalidTypeError()
    return normalized


class PostService:
    """Post lifecycle: create, list, update and delete.

    ``store`` is the document store (see ``MongoPostStore``) and
    ``image_store`` anything with ``upload(path) -> url | None``.
    The caller passed to mutating operations is the already authenticated
    identity; only its ``id`` is used.
    """

    def __init__(self, store, image_store):
        self.store = store
        self.image_store = image_store

    # ----------------------------
    # Create
    # ----------------------------
    def create_post(self, caller, fields, uploaded_file=None):
        values = {name: _text(fields, name) for name in REQUIRED_FIELDS}

        missing = [name for name, value in values.items() if not value]
        if missing:
            raise MissingFieldsError(missing)

        values['type'] = _normalize_type(values['type'])

        if not uploaded_file:
            logger.info("❌ No image uploaded")
            raise MissingImageError()

        values['image'] = self._upload(uploaded_file)

        post = self.store.create(owner=caller, **values)
        audit_logger.info(f"Post {post.id} created by {caller.id}")
        return post

    # ----------------------------
    # List
    # ----------------------------
    def list_posts(self, post_filter=None):
        """Yield posts newest first. The result can only be iterated once."""
        post_filter = post_filter or PostFilter()
        for post in self.store.find(post_filter):
            yield post

    # ----------------------------
    # Update
    # ----------------------------
    def update_post(self, caller, post_id, fields, uploaded_file=None):
        post = self._owned_post(caller, post_id)

        changes = {}
        for name in UPDATABLE_FIELDS:
            value = _text(fields, name)
            if value:
                changes[name] = value

        if 'type' in changes:
            changes['type'] = _normalize_type(changes['type'])

        ignored = [name for name in IGNORED_IMAGE_FIELDS if fields.get(name)]
        if ignored:
            logger.warning(
                f"Ignoring {', '.join(ignored)} on post {post_id}: images are replaced by upload only"
            )

        if uploaded_file:
            changes['image'] = self._upload(uploaded_file)

        for name, value in changes.items():
            setattr(post, name, value)

        self.store.save(post)
        audit_logger.info(f"Post {post.id} updated by {caller.id}: {sorted(changes)}")
        return post

    # ----------------------------
    # Delete
    # ----------------------------
    def delete_post(self, caller, post_id):
        post = self._owned_post(caller, post_id)
        self.store.delete_one(post)
        audit_logger.info(f"Post {post_id} deleted by {caller.id}")
        return True

    # ----------------------------
    # Helpers
    # ----------------------------
    def _owned_post(self, caller, post_id):
        post = self.store.find_by_id(post_id)
        if not post:
            raise NotFoundError()

        if post.owner_id != str(caller.id):
            logger.warning(f"User {caller.id} is not the owner of post {post_id}")
            raise ForbiddenError()
        return post

    def _upload(self, uploaded_file):
        try:
            image_url = self.image_store.upload(uploaded_file)
        except Exception:
            logger.exception("Image store raised during upload")
            image_url = None

        if not image_url:
            raise ImageUploadFailedError()
        logger.info(f"📷 Image uploaded: {image_url}")
        return image_url
