from mongoengine import Document, StringField, FileField, DateTimeField, IntField
from datetime import datetime


class AllImgs(Document):
    """Post photo stored in GridFS and served from ``/uploads/<filename>``."""
    filename = StringField(required=True, unique=True)
    file = FileField(required=True, collection_name='post_images')
    content_type = StringField(default="image/jpeg")
    width = IntField()
    height = IntField()
    uploaded_at = DateTimeField(default=datetime.utcnow)

    meta = {'collection': 'all_imgs'}

    def url(self, base_url=""):
        return f"{base_url.rstrip('/')}/uploads/{self.filename}"
