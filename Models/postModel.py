from mongoengine import (
    Document, StringField, DateTimeField, ReferenceField, ValidationError, DoesNotExist
)
from datetime import datetime
from enum import Enum

from Utils.hashid_utils import encode_object_id


class PostType(Enum):
    LOST = "lost"
    FOUND = "found"

    @classmethod
    def values(cls):
        return [e.value for e in cls]


class Post(Document):
    # Ownership
    owner = ReferenceField('User', required=True)

    # Basic Information
    title = StringField(max_length=200, required=True)
    type = StringField(choices=PostType.values(), required=True)
    description = StringField(max_length=1000, required=True)
    category = StringField(max_length=100, required=True)
    location = StringField(max_length=500, required=True)

    # Image URL returned by the image store
    image = StringField(required=True)

    # Timestamps
    created_at = DateTimeField(default=datetime.utcnow)
    updated_at = DateTimeField(default=datetime.utcnow)

    meta = {
        'collection': 'posts',
        'indexes': [
            'type',
            'category',
            'owner',
            '-created_at'
        ]
    }

    @property
    def owner_id(self):
        # Read the stored reference without dereferencing the user
        ref = self._data.get('owner')
        if ref is None:
            return None
        return str(getattr(ref, 'id', ref))

    def owner_profile(self):
        """Public owner fields, or None when the user no longer exists."""
        try:
            owner = self.owner
        except DoesNotExist:
            return None
        return owner.public_profile() if owner else None

    def clean(self):
        """Normalize enum-like fields before validation."""
        if self.type:
            self.type = self.type.strip().lower()
        if self.category:
            self.category = self.category.strip().lower()

        # Owner is fixed once the post exists
        if self.pk and 'owner' in self._get_changed_fields():
            raise ValidationError("Post owner cannot be changed")

    def save(self, *args, **kwargs):
        """Custom save method to handle validation and timestamps."""
        self.clean()
        self.updated_at = datetime.utcnow()
        return super(Post, self).save(*args, **kwargs)

    def to_json(self, populate_owner=False):
        """Convert post document to JSON-friendly dict.

        With ``populate_owner`` the owner is projected to its public fields
        (username, email) instead of a bare id.
        """
        owner = self.owner_id
        if populate_owner:
            owner = self.owner_profile()

        return {
            'id': str(self.id),
            'slug': encode_object_id(str(self.id)),
            'owner': owner,
            'title': self.title,
            'type': self.type,
            'description': self.description,
            'category': self.category,
            'location': self.location,
            'image': self.image,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }
