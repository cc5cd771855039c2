from mongoengine import Document, EmailField, StringField, BooleanField, DateTimeField
from datetime import datetime


# =====================================
#  USER MODEL
# =====================================
class User(Document):
    """Identity record a bearer token resolves to.

    Registration and credentials live in the identity service; posts only
    need a stable id and the public username/email pair.
    """
    username = StringField(required=True, unique=True, max_length=50)
    email = EmailField(required=True, unique=True)
    active = BooleanField(default=True)
    created_at = DateTimeField(default=datetime.utcnow)

    meta = {'collection': 'users'}

    def clean(self):
        """Normalize email before saving."""
        if self.email:
            self.email = self.email.strip().lower()

    # =====================================
    #  JSON SERIALIZER
    # =====================================
    def public_profile(self) -> dict:
        """Projection exposed alongside posts."""
        return {
            'id': str(self.id),
            'username': self.username,
            'email': self.email
        }

