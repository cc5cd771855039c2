from hashids import Hashids
import os

# Short public slugs for post ids
HASHIDS_SALT = os.getenv('HASHIDS_SALT', 'lostandfound-posts-salt')
HASHIDS_MIN_LENGTH = int(os.getenv('HASHIDS_MIN_LENGTH', 10))
HASHIDS_ALPHABET = os.getenv(
    'HASHIDS_ALPHABET',
    'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'
)

hashids = Hashids(salt=HASHIDS_SALT, min_length=HASHIDS_MIN_LENGTH, alphabet=HASHIDS_ALPHABET)


def encode_object_id(obj_id: str) -> str:
    """Encode a Mongo ObjectId (hex string) into a short slug."""
    try:
        return hashids.encode(int(str(obj_id), 16))
    except ValueError:
        return str(obj_id)


def decode_slug(slug: str):
    """Decode a slug back into an ObjectId hex string, or None."""
    decoded = hashids.decode(slug)
    if not decoded:
        return None
    # Pad back to 24 hex chars
    return format(decoded[0], 'x').zfill(24)


def resolve_post_id(value: str) -> str:
    """Accept either a raw ObjectId hex string or a post slug."""
    if len(value) == 24:
        try:
            int(value, 16)
            return value
        except ValueError:
            pass
    return decode_slug(value) or value
