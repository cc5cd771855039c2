import os
import uuid
import logging

from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

UPLOAD_FIELDS = ("image", "file")


def get_uploaded_file(files):
    """Return the uploaded FileStorage, accepting both 'image' and 'file' keys."""
    for key in UPLOAD_FIELDS:
        file = files.get(key)
        if file and file.filename:
            return file
    return None


def stage_upload(file, folder):
    """Write an uploaded file to the staging folder and return its local path."""
    os.makedirs(folder, exist_ok=True)
    name = secure_filename(file.filename) or "upload"
    path = os.path.join(folder, f"{uuid.uuid4().hex[:8]}_{name}")
    file.save(path)
    return path


def discard_staged(path):
    if not path:
        return
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"⚠️ Could not remove staged upload {path}: {e}")
