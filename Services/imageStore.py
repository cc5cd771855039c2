import io
import os
import uuid
import logging

from PIL import Image, UnidentifiedImageError

from Models.allImgsModel import AllImgs

logger = logging.getLogger(__name__)

FORMATS = {
    "PNG": ("png", "image/png"),
    "JPEG": ("jpg", "image/jpeg"),
}


def normalize_image(path, max_size=1200):
    """Open a staged image with Pillow and re-encode it.

    Only PNG and JPEG are accepted. The image is shrunk to fit within
    ``max_size`` on its longest side. Returns (bytes, extension, mime, size).
    """
    with Image.open(path) as image:
        if image.format not in FORMATS:
            raise ValueError(f"Unsupported image format: {image.format}")
        extension, mime_type = FORMATS[image.format]

        image = image.convert("RGBA" if image.format == "PNG" else "RGB")
        image.thumbnail((max_size, max_size))

        img_byte_arr = io.BytesIO()
        image.save(img_byte_arr, format="PNG" if extension == "png" else "JPEG")
        img_byte_arr.seek(0)
        return img_byte_arr, extension, mime_type, image.size


class GridFSImageStore:
    """Stores post photos in GridFS and returns the URL they are served from."""

    def __init__(self, base_url="", max_size=1200):
        self.base_url = base_url
        self.max_size = max_size

    def upload(self, path):
        """Persist the staged file. Returns the image URL, or None on failure."""
        if not path or not os.path.exists(path):
            logger.warning(f"⚠️ Staged image missing: {path}")
            return None

        try:
            data, extension, mime_type, (width, height) = normalize_image(path, self.max_size)
        except (UnidentifiedImageError, ValueError, OSError) as e:
            logger.warning(f"⚠️ Rejected image {os.path.basename(path)}: {e}")
            return None

        original_name = os.path.splitext(os.path.basename(path))[0]
        filename = f"{original_name}.{extension}"
        # If filename already exists in DB, append a unique suffix
        if AllImgs.objects(filename=filename).first():
            filename = f"{original_name}_{uuid.uuid4().hex[:8]}.{extension}"

        img_doc = AllImgs(filename=filename, content_type=mime_type, width=width, height=height)
        img_doc.file.put(data, content_type=mime_type)
        img_doc.save()

        logger.info(f"📷 Image stored in GridFS: {filename}")
        return img_doc.url(self.base_url)
