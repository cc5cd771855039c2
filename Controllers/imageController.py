import io
import logging

from flask import send_file

from Models.allImgsModel import AllImgs
from Utils.appError import AppError, InternalError

logger = logging.getLogger(__name__)


def get_image(filename):
    """Stream a stored post image from GridFS."""
    try:
        img_doc = AllImgs.objects(filename=filename).first()
        if not img_doc:
            raise AppError("Image not found", 404)

        return send_file(
            io.BytesIO(img_doc.file.read()),
            mimetype=img_doc.content_type or "image/jpeg",
            as_attachment=False,
            download_name=filename
        )
    except AppError as e:
        raise e
    except Exception as e:
        logger.exception(f"Error retrieving image {filename}: {str(e)}")
        raise InternalError()
