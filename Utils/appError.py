class AppError(Exception):
    def __init__(self, message: str, status_code: int):
        """
        Custom exception class for application errors.

        Args:
            message (str): The error message.
            status_code (int): The HTTP status code associated with the error.
        """
        super().__init__(message)

        self.status_code = status_code
        self.status = "fail" if str(status_code).startswith("4") else "error"
        self.is_operational = True

    def to_json(self):
        return {"success": False, "message": str(self)}


# ----------------------------
# Post lifecycle errors
# ----------------------------
class MissingFieldsError(AppError):
    def __init__(self, missing=None):
        self.missing = list(missing or [])
        message = "All fields are required"
        if self.missing:
            message = f"{message} (missing: {', '.join(self.missing)})"
        super().__init__(message, 400)


class InvalidTypeError(AppError):
    def __init__(self, message="Type must be either 'lost' or 'found'"):
        super().__init__(message, 400)


class MissingImageError(AppError):
    def __init__(self, message="No image file uploaded"):
        super().__init__(message, 400)


class ImageUploadFailedError(AppError):
    def __init__(self, message="Image upload failed"):
        super().__init__(message, 500)


class NotFoundError(AppError):
    def __init__(self, message="Post not found"):
        super().__init__(message, 404)


class ForbiddenError(AppError):
    def __init__(self, message="Not authorized"):
        super().__init__(message, 403)


class InternalError(AppError):
    """Unexpected failure. The message never carries internal detail."""
    def __init__(self, message="Server error. Please try again later."):
        super().__init__(message, 500)
        self.is_operational = False
