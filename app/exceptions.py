# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the gallery server.
# Errors carry an HTTP status, a machine-readable code and, where useful,
# a suggestion telling the client how to fix the request.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class GalleryException(Exception):
    """
    Base exception for the gallery server.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "GALLERY_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Read Path Exceptions
# =============================================================================

class GalleryReadError(GalleryException):
    """Raised when a gallery directory cannot be listed."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message="Server error",
            code="GALLERY_READ_ERROR",
            status_code=500,
            details={"path": path, "error": error}
        )


class ImageNotFoundError(GalleryException):
    """Raised when a requested image file doesn't exist."""

    def __init__(self, filename: str):
        super().__init__(
            message="Resource not found",
            code="IMAGE_NOT_FOUND",
            status_code=404,
            details={"filename": filename}
        )


class CatalogEntryError(GalleryException):
    """Raised when a catalog entry is missing or not valid JSON."""

    def __init__(self, basename: str, error: str):
        super().__init__(
            message="Server error",
            code="CATALOG_ENTRY_ERROR",
            status_code=500,
            suggestion=f"Check that catalog/{basename}.json exists and holds imageName, title and description",
            details={"basename": basename, "error": error}
        )


class TemplateNotFoundError(GalleryException):
    """Raised when rendering a template that was not loaded at startup."""

    def __init__(self, name: str):
        super().__init__(
            message="Server error",
            code="TEMPLATE_NOT_FOUND",
            status_code=500,
            suggestion=f"Add {name} to the templates directory and restart the server",
            details={"template": name}
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class MissingUploadFieldError(GalleryException):
    """Raised when a required upload field is absent or blank."""

    def __init__(self, field: str):
        super().__init__(
            message=f"No {field} specified",
            code="MISSING_UPLOAD_FIELD",
            status_code=400,
            details={"field": field}
        )


class InvalidFilenameError(GalleryException):
    """Raised when an uploaded filename could escape the images directory."""

    def __init__(self, filename: str):
        super().__init__(
            message="Invalid filename",
            code="INVALID_FILENAME",
            status_code=400,
            suggestion="Use a plain filename without path separators or a leading dot",
            details={"filename": filename}
        )


class InvalidFileTypeError(GalleryException):
    """Raised when uploaded file type is not allowed."""

    def __init__(self, filename: str, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type: {filename}",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion=f"Only these file types are supported: {', '.join(allowed)}",
            details={"filename": filename, "allowed_types": allowed}
        )


class FileTooLargeError(GalleryException):
    """Raised when uploaded file exceeds size limit."""

    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            message=f"File too large: {size_mb:.1f}MB (max: {max_mb}MB)",
            code="FILE_TOO_LARGE",
            status_code=413,
            suggestion=f"Upload a file smaller than {max_mb}MB",
            details={"size_mb": size_mb, "max_mb": max_mb}
        )


class DuplicateImageError(GalleryException):
    """Raised when an upload would overwrite an existing image or catalog entry."""

    def __init__(self, filename: str, basename: str):
        super().__init__(
            message=f"An image named {basename} already exists",
            code="DUPLICATE_IMAGE",
            status_code=409,
            suggestion="Rename the file before uploading it",
            details={"filename": filename, "basename": basename}
        )


class StorageWriteError(GalleryException):
    """Raised when writing an image or catalog entry to disk fails."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message="Server Error",
            code="STORAGE_WRITE_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details={"path": path, "error": error}
        )


# =============================================================================
# Config Exceptions
# =============================================================================

class ConfigWriteError(GalleryException):
    """Raised when config.json cannot be rewritten."""

    def __init__(self, error: str):
        super().__init__(
            message="Server error",
            code="CONFIG_WRITE_ERROR",
            status_code=500,
            details={"error": error}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def gallery_exception_handler(
    request: Request,
    exc: GalleryException
) -> JSONResponse:
    """
    Convert GalleryException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
