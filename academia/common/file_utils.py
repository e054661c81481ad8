"""File path utilities for stored attachments."""
import os
from typing import Optional

from werkzeug.utils import safe_join


def get_file_extension(filename: str) -> str:
    """Get file extension from filename, lowercased and including the dot."""
    return os.path.splitext(filename)[1].lower()


def to_relative_upload_path(file_url: str) -> str:
    """
    Convert a stored file URL into a path relative to the uploads directory.

    URLs are stored as "/uploads/<kind>/<file>"; bare relative paths are
    returned unchanged apart from slash normalization.
    """
    normalized_path = file_url.replace("\\", "/").lstrip("/")
    if normalized_path.startswith("uploads/"):
        normalized_path = normalized_path[len("uploads/"):]
    return normalized_path


def resolve_upload_path(upload_dir: str, file_url: str) -> Optional[str]:
    """
    Resolve a stored file URL to an absolute path beneath upload_dir.
    Returns None if the URL is empty or would escape the uploads directory.
    """
    if not file_url:
        return None
    relative_path = to_relative_upload_path(file_url)
    if not relative_path:
        return None
    full_path = safe_join(os.path.abspath(upload_dir), relative_path)
    return full_path
