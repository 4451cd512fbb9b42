"""
File handling utilities for photo and image uploads
"""
import os
import uuid
from pathlib import Path
from typing import Tuple
from fastapi import UploadFile
from profile_api.config import settings


def generate_unique_filename(original_filename: str) -> str:
    """
    Generate a unique filename to avoid collisions

    Args:
        original_filename: Original filename from upload

    Returns:
        str: Unique filename with UUID prefix, keeping the extension
    """
    unique_id = str(uuid.uuid4())
    if original_filename and '.' in original_filename:
        file_extension = original_filename.rsplit('.', 1)[-1].lower()
        return f"{unique_id}.{file_extension}"
    return unique_id


def save_upload_file(upload_file: UploadFile) -> Tuple[str, Path, int]:
    """
    Stage an uploaded photo or image in the upload directory

    Blocking; called from sync endpoints, which FastAPI runs in its threadpool.

    Args:
        upload_file: Multipart file from the request

    Returns:
        Tuple[str, Path, int]: URL-relative path (served under /uploads),
            path on disk and file size
    """
    # Create upload directory if it doesn't exist
    upload_dir = settings.upload_path
    upload_dir.mkdir(parents=True, exist_ok=True)

    unique_filename = generate_unique_filename(upload_file.filename)
    file_path = upload_dir / unique_filename

    # Copy the spooled upload to its final name
    contents = upload_file.file.read()
    with open(file_path, 'wb') as f:
        f.write(contents)

    relative_path = f"{settings.UPLOAD_URL_PREFIX.strip('/')}/{unique_filename}"
    return relative_path, file_path, len(contents)


def read_stored_file(file_path: Path) -> bytes:
    """Read back the bytes of a stored upload"""
    with open(file_path, 'rb') as f:
        return f.read()


def resolve_upload_path(relative_path: str) -> Path:
    """
    Map a URL-relative upload path (as stored on users) to its path on disk

    Args:
        relative_path: Path such as 'uploads/<file>'

    Returns:
        Path: Location inside the upload directory
    """
    return settings.upload_path / Path(relative_path).name


def delete_file(file_path) -> bool:
    """
    Remove a staged upload or an orphaned photo

    Args:
        file_path: Location on disk

    Returns:
        bool: False if the file was already gone or could not be removed
    """
    try:
        if os.path.exists(file_path):
            os.remove(file_path)
            return True
        return False
    except OSError:
        return False
