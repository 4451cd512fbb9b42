"""
Image API endpoints
"""
import logging
from fastapi import APIRouter, Depends, UploadFile, File, status
from sqlalchemy.orm import Session
from typing import Optional

from profile_api.core import NotFoundError, ValidationError
from profile_api.database import get_db
from profile_api.schemas import ImageResponse, ImageUploadResponse
from profile_api.services import ImageService, UserService
from profile_api.utils import save_upload_file, read_stored_file

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Images"])


@router.post(
    "/users/{uuid}/images",
    response_model=ImageUploadResponse,
    status_code=status.HTTP_201_CREATED
)
def upload_image(
    uuid: str,
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """
    Store an uploaded image for a user

    The file is written to the upload directory first, then read back and
    saved to the database. Nothing undoes the file write if the insert fails.

    Args:
        uuid: The user's uuid
        image: Uploaded image file
        db: Database session

    Returns:
        ImageUploadResponse: The created image record, bytes included

    Raises:
        ValidationError: If no image was attached
        NotFoundError: If no user has this uuid
    """
    if image is None or not image.filename:
        raise ValidationError("No image uploaded")

    user = UserService.get_by_uuid(db, uuid)
    if not user:
        raise NotFoundError("User not found")

    _, file_path, file_size = save_upload_file(image)
    logger.debug(f"Image for {uuid} staged at {file_path} ({file_size} bytes)")

    image_data = read_stored_file(file_path)
    stored = ImageService.create_image(db, user.uuid, image_data, image.content_type)

    return ImageUploadResponse(
        message="Image uploaded successfully",
        image=ImageResponse.model_validate(stored)
    )
