"""
Image Service
Stores uploaded image bytes against a user's uuid
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session

from profile_api.models import Image

logger = logging.getLogger(__name__)


class ImageService:
    """Create and count stored images"""

    @staticmethod
    def create_image(
        db: Session,
        user_uuid: str,
        image_data: bytes,
        content_type: Optional[str]
    ) -> Image:
        image = Image(
            user_uuid=user_uuid,
            image_data=image_data,
            content_type=content_type
        )
        db.add(image)
        db.commit()
        db.refresh(image)

        logger.info(f"Stored image {image.id} for user {user_uuid} ({len(image_data)} bytes, {content_type})")
        return image

    @staticmethod
    def count_images(db: Session, user_uuid: Optional[str] = None) -> int:
        query = db.query(Image)
        if user_uuid is not None:
            query = query.filter(Image.user_uuid == user_uuid)
        return query.count()
