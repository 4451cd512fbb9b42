"""
Pydantic schemas for Image model
"""
from pydantic import BaseModel, field_serializer
from datetime import datetime
from typing import Optional
import base64


class ImageResponse(BaseModel):
    """Schema for a stored image, raw bytes rendered as base64"""
    id: int
    user_uuid: str
    content_type: Optional[str] = None
    image_data: bytes
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }

    @field_serializer("image_data", when_used="json")
    def serialize_image_data(self, image_data: bytes) -> str:
        return base64.b64encode(image_data).decode("ascii")


class ImageUploadResponse(BaseModel):
    """Response after successful image upload"""
    message: str
    image: ImageResponse
