"""
Image model for binary images stored per user
"""
from sqlalchemy import Column, Integer, String, DateTime, LargeBinary
from sqlalchemy.sql import func

from profile_api.database import Base


class Image(Base):
    """Uploaded image, owned by a user through its uuid"""
    __tablename__ = "images"

    id = Column(Integer, primary_key=True, index=True)
    # Referenced by value: no foreign key, images outlive their user
    user_uuid = Column(String(36), nullable=False, index=True)
    image_data = Column(LargeBinary, nullable=False)
    content_type = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Image {self.id} - {self.user_uuid}>"
