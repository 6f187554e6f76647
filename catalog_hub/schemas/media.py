"""Schemas for the image hosting and watermark services."""
from typing import Optional

from pydantic import BaseModel


class ImgBBImageVariant(BaseModel):
    filename: Optional[str] = None
    name: Optional[str] = None
    mime: Optional[str] = None
    extension: Optional[str] = None
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


class ImgBBImage(BaseModel):
    """``data`` object of an ImgBB v1 upload response."""
    id: Optional[str] = None
    title: Optional[str] = None
    url_viewer: Optional[str] = None
    url: str
    display_url: str
    width: Optional[int] = None
    height: Optional[int] = None
    size: Optional[int] = None
    time: Optional[int] = None
    expiration: Optional[int] = None
    image: Optional[ImgBBImageVariant] = None
    thumb: Optional[ImgBBImageVariant] = None
    medium: Optional[ImgBBImageVariant] = None
    delete_url: Optional[str] = None

    class Config:
        extra = "ignore"


class UploadImageRequest(BaseModel):
    image: Optional[str] = None
    name: Optional[str] = None
    expiration: Optional[int] = None


class WatermarkRequest(BaseModel):
    image_url: Optional[str] = None
    position: Optional[str] = None
    opacity: Optional[int] = None


class WatermarkResponse(BaseModel):
    watermarked_url: str
    original_url: str

    class Config:
        extra = "ignore"
