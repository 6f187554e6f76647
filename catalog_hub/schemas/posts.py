"""Schemas for WordPress posts and the post sync progress stream."""
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Rendered(BaseModel):
    rendered: str = ""


class WpPost(BaseModel):
    """Subset of the WordPress ``wp/v2/posts`` payload used by the sync."""
    id: int
    title: Rendered
    content: Rendered
    excerpt: Optional[Rendered] = None
    slug: str
    link: str = ""
    status: str
    date: Optional[datetime] = None
    modified: Optional[datetime] = None
    author: Optional[int] = None
    featured_media: Optional[int] = None
    categories: List[int] = Field(default_factory=list)
    tags: List[int] = Field(default_factory=list)
    yoast_meta: Optional[Dict[str, Any]] = None

    class Config:
        extra = "ignore"


class TermRef(BaseModel):
    id: int
    name: str = ""
    slug: str = ""


class PostRead(BaseModel):
    id: str
    wordpress_id: int
    title: str
    slug: str
    content: str
    excerpt: Optional[str] = None
    featured_image_url: Optional[str] = None
    featured_image_alt: Optional[str] = None
    status: str
    wordpress_url: Optional[str] = None
    wordpress_date: Optional[datetime] = None
    wordpress_modified: Optional[datetime] = None
    last_synced_at: Optional[datetime] = None
    author_id: Optional[int] = None
    author_name: Optional[str] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_focus_keyword: Optional[str] = None
    categories: List[TermRef] = Field(default_factory=list)
    tags: List[TermRef] = Field(default_factory=list)

    class Config:
        from_attributes = True


class PostListResponse(BaseModel):
    data: List[PostRead]
    total: int
    page: int
    limit: int


# ==================== Sync progress events ====================

class SyncIdle(BaseModel):
    status: Literal["idle"] = "idle"


class SyncStarted(BaseModel):
    status: Literal["started"] = "started"
    message: str = "Starting sync..."


class SyncInProgress(BaseModel):
    status: Literal["progress"] = "progress"
    total: int
    processed: int
    message: Optional[str] = None


class SyncComplete(BaseModel):
    status: Literal["complete"] = "complete"
    total: int
    processed: int
    message: str = "Sync complete!"


class SyncFailed(BaseModel):
    status: Literal["error"] = "error"
    message: str


SyncProgress = Union[SyncIdle, SyncStarted, SyncInProgress, SyncComplete, SyncFailed]
