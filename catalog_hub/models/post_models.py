"""SQLAlchemy model for WordPress posts mirrored locally."""
import uuid

from sqlalchemy import BigInteger, Column, DateTime, JSON, String, Text
from sqlalchemy.sql import func

from catalog_hub.db.base import Base


class SyncedPost(Base):
    """
    Local copy of a published WordPress post.

    ``wordpress_id`` is the natural key and the upsert conflict column:
    re-syncing the same post always overwrites the existing row.
    """

    __tablename__ = "posts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    wordpress_id = Column(BigInteger, nullable=False, unique=True, index=True)
    title = Column(Text, nullable=False)
    slug = Column(String(255), nullable=False, index=True)
    content = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=True)
    featured_image_url = Column(Text, nullable=True)
    featured_image_alt = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, index=True)
    wordpress_url = Column(Text, nullable=True)

    wordpress_date = Column(DateTime, nullable=True, index=True)
    wordpress_modified = Column(DateTime, nullable=True)
    last_synced_at = Column(DateTime, nullable=True)

    author_id = Column(BigInteger, nullable=True, index=True)
    author_name = Column(String(255), nullable=True)

    seo_title = Column(Text, nullable=True)
    seo_description = Column(Text, nullable=True)
    seo_focus_keyword = Column(String(255), nullable=True)
    main_keyword = Column(String(255), nullable=True)

    # [{id, name, slug}]; name/slug are left empty until resolved
    categories = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<SyncedPost(wordpress_id={self.wordpress_id}, slug={self.slug})>"
