"""SQLAlchemy model for catalog products published to WooCommerce."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, Text
from sqlalchemy.sql import func

from catalog_hub.db.base import Base


class ProductStatus:
    DRAFT = "draft"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"

    ALL = (DRAFT, PROCESSING, SUCCESS, FAILED)


class Product(Base):
    """
    Product content drafted locally and published to WooCommerce.

    Attributes:
        raw_categories: list of {id, name, slug} dicts copied from WooCommerce,
            not foreign keys
        price_reference: {min_price_vnd, max_price_vnd, avg_price_vnd,
            updated_date, sources} snapshot or None
        woo_id: WooCommerce product ID once the upload succeeded
        made_by_process_id / process_id / workflow_id: links to the
            automation process that generated the draft
        has_confirmed: set when a user confirms the content for upload
    """

    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    seo_title = Column(String(255), nullable=False, default="")
    meta_description = Column(Text, nullable=False, default="")
    keywords = Column(JSON, nullable=False, default=list)
    short_description = Column(Text, nullable=False, default="")
    html_content = Column(Text, nullable=False, default="")
    images = Column(JSON, nullable=False, default=list)
    price = Column(Integer, nullable=True)
    price_reference = Column(JSON, nullable=True)
    raw_categories = Column(JSON, nullable=False, default=list)
    woo_id = Column(Integer, nullable=True, index=True)
    preview_url = Column(String(500), nullable=True)

    status = Column(String(20), nullable=False, default=ProductStatus.DRAFT, index=True,
                    comment="draft, processing, success, failed")
    error_message = Column(Text, nullable=True)
    made_by_process_id = Column(String(36), nullable=True)
    process_id = Column(String(36), nullable=True)
    workflow_id = Column(String(36), nullable=True)
    has_confirmed = Column(Boolean, nullable=False, default=False)

    process_at = Column(DateTime, nullable=True)
    finished_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Product(id={self.id}, status={self.status}, woo_id={self.woo_id})>"
