"""SQLAlchemy models for WooCommerce categories and brands."""
from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from catalog_hub.db.base import Base


class Category(Base):
    """WooCommerce product category; ``id`` is the WooCommerce ID as a string."""

    __tablename__ = "categories"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    slug = Column(String(255), nullable=False)
    updated_at = Column(DateTime, nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<Category(id={self.id}, slug={self.slug})>"


class Brand(Base):
    """Brand term of the WooCommerce brand attribute."""

    __tablename__ = "product_brands"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    slug = Column(String(255), nullable=False, index=True)
    updated_at = Column(DateTime, nullable=False, server_default=func.now())
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<Brand(id={self.id}, slug={self.slug})>"
