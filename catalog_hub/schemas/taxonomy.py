from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class CategoryRead(BaseModel):
    id: str
    name: str
    slug: str
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BrandRead(CategoryRead):
    created_at: Optional[datetime] = None


class TaxonomyStats(BaseModel):
    count: int
    last_updated: Optional[datetime] = None


class TaxonomySyncResult(BaseModel):
    synced: bool
    count: int
    updated_at: datetime
