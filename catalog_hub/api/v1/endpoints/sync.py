"""
Synchronization endpoints.

The WordPress post sync streams its progress as server-sent events; the
taxonomy syncs return a summary once done.
"""
import logging
from typing import Iterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from catalog_hub.api.deps import (
    get_blog_client,
    get_brand_repository,
    get_category_repository,
    get_commerce_client,
)
from catalog_hub.core.config import settings
from catalog_hub.db.session import SessionLocal
from catalog_hub.repositories import BrandRepository, CategoryRepository, PostRepository
from catalog_hub.schemas.taxonomy import TaxonomySyncResult
from catalog_hub.services.post_sync import PostSyncEngine
from catalog_hub.services.taxonomy_sync import sync_brands, sync_categories
from catalog_hub.utils.sse import SSE_HEADERS, stream_events

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sync", tags=["sync"])


def get_session_factory():
    return SessionLocal


def _post_sync_stream(blog_client, session_factory) -> Iterator[str]:
    # The stream outlives the request scope, so it owns its session.
    db = session_factory()
    try:
        engine = PostSyncEngine(blog_client, PostRepository(db), page_size=settings.sync_page_size)
        yield from stream_events(engine.run())
    finally:
        db.close()


@router.post("/wordpress/posts")
def sync_wordpress_posts(
    blog_client=Depends(get_blog_client),
    session_factory=Depends(get_session_factory)
):
    _logger.info("Starting WordPress post sync stream")
    return StreamingResponse(
        _post_sync_stream(blog_client, session_factory),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.post("/woocommerce/categories", response_model=TaxonomySyncResult)
def sync_woocommerce_categories(
    commerce_client=Depends(get_commerce_client),
    repository: CategoryRepository = Depends(get_category_repository)
):
    return sync_categories(commerce_client, repository)


@router.post("/woocommerce/brands", response_model=TaxonomySyncResult)
def sync_woocommerce_brands(
    commerce_client=Depends(get_commerce_client),
    repository: BrandRepository = Depends(get_brand_repository)
):
    return sync_brands(commerce_client, repository)
