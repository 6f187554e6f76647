"""
Celery tasks for scheduled catalog synchronization.
"""
import logging
from typing import Any, Dict

from celery import Task

from catalog_hub.celery_app import celery_app
from catalog_hub.core.config import settings
from catalog_hub.db.session import SessionLocal
from catalog_hub.factories import build_blog_client, build_commerce_client
from catalog_hub.repositories import BrandRepository, CategoryRepository, PostRepository
from catalog_hub.services.post_sync import PostSyncEngine
from catalog_hub.services.taxonomy_sync import sync_brands, sync_categories

logger = logging.getLogger(__name__)


class DatabaseTask(Task):
    """Base task with database session management."""
    _db = None

    @property
    def db(self):
        if self._db is None:
            self._db = SessionLocal()
        return self._db

    def after_return(self, *args, **kwargs):
        if self._db is not None:
            self._db.close()
            self._db = None


def run_post_sync(engine: PostSyncEngine) -> Dict[str, Any]:
    """Drain a post sync run and summarize its last event."""
    last = None
    for event in engine.run():
        last = event
    return last.model_dump()


@celery_app.task(
    bind=True,
    base=DatabaseTask,
    name="catalog_hub.tasks.sync_tasks.sync_wordpress_posts"
)
def sync_wordpress_posts(self) -> Dict[str, Any]:
    """
    Full refresh of the published WordPress posts.

    Returns:
        The final progress event (complete or error) as a dict
    """
    logger.info("Starting scheduled WordPress post sync")
    engine = PostSyncEngine(
        build_blog_client(settings),
        PostRepository(self.db),
        page_size=settings.sync_page_size,
    )
    result = run_post_sync(engine)
    if result["status"] == "error":
        logger.error(f"Scheduled post sync failed: {result['message']}")
    else:
        logger.info(f"Scheduled post sync done: {result['processed']}/{result['total']}")
    return result


@celery_app.task(
    bind=True,
    base=DatabaseTask,
    name="catalog_hub.tasks.sync_tasks.sync_woocommerce_categories"
)
def sync_woocommerce_categories(self) -> Dict[str, Any]:
    try:
        result = sync_categories(build_commerce_client(settings), CategoryRepository(self.db))
        return {"success": True, **result.model_dump(mode="json")}
    except Exception as exc:
        logger.error(f"Error in category sync: {exc}")
        return {"success": False, "error": str(exc)}


@celery_app.task(
    bind=True,
    base=DatabaseTask,
    name="catalog_hub.tasks.sync_tasks.sync_woocommerce_brands"
)
def sync_woocommerce_brands(self) -> Dict[str, Any]:
    try:
        result = sync_brands(build_commerce_client(settings), BrandRepository(self.db))
        return {"success": True, **result.model_dump(mode="json")}
    except Exception as exc:
        logger.error(f"Error in brand sync: {exc}")
        return {"success": False, "error": str(exc)}
