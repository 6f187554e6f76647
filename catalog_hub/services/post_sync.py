"""
Full-refresh synchronization of published WordPress posts.

The engine walks the posts page by page, upserting each page as one batch
keyed by ``wordpress_id`` before reporting progress and requesting the next
page. Events come out of ``run()`` in order:

    started -> progress(0) -> progress(n) ... -> complete | error

A run is not resumable: after an error, pages already upserted stay
committed and the next run starts again from page 1. Two concurrent runs
are not coordinated and may interleave their upserts.
"""
import logging
from datetime import datetime, timezone
from typing import Iterator

from catalog_hub.repositories.post_repository import PostRepository
from catalog_hub.schemas.posts import (
    SyncComplete,
    SyncFailed,
    SyncInProgress,
    SyncProgress,
    SyncStarted,
)
from catalog_hub.services.wordpress_blog import WordPressBlogClient

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


class PostSyncEngine:
    def __init__(
        self,
        blog_client: WordPressBlogClient,
        post_repository: PostRepository,
        page_size: int = DEFAULT_PAGE_SIZE
    ):
        self.blog = blog_client
        self.posts = post_repository
        self.page_size = page_size

    def run(self) -> Iterator[SyncProgress]:
        """Run one sync pass, yielding progress events. Never raises."""
        yield SyncStarted()

        try:
            total = self.blog.get_total_posts()
            processed = 0
            yield SyncInProgress(total=total, processed=processed)

            page = 1
            while True:
                wp_posts = self.blog.list_posts(page=page, per_page=self.page_size, status="publish")
                if not wp_posts:
                    break

                synced_at = datetime.now(timezone.utc)
                rows = [self.blog.transform_post(wp_post, synced_at) for wp_post in wp_posts]
                self.posts.upsert_many(rows)

                processed += len(wp_posts)
                logger.info(f"Post sync page {page}: {processed}/{total}")
                yield SyncInProgress(total=total, processed=processed)
                page += 1
        except Exception as e:
            logger.error(f"Post sync failed: {e}")
            yield SyncFailed(message=str(e) or e.__class__.__name__)
            return

        yield SyncComplete(total=total, processed=processed)
