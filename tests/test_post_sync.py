"""
Post sync engine tests.

Checks that:
1. Progress is reported page by page in increasing order
2. A storage failure ends the run with an error event and no further fetches
3. Re-running against the same source never duplicates rows
"""
from datetime import datetime, timedelta
from unittest.mock import MagicMock

from sqlalchemy.orm import Session

from catalog_hub.core.exceptions import PersistenceError, RemoteApiError
from catalog_hub.models.post_models import SyncedPost
from catalog_hub.repositories import PostRepository
from catalog_hub.schemas.posts import Rendered, WpPost
from catalog_hub.services.post_sync import PostSyncEngine
from catalog_hub.services.wordpress_blog import WordPressBlogClient


def make_wp_post(index: int) -> WpPost:
    return WpPost(
        id=1000 + index,
        title={"rendered": f"Bài viết {index}"},
        content={"rendered": f"<p>Nội dung {index}</p>"},
        excerpt={"rendered": ""},
        slug=f"bai-viet-{index}",
        link=f"https://blog.example.com/bai-viet-{index}",
        status="publish",
        date=datetime(2026, 1, 1) + timedelta(hours=index),
        modified=datetime(2026, 1, 2) + timedelta(hours=index),
        author=1,
        categories=[3],
        tags=[7, 8],
        yoast_meta={"yoast_title": f"SEO {index}", "yoast_focuskw": "giày"},
    )


class FakeBlogClient:
    transform_post = staticmethod(WordPressBlogClient.transform_post)

    def __init__(self, posts):
        self.posts = posts
        self.requested_pages = []

    def get_total_posts(self):
        return len(self.posts)

    def list_posts(self, page=1, per_page=20, status="publish"):
        self.requested_pages.append(page)
        start = (page - 1) * per_page
        return self.posts[start:start + per_page]


def processed_sequence(events):
    return [event.processed for event in events if event.status == "progress"]


def test_progress_sequence_for_45_posts(db: Session):
    blog = FakeBlogClient([make_wp_post(i) for i in range(45)])

    events = list(PostSyncEngine(blog, PostRepository(db), page_size=20).run())

    assert events[0].status == "started"
    assert processed_sequence(events) == [0, 20, 40, 45]
    assert events[-1].status == "complete"
    assert events[-1].total == 45
    assert events[-1].processed == 45
    assert blog.requested_pages == [1, 2, 3, 4]
    assert db.query(SyncedPost).count() == 45


def test_storage_failure_on_second_page_stops_the_run():
    """Test: A failed upsert ends the stream and no later page is fetched"""
    blog = FakeBlogClient([make_wp_post(i) for i in range(45)])
    repository = MagicMock()
    repository.upsert_many.side_effect = [20, PersistenceError("Failed to upsert posts: disk full")]

    events = list(PostSyncEngine(blog, repository, page_size=20).run())

    assert processed_sequence(events) == [0, 20]
    assert events[-1].status == "error"
    assert events[-1].message == "Failed to upsert posts: disk full"
    assert blog.requested_pages == [1, 2]


def test_remote_failure_becomes_error_event():
    blog = MagicMock()
    blog.get_total_posts.side_effect = RemoteApiError("WordPress API error: 401 Unauthorized", 401)

    events = list(PostSyncEngine(blog, MagicMock()).run())

    assert [event.status for event in events] == ["started", "error"]
    assert "401" in events[-1].message


def test_committed_pages_survive_a_later_failure(db: Session):
    posts = [make_wp_post(i) for i in range(45)]
    blog = FakeBlogClient(posts)
    original = blog.list_posts

    def failing_third_page(page=1, per_page=20, status="publish"):
        if page == 3:
            raise RemoteApiError("WordPress API error: 500 Internal Server Error", 500)
        return original(page=page, per_page=per_page, status=status)

    blog.list_posts = failing_third_page

    events = list(PostSyncEngine(blog, PostRepository(db), page_size=20).run())

    assert events[-1].status == "error"
    assert db.query(SyncedPost).count() == 40


def test_rerun_is_idempotent(db: Session):
    """Test: Two runs over the same source leave one row per WordPress id"""
    blog = FakeBlogClient([make_wp_post(i) for i in range(45)])
    repository = PostRepository(db)

    first = list(PostSyncEngine(blog, repository, page_size=20).run())
    count_after_first = db.query(SyncedPost).count()
    second = list(PostSyncEngine(blog, repository, page_size=20).run())

    assert first[-1].status == second[-1].status == "complete"
    assert count_after_first == 45
    assert db.query(SyncedPost).count() == 45


def test_rerun_overwrites_changed_posts(db: Session):
    posts = [make_wp_post(i) for i in range(3)]
    repository = PostRepository(db)
    list(PostSyncEngine(FakeBlogClient(posts), repository).run())

    posts[1] = posts[1].model_copy(update={"title": Rendered(rendered="Tiêu đề mới")})
    list(PostSyncEngine(FakeBlogClient(posts), repository).run())

    db.expire_all()
    stored = repository.find_by_wordpress_id(1001)
    assert stored.title == "Tiêu đề mới"
    assert db.query(SyncedPost).count() == 3


def test_empty_source_completes_with_zero():
    blog = FakeBlogClient([])
    repository = MagicMock()

    events = list(PostSyncEngine(blog, repository).run())

    assert processed_sequence(events) == [0]
    assert events[-1].status == "complete"
    repository.upsert_many.assert_not_called()


def test_interleaved_runs_are_not_coordinated(db: Session):
    """
    Two runs stepping through the same source are independent: each one
    re-does the whole sync and reports its own counts. Only the conflict
    key keeps the table free of duplicates; there is no locking between
    runs.
    """
    posts = [make_wp_post(i) for i in range(25)]
    repository = PostRepository(db)
    first = PostSyncEngine(FakeBlogClient(posts), repository, page_size=20).run()
    second = PostSyncEngine(FakeBlogClient(posts), repository, page_size=20).run()

    first_events, second_events = [], []
    for a, b in zip(first, second):
        first_events.append(a)
        second_events.append(b)

    assert processed_sequence(first_events) == [0, 20, 25]
    assert processed_sequence(second_events) == [0, 20, 25]
    assert db.query(SyncedPost).count() == 25
