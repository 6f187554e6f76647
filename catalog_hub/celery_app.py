"""
Celery application configuration for the catalog background syncs.
"""
from celery import Celery

from catalog_hub.core.config import settings

celery_app = Celery(
    "catalog_hub",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
    include=["catalog_hub.tasks.sync_tasks"],
)

celery_app.conf.update(
    # Serialization
    task_serializer=settings.celery_task_serializer,
    result_serializer=settings.celery_result_serializer,
    accept_content=settings.celery_accept_content,

    # Timezone
    timezone=settings.celery_timezone,
    enable_utc=settings.celery_enable_utc,

    # Task execution
    task_track_started=True,
    task_time_limit=30 * 60,
    task_soft_time_limit=25 * 60,

    # One sync at a time per worker process
    worker_prefetch_multiplier=1,
    worker_max_tasks_per_child=100,

    task_acks_late=True,
    task_reject_on_worker_lost=True,

    result_expires=7200,

    task_routes={
        "catalog_hub.tasks.sync_tasks.*": {
            "queue": "sync_queue",
        },
    },

    broker_connection_retry_on_startup=True,
)

celery_app.conf.beat_schedule = {
    "sync-wordpress-posts-hourly": {
        "task": "catalog_hub.tasks.sync_tasks.sync_wordpress_posts",
        "schedule": 3600.0,
    },
    "sync-categories-every-6-hours": {
        "task": "catalog_hub.tasks.sync_tasks.sync_woocommerce_categories",
        "schedule": 6 * 3600.0,
    },
    "sync-brands-every-6-hours": {
        "task": "catalog_hub.tasks.sync_tasks.sync_woocommerce_brands",
        "schedule": 6 * 3600.0,
    },
}

if __name__ == "__main__":
    celery_app.start()
