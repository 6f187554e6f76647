from fastapi import APIRouter, Depends, Query

from catalog_hub.api.deps import get_post_repository
from catalog_hub.repositories import PostRepository
from catalog_hub.schemas.posts import PostListResponse, PostRead

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=PostListResponse)
def list_posts(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    limit: int = Query(20, ge=1, le=100),
    repository: PostRepository = Depends(get_post_repository)
):
    posts = repository.find_paginated(page=page, page_size=limit)
    return PostListResponse(
        data=[PostRead.model_validate(post) for post in posts],
        total=repository.count_published(),
        page=page,
        limit=limit,
    )
