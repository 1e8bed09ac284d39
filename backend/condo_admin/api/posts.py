from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from condo_admin.api.deps import get_current_user, get_privileged_user
from condo_admin.database import get_db
from condo_admin.models.post import Post
from condo_admin.schemas.post import PostCreate, PostListResponse, PostResponse, PostUpdate
from condo_admin.schemas.user import Principal

router = APIRouter(prefix="/posts", tags=["posts"])


async def _get_post_or_404(db: AsyncSession, post_id: uuid.UUID) -> Post:
    result = await db.execute(select(Post).where(Post.id == post_id))
    post = result.scalar_one_or_none()
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.get("", response_model=PostListResponse)
async def list_posts(
    _current_user: Principal = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> dict:
    result = await db.execute(select(Post).order_by(Post.created_at.desc()))
    posts = result.scalars().all()
    return {
        "data": [PostResponse.model_validate(p) for p in posts],
        "total": len(posts),
    }


@router.get("/{post_id}", response_model=dict)
async def get_post(
    post_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _current_user: Principal = Depends(get_current_user),
) -> dict:
    post = await _get_post_or_404(db, post_id)
    return {"data": PostResponse.model_validate(post)}


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: PostCreate,
    db: AsyncSession = Depends(get_db),
    syndic: Principal = Depends(get_privileged_user),
) -> dict:
    post = Post(title=body.title, content=body.content, author_id=syndic.subject)
    db.add(post)
    await db.commit()
    await db.refresh(post)
    return {"data": PostResponse.model_validate(post)}


@router.put("/{post_id}", response_model=dict)
async def update_post(
    post_id: uuid.UUID,
    body: PostUpdate,
    db: AsyncSession = Depends(get_db),
    _syndic: Principal = Depends(get_privileged_user),
) -> dict:
    post = await _get_post_or_404(db, post_id)

    # The author is fixed at creation
    for field, value in body.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(post, field, value)

    await db.commit()
    await db.refresh(post)
    return {"data": PostResponse.model_validate(post)}


@router.delete("/{post_id}", response_model=dict)
async def delete_post(
    post_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _syndic: Principal = Depends(get_privileged_user),
) -> dict:
    post = await _get_post_or_404(db, post_id)
    await db.delete(post)
    await db.commit()
    return {"message": "Post deleted"}
