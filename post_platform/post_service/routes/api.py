"""
JSON API for posts
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..config import settings
from ..db import get_db
from ..posts import PostNotFoundError, create_post, delete_post, list_posts, update_post
from ..schemas import FlashData, PaginationPost, PostIn, PostOut, PostUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["posts"])


def not_found(exc: PostNotFoundError) -> HTTPException:
    logger.info("Post lookup failed: id=%s", exc.post_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


# curl 'http://localhost:8000/api/?page=1&posts_per_page=100'
@router.get("/", response_model=PaginationPost)
def api_list_posts(
    page: int = Query(1, ge=1),
    posts_per_page: int = Query(settings.POSTS_PER_PAGE, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    posts, num_pages = list_posts(db, page, posts_per_page)
    return PaginationPost(
        posts=[PostOut.model_validate(post) for post in posts],
        page=page,
        posts_per_page=posts_per_page,
        num_pages=num_pages,
    )


# curl -X POST -H 'Content-Type: application/json' http://localhost:8000/api/ --data '{"title": "title11", "text": "text11", "new_col": 0}'
@router.post("/", response_model=FlashData)
def api_create_post(payload: PostIn, db: Session = Depends(get_db)):
    create_post(db, payload.title, payload.text, payload.new_col)
    return FlashData(kind="success", message="Post successfully added")


# curl -X PATCH -H 'Content-Type: application/json' http://localhost:8000/api/12 --data '{"title": "title11", "new_col": 4}'
@router.patch("/{post_id}", response_model=FlashData)
def api_update_post(post_id: int, payload: PostUpdate, db: Session = Depends(get_db)):
    try:
        update_post(db, post_id, **payload.model_dump(exclude_unset=True))
    except PostNotFoundError as exc:
        raise not_found(exc) from exc
    return FlashData(kind="success", message="Post successfully updated")


# curl -X DELETE http://localhost:8000/api/12
@router.delete("/{post_id}", response_model=FlashData)
def api_delete_post(post_id: int, db: Session = Depends(get_db)):
    try:
        delete_post(db, post_id)
    except PostNotFoundError as exc:
        raise not_found(exc) from exc
    return FlashData(kind="success", message="Post successfully deleted")
