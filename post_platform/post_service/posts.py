"""
Data operations on posts shared by the JSON API and the HTML pages.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from .models import Post

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "text", "new_col")


class PostNotFoundError(LookupError):
    """Raised when no post exists with the requested id."""

    def __init__(self, post_id: int):
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


def list_posts(db: Session, page: int, posts_per_page: int) -> Tuple[List[Post], int]:
    """
    Fetch one page of posts ordered by id.

    Args:
        db: Database session
        page: 1-based page number
        posts_per_page: Page size, at least 1

    Returns:
        Tuple of (posts on the page, total number of pages)
    """
    if page < 1 or posts_per_page < 1:
        raise ValueError("page and posts_per_page must be positive")

    query = db.query(Post).order_by(Post.id.asc())
    total = query.count()
    num_pages = (total + posts_per_page - 1) // posts_per_page
    # Past the last page; also keeps OFFSET within the database integer range
    if page > max(num_pages, 1):
        return [], num_pages
    posts = query.offset((page - 1) * posts_per_page).limit(posts_per_page).all()
    return posts, num_pages


def get_post(db: Session, post_id: int) -> Post:
    post = db.get(Post, post_id)
    if post is None:
        raise PostNotFoundError(post_id)
    return post


def create_post(db: Session, title: str, text: str, new_col: Optional[int] = None) -> Post:
    post = Post(title=title, text=text)
    # Left unset, the column default applies
    if new_col is not None:
        post.new_col = new_col
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("Post created: id=%s title=%r", post.id, post.title)
    return post


def update_post(db: Session, post_id: int, **fields) -> Post:
    post = get_post(db, post_id)
    for name, value in fields.items():
        if name not in UPDATABLE_FIELDS:
            raise ValueError(f"Unknown post field '{name}'")
        if value is not None:
            setattr(post, name, value)
    db.commit()
    db.refresh(post)
    logger.info("Post updated: id=%s fields=%s", post.id, sorted(fields))
    return post


def delete_post(db: Session, post_id: int) -> None:
    post = get_post(db, post_id)
    db.delete(post)
    db.commit()
    logger.info("Post deleted: id=%s", post_id)
