"""
Server-rendered HTML pages for browsing and editing posts.

Every form submission answers with a 303 redirect to the list page and leaves
a flash message behind in a cookie, which the list page shows once.
"""
import logging
from typing import Optional

import jinja2
from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from ..config import settings
from ..db import get_db
from ..posts import PostNotFoundError, create_post, delete_post, get_post, list_posts, update_post
from ..schemas import FlashData
from ..utils.flash import FLASH_COOKIE_NAME, flash_redirect, get_flash

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)


def render(request: Request, name: str, context: dict) -> HTMLResponse:
    try:
        return templates.TemplateResponse(request, name, context)
    except jinja2.TemplateError as e:
        logger.error("Failed to render %s: %s", name, e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Template error"
        ) from e


def lookup(db: Session, post_id: int):
    try:
        return get_post(db, post_id)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found") from exc


@router.get("/", response_class=HTMLResponse)
def list_page(
    request: Request,
    page: int = Query(1, ge=1),
    posts_per_page: int = Query(settings.POSTS_PER_PAGE, ge=1, le=1000),
    db: Session = Depends(get_db),
):
    posts, num_pages = list_posts(db, page, posts_per_page)
    flash = get_flash(request)
    response = render(request, "index.html", {
        "posts": posts,
        "page": page,
        "posts_per_page": posts_per_page,
        "num_pages": num_pages,
        "flash": flash,
    })
    if FLASH_COOKIE_NAME in request.cookies:
        response.delete_cookie(FLASH_COOKIE_NAME, path="/")
    return response


@router.post("/")
def create_from_form(
    title: str = Form(..., min_length=1),
    text: str = Form(...),
    db: Session = Depends(get_db),
):
    create_post(db, title, text)
    return flash_redirect(FlashData(kind="success", message="Post successfully added"))


# Registered ahead of "/{post_id}" so it is not read as an id
@router.get("/new", response_class=HTMLResponse)
def new_page(request: Request):
    return render(request, "new.html", {})


@router.get("/{post_id}", response_class=HTMLResponse)
def edit_page(request: Request, post_id: int, db: Session = Depends(get_db)):
    post = lookup(db, post_id)
    return render(request, "edit.html", {"post": post})


@router.post("/{post_id}")
def update_from_form(
    post_id: int,
    title: str = Form(..., min_length=1),
    text: str = Form(...),
    new_col: Optional[int] = Form(None),
    db: Session = Depends(get_db),
):
    try:
        update_post(db, post_id, title=title, text=text, new_col=new_col)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found") from exc
    return flash_redirect(FlashData(kind="success", message="Post successfully updated"))


@router.post("/delete/{post_id}")
def delete_from_form(post_id: int, db: Session = Depends(get_db)):
    try:
        delete_post(db, post_id)
    except PostNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found") from exc
    return flash_redirect(FlashData(kind="success", message="Post successfully deleted"))
