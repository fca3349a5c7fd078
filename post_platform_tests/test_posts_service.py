"""Tests for the post data operations, without going through HTTP."""
import pytest

from post_platform.post_service.posts import (
    PostNotFoundError,
    create_post,
    delete_post,
    get_post,
    list_posts,
    update_post,
)


def test_list_create_list(db):
    posts, num_pages = list_posts(db, 1, 5)
    assert posts == []
    assert num_pages == 0

    created = create_post(db, "title11", "text11", 17)
    assert created.id is not None

    posts, num_pages = list_posts(db, 1, 5)
    assert num_pages == 1
    assert len(posts) == 1
    assert posts[0].title == "title11"
    assert posts[0].text == "text11"
    assert posts[0].new_col == 17


def test_create_applies_column_default(db):
    post = create_post(db, "defaulted", "text")
    assert post.new_col == 100


def test_list_rejects_non_positive_arguments(db):
    with pytest.raises(ValueError):
        list_posts(db, 0, 5)
    with pytest.raises(ValueError):
        list_posts(db, 1, 0)


def test_num_pages_rounds_up(db):
    for i in range(6):
        create_post(db, f"p{i}", "t")
    _, num_pages = list_posts(db, 1, 5)
    assert num_pages == 2
    _, num_pages = list_posts(db, 1, 3)
    assert num_pages == 2


def test_update_ignores_none_and_rejects_unknown_fields(db):
    post = create_post(db, "before", "text", 1)

    updated = update_post(db, post.id, title="after", text=None)
    assert updated.title == "after"
    assert updated.text == "text"

    with pytest.raises(ValueError):
        update_post(db, post.id, author="nobody")


def test_missing_post_raises(db):
    with pytest.raises(PostNotFoundError) as excinfo:
        get_post(db, 404)
    assert excinfo.value.post_id == 404

    with pytest.raises(PostNotFoundError):
        update_post(db, 404, title="x")
    with pytest.raises(PostNotFoundError):
        delete_post(db, 404)


def test_delete_post(db):
    post = create_post(db, "gone", "soon")
    delete_post(db, post.id)
    with pytest.raises(PostNotFoundError):
        get_post(db, post.id)


def test_page_past_the_end_skips_the_offset_query(db):
    create_post(db, "only", "post")
    posts, num_pages = list_posts(db, 10**19, 5)
    assert posts == []
    assert num_pages == 1

    posts, num_pages = list_posts(db, 2, 5)
    assert posts == []
    posts, _ = list_posts(db, 1, 5)
    assert len(posts) == 1
