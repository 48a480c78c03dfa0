"""Tests for comment business logic."""

from uuid import uuid4

import pytest
import pytest_asyncio

from app.core.exceptions import ForbiddenException, InvalidInputException, NotFoundException
from app.schemas.comments import CommentCreate, CommentUpdate
from app.schemas.pagination import Pageable, SortDirection, SortOrder
from app.schemas.reviews import ReviewCreate
from app.services.comment_service import normalize_text


@pytest_asyncio.fixture
async def review(review_service, alice, wine):
    return await review_service.create(alice.id, ReviewCreate(wine_id=wine.id, rating=4))


def test_normalize_text_strips() -> None:
    assert normalize_text("  Lovely  ") == "Lovely"


def test_normalize_text_rejects_blank() -> None:
    with pytest.raises(InvalidInputException) as exc_info:
        normalize_text("   ")
    assert exc_info.value.field == "text"


@pytest.mark.asyncio
async def test_create_comment(comment_service, review, bob) -> None:
    """A comment carries its review id, trimmed text and author summary."""
    comment = await comment_service.create(review.id, bob.id, CommentCreate(text=" Nice pick "))

    assert comment.review_id == review.id
    assert comment.text == "Nice pick"
    assert comment.author.id == bob.id
    assert comment.author.display_name == "Bob"


@pytest.mark.asyncio
async def test_create_comment_unknown_review(comment_service, bob) -> None:
    """Commenting on a missing review is not found."""
    with pytest.raises(NotFoundException, match="Review not found"):
        await comment_service.create(uuid4(), bob.id, CommentCreate(text="Hello"))


@pytest.mark.asyncio
async def test_create_comment_unknown_author(comment_service, comment_repo, review) -> None:
    """Commenting as a missing user is not found and nothing is stored."""
    with pytest.raises(NotFoundException, match="User not found"):
        await comment_service.create(review.id, uuid4(), CommentCreate(text="Hello"))
    assert comment_repo.rows == {}


@pytest.mark.asyncio
async def test_create_blank_comment_is_rejected(comment_service, comment_repo, review, bob) -> None:
    """Whitespace-only text is invalid input and nothing is stored."""
    with pytest.raises(InvalidInputException):
        await comment_service.create(review.id, bob.id, CommentCreate(text="   "))
    assert comment_repo.rows == {}


@pytest.mark.asyncio
async def test_update_comment(comment_service, review, bob) -> None:
    """The author can replace the text; updated_at moves forward."""
    created = await comment_service.create(review.id, bob.id, CommentCreate(text="First"))

    updated = await comment_service.update(created.id, bob.id, CommentUpdate(text="Edited"))

    assert updated.text == "Edited"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


@pytest.mark.asyncio
async def test_update_by_non_author_is_forbidden(comment_service, review, alice, bob) -> None:
    """Only the comment author may edit it, even the review author may not."""
    created = await comment_service.create(review.id, bob.id, CommentCreate(text="Mine"))

    with pytest.raises(ForbiddenException, match="comment"):
        await comment_service.update(created.id, alice.id, CommentUpdate(text="Hijacked"))


@pytest.mark.asyncio
async def test_update_missing_comment(comment_service, bob) -> None:
    with pytest.raises(NotFoundException, match="Comment not found"):
        await comment_service.update(uuid4(), bob.id, CommentUpdate(text="Hello"))


@pytest.mark.asyncio
async def test_delete_comment(comment_service, comment_repo, review, alice, bob) -> None:
    """Non-authors are forbidden; the author removes the comment."""
    created = await comment_service.create(review.id, bob.id, CommentCreate(text="Bye"))

    with pytest.raises(ForbiddenException):
        await comment_service.delete(created.id, alice.id)

    await comment_service.delete(created.id, bob.id)

    assert created.id not in comment_repo.rows
    with pytest.raises(NotFoundException):
        await comment_service.delete(created.id, bob.id)


@pytest.mark.asyncio
async def test_list_by_review_is_chronological(
    comment_service, comment_repo, review, alice, bob
) -> None:
    """A review thread reads oldest first with each author resolved."""
    await comment_service.create(review.id, bob.id, CommentCreate(text="one"))
    await comment_service.create(review.id, alice.id, CommentCreate(text="two"))
    await comment_service.create(review.id, bob.id, CommentCreate(text="three"))

    page = await comment_service.list_by_review(review.id, Pageable())

    assert [c.text for c in page.items] == ["one", "two", "three"]
    assert [c.author.display_name for c in page.items] == ["Bob", "Alice", "Bob"]
    assert comment_repo.last_pageable.sort == [
        SortOrder(field="created_at", direction=SortDirection.ASC)
    ]


@pytest.mark.asyncio
async def test_list_by_author_is_newest_first(comment_service, review, alice, bob) -> None:
    """A user's comments read newest first and exclude other authors."""
    await comment_service.create(review.id, bob.id, CommentCreate(text="older"))
    await comment_service.create(review.id, alice.id, CommentCreate(text="not mine"))
    await comment_service.create(review.id, bob.id, CommentCreate(text="newer"))

    page = await comment_service.list_by_author(bob.id, Pageable())

    assert page.total == 2
    assert [c.text for c in page.items] == ["newer", "older"]


@pytest.mark.asyncio
async def test_list_by_author_unknown_user(comment_service) -> None:
    with pytest.raises(NotFoundException, match="User not found"):
        await comment_service.list_by_author(uuid4(), Pageable())
