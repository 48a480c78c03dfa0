"""Persistence contracts consumed by the service layer."""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from app.schemas.comments import CommentInDB
from app.schemas.pagination import Page, Pageable
from app.schemas.reviews import ReviewInDB
from app.schemas.users import UserInDB
from app.schemas.wines import WineInDB


class UserRepository(Protocol):
    """Keyed access to users."""

    async def get_by_id(self, user_id: UUID) -> UserInDB | None: ...

    async def get_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, UserInDB]: ...

    async def get_by_external_subject_id(self, external_subject_id: str) -> UserInDB | None: ...

    async def add(self, user: UserInDB) -> UserInDB: ...

    async def update(self, user: UserInDB) -> UserInDB: ...


class WineRepository(Protocol):
    """Read-only access to the wine catalogue."""

    async def get_by_id(self, wine_id: UUID) -> WineInDB | None: ...

    async def get_by_ids(self, wine_ids: Iterable[UUID]) -> dict[UUID, WineInDB]: ...


class ReviewRepository(Protocol):
    """Keyed access and filtered pagination over reviews."""

    async def get_by_id(self, review_id: UUID) -> ReviewInDB | None: ...

    async def add(self, review: ReviewInDB) -> ReviewInDB: ...

    async def update(self, review: ReviewInDB) -> ReviewInDB: ...

    async def delete(self, review_id: UUID) -> None: ...

    async def find_all(self, pageable: Pageable) -> Page[ReviewInDB]: ...

    async def find_by_wine(self, wine_id: UUID, pageable: Pageable) -> Page[ReviewInDB]: ...

    async def find_by_user(self, user_id: UUID, pageable: Pageable) -> Page[ReviewInDB]: ...

    async def find_by_wine_and_user(
        self, wine_id: UUID, user_id: UUID, pageable: Pageable
    ) -> Page[ReviewInDB]: ...


class CommentRepository(Protocol):
    """Keyed access, pagination and counting over comments."""

    async def get_by_id(self, comment_id: UUID) -> CommentInDB | None: ...

    async def add(self, comment: CommentInDB) -> CommentInDB: ...

    async def update(self, comment: CommentInDB) -> CommentInDB: ...

    async def delete(self, comment_id: UUID) -> None: ...

    async def find_by_review(self, review_id: UUID, pageable: Pageable) -> Page[CommentInDB]: ...

    async def find_by_author(self, author_id: UUID, pageable: Pageable) -> Page[CommentInDB]: ...

    async def count_by_review(self, review_id: UUID) -> int: ...

    async def count_by_reviews(self, review_ids: Iterable[UUID]) -> dict[UUID, int]: ...
