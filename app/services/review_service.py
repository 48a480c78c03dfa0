"""Review service for business logic."""

from uuid import UUID, uuid4

import structlog

from app.core.clock import Clock, utc_now
from app.core.exceptions import (
    MAX_RATING,
    MIN_RATING,
    ForbiddenException,
    InvalidRatingException,
    NotFoundException,
)
from app.repositories.protocols import (
    CommentRepository,
    ReviewRepository,
    UserRepository,
    WineRepository,
)
from app.schemas.pagination import Page, Pageable, SortDirection, SortOrder
from app.schemas.reviews import ReviewCreate, ReviewInDB, ReviewResponse, ReviewUpdate
from app.schemas.users import UserInDB, UserSummary
from app.schemas.wines import WineInDB, WineSummary

logger = structlog.get_logger(__name__)

REVIEW = "Review"
USER = "User"
WINE = "Wine"

NEWEST_FIRST = SortOrder(field="created_at", direction=SortDirection.DESC)


def validate_rating(rating: int) -> int:
    """Reject ratings outside the allowed range."""
    if not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidRatingException(rating)
    return rating


class ReviewService:
    """Service for managing wine reviews."""

    def __init__(
        self,
        reviews: ReviewRepository,
        comments: CommentRepository,
        users: UserRepository,
        wines: WineRepository,
        clock: Clock = utc_now,
    ):
        """Initialize service with repositories and clock."""
        self.reviews = reviews
        self.comments = comments
        self.users = users
        self.wines = wines
        self.clock = clock

    async def create(self, author_id: UUID, data: ReviewCreate) -> ReviewResponse:
        """
        Create a new review.

        Args:
            author_id: ID of the authenticated author
            data: Review creation data

        Returns:
            Created review with comment_count 0

        Raises:
            InvalidInputException: If the rating is outside 1-5
            NotFoundException: If the author or the wine does not exist
        """
        validate_rating(data.rating)
        author = await self._get_user(author_id)
        wine = await self._get_wine(data.wine_id)

        now = self.clock()
        review = await self.reviews.add(
            ReviewInDB(
                id=uuid4(),
                author_id=author.id,
                wine_id=wine.id,
                rating=data.rating,
                notes=data.notes,
                image_url=data.image_url,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info("review_created", review_id=str(review.id), wine_id=str(wine.id))

        return self._to_response(review, author, wine, comment_count=0)

    async def get_by_id(self, review_id: UUID) -> ReviewResponse:
        """
        Get review by ID.

        Raises:
            NotFoundException: If review not found
        """
        review = await self._get_review(review_id)
        return await self._render(review)

    async def update(self, review_id: UUID, caller_id: UUID, data: ReviewUpdate) -> ReviewResponse:
        """
        Apply a partial update to a review owned by the caller.

        Args:
            review_id: Review ID
            caller_id: ID of the authenticated caller
            data: Fields to change; absent or null fields are left untouched

        Returns:
            Updated review

        Raises:
            NotFoundException: If review not found
            ForbiddenException: If the caller is not the author
            InvalidInputException: If the new rating is outside 1-5
        """
        review = await self._get_owned_review(review_id, caller_id)

        changes = data.model_dump(exclude_none=True)
        if "rating" in changes:
            validate_rating(changes["rating"])

        if changes:
            review = await self.reviews.update(
                review.model_copy(update={**changes, "updated_at": self.clock()})
            )
            logger.info("review_updated", review_id=str(review_id), fields=sorted(changes))

        return await self._render(review)

    async def delete(self, review_id: UUID, caller_id: UUID) -> None:
        """
        Delete a review owned by the caller.

        Raises:
            NotFoundException: If review not found
            ForbiddenException: If the caller is not the author
        """
        await self._get_owned_review(review_id, caller_id)
        await self.reviews.delete(review_id)

        logger.info("review_deleted", review_id=str(review_id))

    async def list(
        self,
        pageable: Pageable,
        wine_id: UUID | None = None,
        user_id: UUID | None = None,
    ) -> Page[ReviewResponse]:
        """
        List reviews, optionally filtered by wine and/or author.

        Exactly one repository query runs per call, chosen by which filters are set.
        Ordering defaults to newest first unless the pageable carries a sort.

        Raises:
            NotFoundException: If a filter references a missing wine or user
        """
        pageable = pageable.with_default_sort(NEWEST_FIRST)

        if wine_id is not None:
            await self._get_wine(wine_id)
        if user_id is not None:
            await self._get_user(user_id)

        if wine_id is not None and user_id is not None:
            page = await self.reviews.find_by_wine_and_user(wine_id, user_id, pageable)
        elif wine_id is not None:
            page = await self.reviews.find_by_wine(wine_id, pageable)
        elif user_id is not None:
            page = await self.reviews.find_by_user(user_id, pageable)
        else:
            page = await self.reviews.find_all(pageable)

        return await self._render_page(page)

    async def _get_review(self, review_id: UUID) -> ReviewInDB:
        review = await self.reviews.get_by_id(review_id)
        if review is None:
            raise NotFoundException(REVIEW, review_id)
        return review

    async def _get_owned_review(self, review_id: UUID, caller_id: UUID) -> ReviewInDB:
        review = await self._get_review(review_id)
        if review.author_id != caller_id:
            logger.warning("review_ownership_denied", review_id=str(review_id))
            raise ForbiddenException(REVIEW, review_id)
        return review

    async def _get_user(self, user_id: UUID) -> UserInDB:
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundException(USER, user_id)
        return user

    async def _get_wine(self, wine_id: UUID) -> WineInDB:
        wine = await self.wines.get_by_id(wine_id)
        if wine is None:
            raise NotFoundException(WINE, wine_id)
        return wine

    async def _render(self, review: ReviewInDB) -> ReviewResponse:
        author = await self._get_user(review.author_id)
        wine = await self._get_wine(review.wine_id)
        comment_count = await self.comments.count_by_review(review.id)
        return self._to_response(review, author, wine, comment_count)

    async def _render_page(self, page: Page[ReviewInDB]) -> Page[ReviewResponse]:
        """Render a page with one batched lookup each for authors, wines and comment counts."""
        authors = await self.users.get_by_ids({review.author_id for review in page.items})
        wines = await self.wines.get_by_ids({review.wine_id for review in page.items})
        counts = await self.comments.count_by_reviews([review.id for review in page.items])

        items = [
            self._to_response(
                review,
                authors[review.author_id],
                wines[review.wine_id],
                counts.get(review.id, 0),
            )
            for review in page.items
        ]

        return Page[ReviewResponse](items=items, total=page.total, page=page.page, size=page.size)

    @staticmethod
    def _to_response(
        review: ReviewInDB, author: UserInDB, wine: WineInDB, comment_count: int
    ) -> ReviewResponse:
        return ReviewResponse(
            id=review.id,
            rating=review.rating,
            notes=review.notes,
            image_url=review.image_url,
            created_at=review.created_at,
            updated_at=review.updated_at,
            author=UserSummary.model_validate(author),
            wine=WineSummary.model_validate(wine),
            comment_count=comment_count,
        )
