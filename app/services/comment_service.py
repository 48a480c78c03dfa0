"""Comment service for business logic."""

from uuid import UUID, uuid4

import structlog

from app.core.clock import Clock, utc_now
from app.core.exceptions import ForbiddenException, InvalidInputException, NotFoundException
from app.repositories.protocols import CommentRepository, ReviewRepository, UserRepository
from app.schemas.comments import CommentCreate, CommentInDB, CommentResponse, CommentUpdate
from app.schemas.pagination import Page, Pageable, SortDirection, SortOrder
from app.schemas.users import UserInDB, UserSummary

logger = structlog.get_logger(__name__)

COMMENT = "Comment"
REVIEW = "Review"
USER = "User"

# Author activity feed reads newest first, a review thread reads chronologically
NEWEST_FIRST = SortOrder(field="created_at", direction=SortDirection.DESC)
OLDEST_FIRST = SortOrder(field="created_at", direction=SortDirection.ASC)


def normalize_text(text: str) -> str:
    """Strip surrounding whitespace and reject blank comment text."""
    cleaned = text.strip()
    if not cleaned:
        raise InvalidInputException("Comment text must not be blank", field="text")
    return cleaned


class CommentService:
    """Service for managing comments on reviews."""

    def __init__(
        self,
        comments: CommentRepository,
        reviews: ReviewRepository,
        users: UserRepository,
        clock: Clock = utc_now,
    ):
        """Initialize service with repositories and clock."""
        self.comments = comments
        self.reviews = reviews
        self.users = users
        self.clock = clock

    async def create(self, review_id: UUID, author_id: UUID, data: CommentCreate) -> CommentResponse:
        """
        Add a comment to a review.

        Args:
            review_id: Review being commented on
            author_id: ID of the authenticated author
            data: Comment content

        Returns:
            Created comment with author summary

        Raises:
            InvalidInputException: If the text is blank
            NotFoundException: If the review or the author does not exist
        """
        text = normalize_text(data.text)
        if await self.reviews.get_by_id(review_id) is None:
            raise NotFoundException(REVIEW, review_id)
        author = await self._get_user(author_id)

        now = self.clock()
        comment = await self.comments.add(
            CommentInDB(
                id=uuid4(),
                review_id=review_id,
                author_id=author.id,
                text=text,
                created_at=now,
                updated_at=now,
            )
        )

        logger.info("comment_created", comment_id=str(comment.id), review_id=str(review_id))

        return self._to_response(comment, author)

    async def update(
        self, comment_id: UUID, caller_id: UUID, data: CommentUpdate
    ) -> CommentResponse:
        """
        Replace the text of a comment owned by the caller.

        Raises:
            InvalidInputException: If the text is blank
            NotFoundException: If comment not found
            ForbiddenException: If the caller is not the author
        """
        text = normalize_text(data.text)
        comment = await self._get_owned_comment(comment_id, caller_id)
        author = await self._get_user(caller_id)

        comment = await self.comments.update(
            comment.model_copy(update={"text": text, "updated_at": self.clock()})
        )

        logger.info("comment_updated", comment_id=str(comment_id))

        return self._to_response(comment, author)

    async def delete(self, comment_id: UUID, caller_id: UUID) -> None:
        """
        Delete a comment owned by the caller.

        Raises:
            NotFoundException: If comment not found
            ForbiddenException: If the caller is not the author
        """
        await self._get_owned_comment(comment_id, caller_id)
        await self.comments.delete(comment_id)

        logger.info("comment_deleted", comment_id=str(comment_id))

    async def list_by_author(self, user_id: UUID, pageable: Pageable) -> Page[CommentResponse]:
        """
        List a user's comments, newest first unless a sort is given.

        Raises:
            NotFoundException: If user not found
        """
        author = await self._get_user(user_id)
        page = await self.comments.find_by_author(user_id, pageable.with_default_sort(NEWEST_FIRST))

        items = [self._to_response(comment, author) for comment in page.items]
        return Page[CommentResponse](items=items, total=page.total, page=page.page, size=page.size)

    async def list_by_review(self, review_id: UUID, pageable: Pageable) -> Page[CommentResponse]:
        """
        List the comment thread of a review, oldest first unless a sort is given.

        Raises:
            NotFoundException: If review not found
        """
        if await self.reviews.get_by_id(review_id) is None:
            raise NotFoundException(REVIEW, review_id)

        page = await self.comments.find_by_review(review_id, pageable.with_default_sort(OLDEST_FIRST))
        authors = await self.users.get_by_ids({comment.author_id for comment in page.items})

        items = [self._to_response(comment, authors[comment.author_id]) for comment in page.items]
        return Page[CommentResponse](items=items, total=page.total, page=page.page, size=page.size)

    async def _get_owned_comment(self, comment_id: UUID, caller_id: UUID) -> CommentInDB:
        comment = await self.comments.get_by_id(comment_id)
        if comment is None:
            raise NotFoundException(COMMENT, comment_id)
        if comment.author_id != caller_id:
            logger.warning("comment_ownership_denied", comment_id=str(comment_id))
            raise ForbiddenException(COMMENT, comment_id)
        return comment

    async def _get_user(self, user_id: UUID) -> UserInDB:
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundException(USER, user_id)
        return user

    @staticmethod
    def _to_response(comment: CommentInDB, author: UserInDB) -> CommentResponse:
        return CommentResponse(
            id=comment.id,
            review_id=comment.review_id,
            text=comment.text,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            author=UserSummary.model_validate(author),
        )
