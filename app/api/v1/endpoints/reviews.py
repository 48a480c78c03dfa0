"""Review endpoints."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies import CommentServiceDep, CurrentUserId, PageRequest, ReviewServiceDep
from app.schemas.comments import COMMENT_SORT_FIELDS, CommentCreate, CommentResponse
from app.schemas.pagination import Page, parse_sort
from app.schemas.reviews import REVIEW_SORT_FIELDS, ReviewCreate, ReviewResponse, ReviewUpdate

router = APIRouter()


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Reviews"],
    summary="Create review",
)
async def create_review(
    data: ReviewCreate,
    current_user_id: CurrentUserId,
    service: ReviewServiceDep,
) -> ReviewResponse:
    """
    Create a review of a wine authored by the authenticated user.

    Args:
        data: Review creation data
        current_user_id: Authenticated user ID
        service: Review service

    Returns:
        Created review
    """
    return await service.create(current_user_id, data)


@router.get(
    "",
    response_model=Page[ReviewResponse],
    status_code=status.HTTP_200_OK,
    tags=["Reviews"],
    summary="List reviews",
)
async def list_reviews(
    current_user_id: CurrentUserId,
    service: ReviewServiceDep,
    pageable: PageRequest,
    wine_id: UUID | None = Query(None),
    user_id: UUID | None = Query(None),
    sort: list[str] | None = Query(None, description="field[,asc|desc]"),
) -> Page[ReviewResponse]:
    """
    List reviews filtered by wine and/or author, newest first by default.

    Args:
        current_user_id: Authenticated user ID
        service: Review service
        pageable: Page and size
        wine_id: Filter by wine ID
        user_id: Filter by author ID
        sort: Sort orders

    Returns:
        Paginated list of reviews
    """
    pageable = pageable.model_copy(update={"sort": parse_sort(sort, REVIEW_SORT_FIELDS)})
    return await service.list(pageable, wine_id=wine_id, user_id=user_id)


@router.get(
    "/{review_id}",
    response_model=ReviewResponse,
    status_code=status.HTTP_200_OK,
    tags=["Reviews"],
    summary="Get review by ID",
)
async def get_review(
    review_id: UUID,
    current_user_id: CurrentUserId,
    service: ReviewServiceDep,
) -> ReviewResponse:
    """Get a specific review by ID."""
    return await service.get_by_id(review_id)


@router.put(
    "/{review_id}",
    response_model=ReviewResponse,
    status_code=status.HTTP_200_OK,
    tags=["Reviews"],
    summary="Update review",
)
async def update_review(
    review_id: UUID,
    data: ReviewUpdate,
    current_user_id: CurrentUserId,
    service: ReviewServiceDep,
) -> ReviewResponse:
    """
    Partially update a review; only its author may do so.

    Args:
        review_id: Review ID
        data: Fields to change
        current_user_id: Authenticated user ID
        service: Review service

    Returns:
        Updated review
    """
    return await service.update(review_id, current_user_id, data)


@router.delete(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Reviews"],
    summary="Delete review",
)
async def delete_review(
    review_id: UUID,
    current_user_id: CurrentUserId,
    service: ReviewServiceDep,
) -> None:
    """Delete a review and its comments; only its author may do so."""
    await service.delete(review_id, current_user_id)


@router.post(
    "/{review_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Comments"],
    summary="Comment on review",
)
async def create_comment(
    review_id: UUID,
    data: CommentCreate,
    current_user_id: CurrentUserId,
    service: CommentServiceDep,
) -> CommentResponse:
    """
    Add a comment to a review.

    Args:
        review_id: Review ID
        data: Comment content
        current_user_id: Authenticated user ID
        service: Comment service

    Returns:
        Created comment
    """
    return await service.create(review_id, current_user_id, data)


@router.get(
    "/{review_id}/comments",
    response_model=Page[CommentResponse],
    status_code=status.HTTP_200_OK,
    tags=["Comments"],
    summary="List review comments",
)
async def list_review_comments(
    review_id: UUID,
    current_user_id: CurrentUserId,
    service: CommentServiceDep,
    pageable: PageRequest,
    sort: list[str] | None = Query(None, description="field[,asc|desc]"),
) -> Page[CommentResponse]:
    """List the comment thread of a review, oldest first by default."""
    pageable = pageable.model_copy(update={"sort": parse_sort(sort, COMMENT_SORT_FIELDS)})
    return await service.list_by_review(review_id, pageable)
