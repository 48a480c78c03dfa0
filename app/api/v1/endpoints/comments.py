"""Comment endpoints."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies import CommentServiceDep, CurrentUserId, PageRequest
from app.schemas.comments import COMMENT_SORT_FIELDS, CommentResponse, CommentUpdate
from app.schemas.pagination import Page, parse_sort

router = APIRouter()


@router.get(
    "",
    response_model=Page[CommentResponse],
    status_code=status.HTTP_200_OK,
    tags=["Comments"],
    summary="List comments by author",
)
async def list_comments_by_author(
    current_user_id: CurrentUserId,
    service: CommentServiceDep,
    pageable: PageRequest,
    user_id: UUID | None = Query(None, description="Author ID, defaults to the caller"),
    sort: list[str] | None = Query(None, description="field[,asc|desc]"),
) -> Page[CommentResponse]:
    """
    List comments written by a user, newest first by default.

    Args:
        current_user_id: Authenticated user ID
        service: Comment service
        pageable: Page and size
        user_id: Author ID; the caller's own comments when omitted
        sort: Sort orders

    Returns:
        Paginated list of comments
    """
    pageable = pageable.model_copy(update={"sort": parse_sort(sort, COMMENT_SORT_FIELDS)})
    return await service.list_by_author(user_id or current_user_id, pageable)


@router.put(
    "/{comment_id}",
    response_model=CommentResponse,
    status_code=status.HTTP_200_OK,
    tags=["Comments"],
    summary="Update comment",
)
async def update_comment(
    comment_id: UUID,
    data: CommentUpdate,
    current_user_id: CurrentUserId,
    service: CommentServiceDep,
) -> CommentResponse:
    """Replace a comment's text; only its author may do so."""
    return await service.update(comment_id, current_user_id, data)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Comments"],
    summary="Delete comment",
)
async def delete_comment(
    comment_id: UUID,
    current_user_id: CurrentUserId,
    service: CommentServiceDep,
) -> None:
    """Delete a comment; only its author may do so."""
    await service.delete(comment_id, current_user_id)
