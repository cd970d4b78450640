"""Post CRUD endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from post_service.application.schemas import (
    ErrorResponse,
    PostCreate,
    PostResponse,
    PostUpdate,
    to_post_responses,
)
from post_service.application.services import PostService
from post_service.domain.exceptions import (
    EntityNotFoundError,
    ModificationNotPermittedError,
    StoreError,
)
from post_service.infrastructure.dependencies import get_post_service

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

# Bounded to the 32-bit integer primary key.
MAX_POST_ID = 2**31 - 1

PostId = Annotated[int, Path(gt=0, le=MAX_POST_ID, description="The post id")]

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def _not_found(exc: EntityNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _internal_error(exc: StoreError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.get("", response_model=list[PostResponse], responses=_NOT_FOUND)
async def list_posts(
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """Retrieve all posts."""
    try:
        posts = await service.list_posts()
    except EntityNotFoundError as e:
        raise _not_found(e)
    except StoreError as e:
        raise _internal_error(e)
    return to_post_responses(posts)


@router.get("/{post_id}", response_model=PostResponse, responses=_NOT_FOUND)
async def get_post(
    post_id: PostId,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Retrieve a single post by ID."""
    try:
        post = await service.get_post(post_id)
    except EntityNotFoundError as e:
        raise _not_found(e)
    except StoreError as e:
        raise _internal_error(e)
    return PostResponse.from_entity(post)


@router.post("", response_model=PostResponse)
async def create_post(
    data: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a new post."""
    try:
        post = await service.create_post(data)
    except StoreError as e:
        raise _internal_error(e)
    return PostResponse.from_entity(post)


@router.put("/{post_id}", response_model=PostResponse, responses=_NOT_FOUND)
async def update_post(
    data: PostUpdate,
    post_id: PostId,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Update the supplied fields of an existing post; ``updatedAt`` always advances."""
    try:
        post = await service.update_post(post_id, data)
    except EntityNotFoundError as e:
        raise _not_found(e)
    except ModificationNotPermittedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError as e:
        raise _internal_error(e)
    return PostResponse.from_entity(post)


@router.delete("/{post_id}", responses=_NOT_FOUND)
async def delete_post(
    post_id: PostId,
    service: PostService = Depends(get_post_service),
) -> Response:
    """Delete a post by ID."""
    try:
        await service.delete_post(post_id)
    except EntityNotFoundError as e:
        raise _not_found(e)
    except StoreError as e:
        raise _internal_error(e)
    return Response(status_code=status.HTTP_200_OK)
