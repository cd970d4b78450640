"""Unit tests for the PostService."""

import pytest

from post_service.application.schemas import PostCreate, PostUpdate
from post_service.application.services import PostService
from post_service.domain.exceptions import (
    EntityNotFoundError,
    ModificationNotPermittedError,
    StoreConnectivityError,
)
from tests.fakes import FakePostRepository


@pytest.fixture
def repository() -> FakePostRepository:
    return FakePostRepository()


@pytest.fixture
def service(repository: FakePostRepository) -> PostService:
    return PostService(repository)


@pytest.mark.asyncio
async def test_create_post_assigns_id_and_equal_timestamps(service: PostService):
    post = await service.create_post(PostCreate(title="Hello", content="World"))
    assert post.id is not None
    assert post.title == "Hello"
    assert post.content == "World"
    assert post.created_at == post.updated_at


@pytest.mark.asyncio
async def test_create_then_get_round_trip(service: PostService):
    created = await service.create_post(PostCreate(title="Round", content="Trip"))
    fetched = await service.get_post(created.id)
    assert (fetched.title, fetched.content) == ("Round", "Trip")


@pytest.mark.asyncio
async def test_get_post_not_found(service: PostService):
    with pytest.raises(EntityNotFoundError):
        await service.get_post(999)


@pytest.mark.asyncio
async def test_list_posts(service: PostService):
    await service.create_post(PostCreate(title="P1", content="C1"))
    await service.create_post(PostCreate(title="P2", content="C2"))
    posts = await service.list_posts()
    assert [p.title for p in posts] == ["P1", "P2"]


@pytest.mark.asyncio
async def test_list_posts_empty_is_an_empty_list(service: PostService):
    assert await service.list_posts() == []


@pytest.mark.asyncio
async def test_list_posts_passes_through_store_not_found():
    service = PostService(FakePostRepository(empty_list_is_not_found=True))
    with pytest.raises(EntityNotFoundError):
        await service.list_posts()


@pytest.mark.asyncio
async def test_update_only_title(service: PostService):
    created = await service.create_post(PostCreate(title="Old", content="Old content"))
    updated = await service.update_post(created.id, PostUpdate(title="New"))
    assert updated.title == "New"
    assert updated.content == "Old content"
    assert updated.updated_at > created.updated_at
    assert updated.created_at == created.created_at


@pytest.mark.asyncio
async def test_update_only_content(service: PostService):
    created = await service.create_post(PostCreate(title="Title", content="Old"))
    updated = await service.update_post(created.id, PostUpdate(content="New"))
    assert updated.title == "Title"
    assert updated.content == "New"


@pytest.mark.asyncio
async def test_update_with_empty_strings_only_refreshes_timestamp(
    service: PostService, repository: FakePostRepository
):
    created = await service.create_post(PostCreate(title="Keep", content="Me"))
    updated = await service.update_post(created.id, PostUpdate(title="", content=""))
    assert (updated.title, updated.content) == ("Keep", "Me")
    assert updated.updated_at > created.updated_at
    assert repository.calls[-1] == "update"


@pytest.mark.asyncio
async def test_update_with_no_fields_still_submits_update(
    service: PostService, repository: FakePostRepository
):
    created = await service.create_post(PostCreate(title="Keep", content="Me"))
    updated = await service.update_post(created.id, PostUpdate())
    assert updated.updated_at > created.updated_at
    assert repository.calls.count("update") == 1


@pytest.mark.asyncio
async def test_update_missing_post_issues_no_mutation(
    service: PostService, repository: FakePostRepository
):
    with pytest.raises(EntityNotFoundError):
        await service.update_post(42, PostUpdate(title="x"))
    assert repository.mutation_count == 0


@pytest.mark.asyncio
async def test_update_propagates_modification_not_permitted(
    service: PostService, repository: FakePostRepository
):
    created = await service.create_post(PostCreate(title="T", content="C"))
    repository.fail_with = ModificationNotPermittedError("read-only")
    repository.fail_on = "update"
    with pytest.raises(ModificationNotPermittedError):
        await service.update_post(created.id, PostUpdate(title="x"))


@pytest.mark.asyncio
async def test_delete_post(service: PostService):
    created = await service.create_post(PostCreate(title="Delete Me", content="..."))
    await service.delete_post(created.id)
    with pytest.raises(EntityNotFoundError):
        await service.get_post(created.id)


@pytest.mark.asyncio
async def test_delete_twice_reports_not_found_and_keeps_other_posts(service: PostService):
    keep = await service.create_post(PostCreate(title="Keep", content="..."))
    gone = await service.create_post(PostCreate(title="Gone", content="..."))
    await service.delete_post(gone.id)
    with pytest.raises(EntityNotFoundError):
        await service.delete_post(gone.id)
    assert [p.id for p in await service.list_posts()] == [keep.id]


@pytest.mark.asyncio
async def test_delete_missing_post_issues_no_mutation(
    service: PostService, repository: FakePostRepository
):
    with pytest.raises(EntityNotFoundError):
        await service.delete_post(7)
    assert repository.mutation_count == 0


@pytest.mark.asyncio
async def test_store_failure_during_fetch_propagates(
    service: PostService, repository: FakePostRepository
):
    repository.fail_with = StoreConnectivityError("connection refused")
    with pytest.raises(StoreConnectivityError):
        await service.delete_post(1)
    assert repository.mutation_count == 0
