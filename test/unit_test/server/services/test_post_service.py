"""Unit tests for PostService against an in-memory database."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from postboard.core.database.entities import User
from postboard.core.database.repositories import build_repos
from postboard.core.errors import ConflictError, NotFoundError, ValidationError
from postboard.core.models.io.posts import PostCreate, PostUpdate
from postboard.server.services.posts import PostService

pytestmark = pytest.mark.asyncio


@pytest.fixture
def service(session) -> PostService:
    return PostService(build_repos(session))


@pytest_asyncio.fixture
async def author(session) -> User:
    user = User(email="author@example.com", name="Author")
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def test_create_draft(service: PostService, author: User):
    post = await service.create(PostCreate(author_id=author.id, title="My First Post", body="Hello"))
    assert post.id is not None
    assert post.slug == "my-first-post"
    assert post.published is False
    assert post.published_at is None


async def test_create_published(service: PostService, author: User):
    post = await service.create(PostCreate(author_id=author.id, title="Live", body="x", published=True))
    assert post.published is True
    assert post.published_at is not None


async def test_create_requires_author(service: PostService):
    with pytest.raises(NotFoundError) as exc_info:
        await service.create(PostCreate(author_id=99, title="Orphan", body="x"))
    assert exc_info.value.resource == "User"


async def test_create_slug_conflict(service: PostService, author: User):
    await service.create(PostCreate(author_id=author.id, title="Same", body="x"))
    with pytest.raises(ConflictError):
        await service.create(PostCreate(author_id=author.id, title="SAME!", body="y"))


async def test_create_slug_taken_after_check_is_conflict(service: PostService, author: User):
    await service.create(PostCreate(author_id=author.id, title="Raced", body="x"))
    service.repos.posts.slug_exists = AsyncMock(return_value=False)

    with pytest.raises(ConflictError) as exc_info:
        await service.create(PostCreate(author_id=author.id, title="Raced", body="y"))

    assert exc_info.value.details == {"field": "slug", "value": "raced"}
    assert await service.repos.posts.count() == 1


async def test_get_by_slug(service: PostService, author: User):
    created = await service.create(PostCreate(author_id=author.id, title="Findable", body="x"))
    assert (await service.get_by_slug("findable")).id == created.id
    with pytest.raises(NotFoundError):
        await service.get_by_slug("missing")


async def test_list_for_author(service: PostService, author: User):
    await service.create(PostCreate(author_id=author.id, title="Draft one", body="x"))
    live = await service.create(PostCreate(author_id=author.id, title="Live one", body="x", published=True))

    items, total = await service.list_for_author(author.id, published=True)
    assert [p.id for p in items] == [live.id]
    assert total == 1

    with pytest.raises(NotFoundError):
        await service.list_for_author(author.id + 1)


async def test_update_title_reslugs(service: PostService, author: User):
    post = await service.create(PostCreate(author_id=author.id, title="Before", body="x"))
    updated = await service.update(post.id, PostUpdate(title="After"))
    assert updated.slug == "after"


async def test_update_same_title_keeps_slug(service: PostService, author: User):
    post = await service.create(PostCreate(author_id=author.id, title="Keep", body="x"))
    updated = await service.update(post.id, PostUpdate(title="keep"))
    assert updated.slug == "keep"


async def test_update_empty(service: PostService, author: User):
    post = await service.create(PostCreate(author_id=author.id, title="Keep", body="x"))
    with pytest.raises(ValidationError):
        await service.update(post.id, PostUpdate())


async def test_publish_is_idempotent(service: PostService, author: User):
    post = await service.create(PostCreate(author_id=author.id, title="Toggle", body="x"))
    first = await service.publish(post.id)
    stamp = first.published_at
    second = await service.publish(post.id)
    assert second.published_at == stamp

    draft = await service.unpublish(post.id)
    assert draft.published is False
    assert draft.published_at is None
    assert (await service.unpublish(post.id)).published is False


async def test_delete(service: PostService, author: User):
    post = await service.create(PostCreate(author_id=author.id, title="Gone", body="x"))
    await service.delete(post.id)
    with pytest.raises(NotFoundError):
        await service.get(post.id)
    with pytest.raises(NotFoundError):
        await service.delete(post.id)
