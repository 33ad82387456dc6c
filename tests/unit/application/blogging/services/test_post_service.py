"""Tests for PostService against in-memory collaborators."""

from dataclasses import replace

import pytest

from blog_service.application.blogging.services.post_service import PostService
from blog_service.application.common.pagination import PageRequest, SortDirection
from blog_service.domain.blogging.entities.author import Author
from blog_service.domain.blogging.entities.post import Post
from blog_service.domain.blogging.exceptions import (
    InvalidAuthorReferenceError,
    PostNotFoundError,
)
from blog_service.domain.common.exceptions import (
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)
from blog_service.domain.common.value_objects.ids import AuthorId, PostId


class InMemoryAuthorLookup:
    def __init__(self, author_ids: list[int]) -> None:
        self.authors = {i: Author(id=AuthorId(i), name=f"author-{i}") for i in author_ids}
        self.lookups: list[AuthorId] = []

    def find_by_id(self, author_id: AuthorId) -> Author | None:
        self.lookups.append(author_id)
        return self.authors.get(author_id.value)


class InMemoryPostRepository:
    """Stores copies so callers cannot mutate stored state without save()."""

    def __init__(self) -> None:
        self.posts: dict[int, Post] = {}
        self.saves = 0
        self.last_page_request: PageRequest | None = None
        self._next_id = 1

    def save(self, post: Post) -> Post:
        self.saves += 1
        if not post.id.is_persisted():
            post = replace(post, id=PostId(self._next_id))
            self._next_id += 1
        else:
            # The store never rebinds authors
            post = replace(post, author_id=self.posts[post.id.value].author_id)
        self.posts[post.id.value] = post
        return replace(post)

    def find_by_id(self, post_id: PostId) -> Post | None:
        post = self.posts.get(post_id.value)
        return replace(post) if post else None

    def find_all(self) -> list[Post]:
        return [replace(p) for p in self.posts.values()]

    def find_by_author(self, author_id: AuthorId) -> list[Post]:
        return [replace(p) for p in self.posts.values() if p.author_id == author_id]

    def find_by_author_and_deletion_state(
        self, author_id: AuthorId, is_deleted: bool
    ) -> list[Post]:
        return [p for p in self.find_by_author(author_id) if p.is_deleted == is_deleted]

    def find_paginated(self, page_request: PageRequest) -> list[Post]:
        self.last_page_request = page_request

        def key(post: Post) -> object:
            value = getattr(post, page_request.sort.field)
            return value.value if isinstance(value, AuthorId | PostId) else value

        ordered = sorted(self.posts.values(), key=key, reverse=not page_request.sort.ascending)
        start = page_request.offset
        return [replace(p) for p in ordered[start : start + page_request.limit]]


@pytest.fixture
def author_lookup() -> InMemoryAuthorLookup:
    return InMemoryAuthorLookup(author_ids=[1, 2])


@pytest.fixture
def post_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def service(
    author_lookup: InMemoryAuthorLookup, post_repository: InMemoryPostRepository
) -> PostService:
    return PostService(author_lookup=author_lookup, post_repository=post_repository)


class TestCreatePost:
    def test_create_post(self, service: PostService) -> None:
        post = service.create_post("Sample Post", author_id=1)

        assert post.id.is_persisted()
        assert post.text == "Sample Post"
        assert post.author_id == AuthorId(1)
        assert post.is_deleted is False

    def test_create_post_assigns_distinct_ids(self, service: PostService) -> None:
        first = service.create_post("First", author_id=1)
        second = service.create_post("Second", author_id=2)

        assert first.id != second.id

    def test_unknown_author_fails_without_writing(
        self, service: PostService, post_repository: InMemoryPostRepository
    ) -> None:
        with pytest.raises(InvalidAuthorReferenceError, match="Invalid author id"):
            service.create_post("Sample Post", author_id=99)

        assert post_repository.saves == 0
        assert post_repository.posts == {}

    def test_unknown_author_error_is_an_invalid_reference(self, service: PostService) -> None:
        with pytest.raises(InvalidReferenceError) as exc_info:
            service.create_post("Sample Post", author_id=99)

        assert exc_info.value.entity_type == "Author"
        assert exc_info.value.entity_id == 99

    @pytest.mark.parametrize("author_id", [0, -5])
    def test_unassignable_author_id_is_an_invalid_reference(
        self,
        service: PostService,
        author_lookup: InMemoryAuthorLookup,
        post_repository: InMemoryPostRepository,
        author_id: int,
    ) -> None:
        with pytest.raises(InvalidAuthorReferenceError) as exc_info:
            service.create_post("Sample Post", author_id=author_id)

        assert exc_info.value.entity_id == author_id
        assert author_lookup.lookups == []
        assert post_repository.saves == 0


class TestUpdatePost:
    def test_update_replaces_text_only(self, service: PostService) -> None:
        created = service.create_post("Sample Post", author_id=1)

        updated = service.update_post("Updated Post", created.id.value)

        assert updated.id == created.id
        assert updated.text == "Updated Post"
        assert updated.author_id == AuthorId(1)
        assert updated.is_deleted is False

    def test_update_soft_deleted_post(self, service: PostService) -> None:
        """Deleted posts stay editable and stay deleted."""
        created = service.create_post("Sample Post", author_id=1)
        service.delete_post(created.id.value)

        updated = service.update_post("Edited after delete", created.id.value)

        assert updated.text == "Edited after delete"
        assert updated.is_deleted is True
        assert updated.author_id == AuthorId(1)

    def test_update_does_not_check_author(
        self,
        service: PostService,
        author_lookup: InMemoryAuthorLookup,
    ) -> None:
        """Update trusts the stored author reference, even if the author is gone."""
        created = service.create_post("Sample Post", author_id=2)
        del author_lookup.authors[2]
        author_lookup.lookups.clear()

        updated = service.update_post("Still editable", created.id.value)

        assert updated.text == "Still editable"
        assert author_lookup.lookups == []

    def test_update_unknown_post(self, service: PostService) -> None:
        with pytest.raises(PostNotFoundError, match="Post not found"):
            service.update_post("Updated Post", 404)

    def test_update_sets_exactly_the_given_text(self, service: PostService) -> None:
        created = service.create_post("Sample Post", author_id=1)

        updated = service.update_post("", created.id.value)

        assert updated.text == ""
        assert service.get_post_by_id(created.id.value).text == ""


class TestDeletePost:
    def test_delete_sets_flag_and_keeps_post(
        self, service: PostService, post_repository: InMemoryPostRepository
    ) -> None:
        created = service.create_post("Sample Post", author_id=1)

        service.delete_post(created.id.value)

        stored = post_repository.posts[created.id.value]
        assert stored.is_deleted is True
        assert stored.text == "Sample Post"

    def test_delete_is_idempotent(self, service: PostService) -> None:
        created = service.create_post("Sample Post", author_id=1)

        service.delete_post(created.id.value)
        service.delete_post(created.id.value)

        assert service.get_post_by_id(created.id.value).is_deleted is True

    def test_delete_does_not_check_author(
        self, service: PostService, author_lookup: InMemoryAuthorLookup
    ) -> None:
        created = service.create_post("Sample Post", author_id=2)
        del author_lookup.authors[2]

        service.delete_post(created.id.value)

        assert service.get_post_by_id(created.id.value).is_deleted is True

    def test_delete_unknown_post(self, service: PostService) -> None:
        with pytest.raises(NotFoundError):
            service.delete_post(404)


class TestGetPost:
    def test_get_post_by_id(self, service: PostService) -> None:
        created = service.create_post("Sample Post", author_id=1)

        fetched = service.get_post_by_id(created.id.value)

        assert fetched.text == "Sample Post"
        assert fetched.author_id == AuthorId(1)

    def test_get_deleted_post(self, service: PostService) -> None:
        created = service.create_post("Sample Post", author_id=1)
        service.delete_post(created.id.value)

        assert service.get_post_by_id(created.id.value).is_deleted is True

    def test_get_unknown_post(self, service: PostService) -> None:
        with pytest.raises(PostNotFoundError) as exc_info:
            service.get_post_by_id(0)

        assert exc_info.value.entity_id == 0


@pytest.mark.parametrize(
    "operation",
    [
        lambda service: service.get_post_by_id(-1),
        lambda service: service.update_post("Updated Post", -1),
        lambda service: service.delete_post(-1),
    ],
    ids=["get", "update", "delete"],
)
def test_negative_post_id_is_not_found(service: PostService, operation) -> None:
    with pytest.raises(PostNotFoundError) as exc_info:
        operation(service)

    assert exc_info.value.entity_id == -1


@pytest.mark.parametrize(
    "operation",
    [
        lambda service: service.list_posts_by_author(-1),
        lambda service: service.list_posts_by_author_and_deletion_state(-1, True),
    ],
    ids=["by_author", "by_author_and_state"],
)
def test_negative_author_id_is_an_invalid_reference(service: PostService, operation) -> None:
    with pytest.raises(InvalidReferenceError):
        operation(service)


class TestListPosts:
    def test_list_includes_deleted_posts(self, service: PostService) -> None:
        first = service.create_post("First", author_id=1)
        service.create_post("Second", author_id=2)
        service.delete_post(first.id.value)

        posts = service.list_posts()

        assert [p.text for p in posts] == ["First", "Second"]
        assert [p.is_deleted for p in posts] == [True, False]

    def test_list_empty_store(self, service: PostService) -> None:
        assert service.list_posts() == []

    def test_list_by_author(self, service: PostService) -> None:
        kept = service.create_post("Mine", author_id=1)
        removed = service.create_post("Mine too", author_id=1)
        service.create_post("Theirs", author_id=2)
        service.delete_post(removed.id.value)

        posts = service.list_posts_by_author(1)

        assert {p.id for p in posts} == {kept.id, removed.id}

    def test_list_by_author_without_posts(self, service: PostService) -> None:
        assert service.list_posts_by_author(2) == []

    def test_list_by_unknown_author_fails(self, service: PostService) -> None:
        """Unlike update and delete, an unknown author is a hard failure here."""
        with pytest.raises(InvalidAuthorReferenceError):
            service.list_posts_by_author(99)

    def test_list_by_unknown_author_and_deletion_state_fails(self, service: PostService) -> None:
        with pytest.raises(InvalidAuthorReferenceError):
            service.list_posts_by_author_and_deletion_state(99, is_deleted=False)

    def test_deletion_states_partition_author_posts(self, service: PostService) -> None:
        posts = [service.create_post(f"Post {i}", author_id=1) for i in range(5)]
        service.create_post("Other author", author_id=2)
        for post in posts[::2]:
            service.delete_post(post.id.value)

        deleted = service.list_posts_by_author_and_deletion_state(1, is_deleted=True)
        active = service.list_posts_by_author_and_deletion_state(1, is_deleted=False)
        everything = service.list_posts_by_author(1)

        deleted_ids = {p.id for p in deleted}
        active_ids = {p.id for p in active}
        assert deleted_ids.isdisjoint(active_ids)
        assert deleted_ids | active_ids == {p.id for p in everything}
        assert all(p.is_deleted for p in deleted)
        assert not any(p.is_deleted for p in active)


class TestListPostsPaginated:
    def test_first_page_ascending_by_id(self, service: PostService) -> None:
        for i in range(5):
            service.create_post(f"Sample Post {i + 1}", author_id=1)

        page = service.list_posts_paginated(0, 3, "id", "asc")

        assert len(page) == 3
        ids = [p.id.value for p in page]
        assert ids == sorted(ids)
        assert [p.text for p in page] == ["Sample Post 1", "Sample Post 2", "Sample Post 3"]

    def test_second_page_descending(self, service: PostService) -> None:
        for i in range(5):
            service.create_post(f"Sample Post {i + 1}", author_id=1)

        page = service.list_posts_paginated(1, 3, "id", "desc")

        assert [p.text for p in page] == ["Sample Post 2", "Sample Post 1"]

    def test_page_past_the_end_is_empty(self, service: PostService) -> None:
        service.create_post("Only post", author_id=1)

        assert service.list_posts_paginated(5, 3) == []

    def test_deleted_posts_are_not_filtered(self, service: PostService) -> None:
        post = service.create_post("Deleted", author_id=1)
        service.delete_post(post.id.value)

        assert [p.is_deleted for p in service.list_posts_paginated(0, 10)] == [True]

    def test_parameters_are_forwarded_unchanged(
        self, service: PostService, post_repository: InMemoryPostRepository
    ) -> None:
        service.list_posts_paginated(2, 7, "text", "DESC")

        page_request = post_repository.last_page_request
        assert page_request is not None
        assert page_request.page_number == 2
        assert page_request.page_size == 7
        assert page_request.sort.field == "text"
        assert page_request.sort.direction is SortDirection.DESC

    @pytest.mark.parametrize(
        ("page_number", "page_size", "sort_field", "sort_direction"),
        [
            (-1, 3, "id", "asc"),
            (0, 0, "id", "asc"),
            (0, 3, "title", "asc"),
            (0, 3, "id", "up"),
        ],
    )
    def test_invalid_parameters_are_rejected(
        self,
        service: PostService,
        post_repository: InMemoryPostRepository,
        page_number: int,
        page_size: int,
        sort_field: str,
        sort_direction: str,
    ) -> None:
        with pytest.raises(ValidationError):
            service.list_posts_paginated(page_number, page_size, sort_field, sort_direction)

        assert post_repository.last_page_request is None


def test_post_lifecycle_scenario(service: PostService) -> None:
    created = service.create_post("Sample Post", author_id=1)
    assert (created.text, created.author_id, created.is_deleted) == (
        "Sample Post",
        AuthorId(1),
        False,
    )

    updated = service.update_post("Updated Post", created.id.value)
    assert (updated.text, updated.author_id) == ("Updated Post", AuthorId(1))

    service.delete_post(created.id.value)
    fetched = service.get_post_by_id(created.id.value)
    assert fetched.is_deleted is True
    assert fetched.text == "Updated Post"

    deleted_ids = [p.id for p in service.list_posts_by_author_and_deletion_state(1, True)]
    active_ids = [p.id for p in service.list_posts_by_author_and_deletion_state(1, False)]
    assert created.id in deleted_ids
    assert created.id not in active_ids
