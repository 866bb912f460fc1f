"""Page Models - list and detail views rendered from the fetch cache.

Invariants:
    - Render order: loading, then error, then empty/not-found, then ready
    - List items link to the public detail route or the admin edit route
    - Thumbnails are resolved from their storage key at render time only
    - A 404 on a detail fetch renders NOT_FOUND, never ERROR
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from inkwell.client.cache import FetchCache, FetchState, Fetcher
from inkwell.core.domain_types import Locale, ViewStatus
from inkwell.core.errors import RequestFailedError
from inkwell.core.language_strings import get_string
from inkwell.infrastructure.storage import StorageClient
from inkwell.services.thumbnails import resolve_thumbnail_url


@dataclass
class ListItem:
    id: int
    title: str
    href: str
    created_at: str | None = None
    categories: list[str] = field(default_factory=list)
    content: str | None = None


@dataclass
class ListView:
    status: ViewStatus
    items: list[ListItem] = field(default_factory=list)
    message: str | None = None


@dataclass
class PostDetailView:
    status: ViewStatus
    message: str | None = None
    title: str | None = None
    content: str | None = None
    created_at: str | None = None
    categories: list[str] = field(default_factory=list)
    thumbnail_url: str | None = None


def format_date(value: str | None) -> str | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value).date().isoformat()
    except ValueError:
        return value


def _error_detail(error: Exception) -> str:
    if isinstance(error, RequestFailedError):
        return error.remote_message or f"HTTP {error.status_code}"
    return str(error) or type(error).__name__


def _category_names(post: dict) -> list[str]:
    return [
        pc["category"]["name"]
        for pc in post.get("postCategories", [])
        if pc.get("category")
    ]


class _ListPage(ABC):
    endpoint: str = ""
    collection_key: str = ""
    empty_message_key: str = ""

    def __init__(self, fetcher: Fetcher, cache: FetchCache, locale: Locale = Locale.EN):
        self.fetcher = fetcher
        self.cache = cache
        self.locale = locale

    async def load(self) -> ListView:
        return self.render(await self.cache.load(self.endpoint, self.fetcher))

    def view(self) -> ListView:
        """Current view without fetching (LOADING until the first load completes)."""
        return self.render(self.cache.peek(self.endpoint))

    def render(self, state: FetchState) -> ListView:
        if state.is_loading:
            return ListView(ViewStatus.LOADING, message=get_string("page.loading", self.locale))
        if state.error is not None:
            return ListView(
                ViewStatus.ERROR,
                message=get_string("page.error", self.locale, detail=_error_detail(state.error)),
            )
        records = (state.data or {}).get(self.collection_key) or []
        if not records:
            return ListView(
                ViewStatus.EMPTY, message=get_string(self.empty_message_key, self.locale),
            )
        return ListView(ViewStatus.READY, items=[self.to_item(r) for r in records])

    @abstractmethod
    def to_item(self, record: dict[str, Any]) -> ListItem:
        ...


class PostListPage(_ListPage):
    """Public front page."""
    endpoint = "/api/posts"
    collection_key = "posts"
    empty_message_key = "page.posts.empty"
    item_route = "/posts"

    def to_item(self, record: dict[str, Any]) -> ListItem:
        return ListItem(
            id=record["id"],
            title=record["title"],
            href=f"{self.item_route}/{record['id']}",
            created_at=format_date(record.get("createdAt")),
            categories=_category_names(record),
            content=record.get("content"),
        )


class AdminPostListPage(PostListPage):
    endpoint = "/api/admin/posts"
    item_route = "/admin/posts"


class AdminCategoryListPage(_ListPage):
    endpoint = "/api/admin/categories"
    collection_key = "categories"
    empty_message_key = "page.categories.empty"

    def to_item(self, record: dict[str, Any]) -> ListItem:
        return ListItem(
            id=record["id"],
            title=record["name"],
            href=f"/admin/categories/{record['id']}",
            created_at=format_date(record.get("createdAt")),
        )


class PostDetailPage:
    """Public post page."""

    def __init__(
        self,
        fetcher: Fetcher,
        cache: FetchCache,
        post_id: int,
        storage: StorageClient | None = None,
        locale: Locale = Locale.EN,
    ):
        self.fetcher = fetcher
        self.cache = cache
        self.post_id = post_id
        self.storage = storage
        self.locale = locale

    @property
    def endpoint(self) -> str:
        return f"/api/posts/{self.post_id}"

    async def load(self) -> PostDetailView:
        return self.render(await self.cache.load(self.endpoint, self.fetcher))

    def view(self) -> PostDetailView:
        return self.render(self.cache.peek(self.endpoint))

    def render(self, state: FetchState) -> PostDetailView:
        if state.is_loading:
            return PostDetailView(ViewStatus.LOADING, message=get_string("page.loading", self.locale))
        error = state.error
        if isinstance(error, RequestFailedError) and error.status_code == 404:
            return self._not_found()
        if error is not None:
            return PostDetailView(
                ViewStatus.ERROR,
                message=get_string("page.error", self.locale, detail=_error_detail(error)),
            )
        post = (state.data or {}).get("post")
        if not post:
            return self._not_found()
        thumbnail_url = None
        if self.storage is not None:
            thumbnail_url = resolve_thumbnail_url(self.storage, post.get("thumbnailImageKey"))
        return PostDetailView(
            ViewStatus.READY,
            title=post["title"],
            content=post["content"],
            created_at=format_date(post.get("createdAt")),
            categories=_category_names(post),
            thumbnail_url=thumbnail_url,
        )

    def _not_found(self) -> PostDetailView:
        return PostDetailView(
            ViewStatus.NOT_FOUND, message=get_string("page.post.not_found", self.locale),
        )
