"""Form Controllers - admin post/category forms: validate, submit, invalidate, navigate.

Invariants:
    - submit(): idle -> validating -> (invalid | submitting) -> (navigated | failed)
    - While submitting, submit() and delete() return False without side effects
    - Validation errors block the request; they never alert
    - Cache invalidation happens only after the write's success response:
      create -> list key; update/delete -> item key and list key
    - On failure fields are untouched, nothing navigates, one blocking alert
    - Edit forms populate from the server exactly once; background refetches
      never overwrite user edits

Design Decisions:
    - One base class for the shared lifecycle; subclasses supply fields,
      validation and the server payload
    - Transport errors (httpx.HTTPError) alert a generic retry message; the
      remote message is used whenever the server sent one
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from inkwell.client.api import ApiClient
from inkwell.client.cache import FetchCache, FetchState
from inkwell.client.ui import UserInterface
from inkwell.core.domain_types import FormStatus, Locale
from inkwell.core.errors import AuthenticationError, RequestFailedError, StorageError
from inkwell.core.form_data import CategoryFormData, PostFormData
from inkwell.core.language_strings import get_string
from inkwell.core.validation import (
    FormErrors, validate_category_form, validate_post_form,
)
from inkwell.infrastructure.storage import StorageClient
from inkwell.services.thumbnails import resolve_thumbnail_url, upload_thumbnail

logger = logging.getLogger(__name__)

ADMIN_POSTS_ENDPOINT = "/api/admin/posts"
ADMIN_CATEGORIES_ENDPOINT = "/api/admin/categories"
ADMIN_POSTS_ROUTE = "/admin/posts"
ADMIN_CATEGORIES_ROUTE = "/admin/categories"


def describe_failure(exc: Exception, locale: Locale = Locale.EN) -> str:
    """Alert detail for a failed request: remote message, else status, else retry hint."""
    if isinstance(exc, RequestFailedError):
        return exc.remote_message or get_string(
            "alert.status", locale, status=exc.status_code,
        )
    return get_string("alert.retry", locale)


class _FormController(ABC):
    """Shared submit/delete lifecycle for the admin forms."""

    collection_endpoint: str = ""
    list_route: str = ""
    noun: str = ""

    def __init__(
        self,
        api: ApiClient,
        cache: FetchCache,
        ui: UserInterface,
        item_id: int | None = None,
        locale: Locale = Locale.EN,
    ):
        self.api = api
        self.cache = cache
        self.ui = ui
        self.item_id = item_id
        self.locale = locale
        self.status = FormStatus.IDLE
        self.errors: FormErrors = {}
        self.form_initialized = item_id is None

    # --- hooks -------------------------------------------------------------

    @abstractmethod
    def validate(self) -> FormErrors:
        ...

    @abstractmethod
    def payload(self) -> dict:
        ...

    @abstractmethod
    def populate(self, data: dict) -> None:
        ...

    # --- lifecycle ---------------------------------------------------------

    @property
    def is_edit(self) -> bool:
        return self.item_id is not None

    @property
    def item_endpoint(self) -> str | None:
        if self.item_id is None:
            return None
        return f"{self.collection_endpoint}/{self.item_id}"

    @property
    def is_submitting(self) -> bool:
        return self.status == FormStatus.SUBMITTING

    async def load(self) -> FetchState:
        """Fetch the item being edited and populate the form on first success."""
        if self.item_endpoint is None:
            return FetchState()
        state = await self.cache.load(self.item_endpoint, self.api.get)
        if state.data is not None and not self.form_initialized:
            self.populate(state.data)
            self.form_initialized = True
        return state

    async def submit(self) -> bool:
        if self.is_submitting:
            return False
        self.status = FormStatus.VALIDATING
        self.errors = self.validate()
        if self.errors:
            self.status = FormStatus.INVALID
            return False

        self.status = FormStatus.SUBMITTING
        action = "update" if self.is_edit else "create"
        try:
            if self.is_edit:
                await self.api.put(self.item_endpoint, self.payload())
            else:
                await self.api.post(self.collection_endpoint, self.payload())
        except (RequestFailedError, AuthenticationError, httpx.HTTPError) as e:
            self._fail(action, e)
            return False

        if self.is_edit:
            self.cache.invalidate(self.item_endpoint)
        self.cache.invalidate(self.collection_endpoint)
        verb = "updated" if self.is_edit else "created"
        self._succeed(f"alert.{self.noun}.{verb}")
        return True

    async def delete(self) -> bool:
        if self.is_submitting or not self.is_edit:
            return False
        if not self.ui.confirm(get_string("alert.confirm_delete", self.locale)):
            return False

        self.status = FormStatus.SUBMITTING
        try:
            await self.api.delete(self.item_endpoint)
        except (RequestFailedError, AuthenticationError, httpx.HTTPError) as e:
            self._fail("delete", e)
            return False

        self.cache.invalidate(self.item_endpoint)
        self.cache.invalidate(self.collection_endpoint)
        self._succeed(f"alert.{self.noun}.deleted")
        return True

    def _succeed(self, message_key: str) -> None:
        self.ui.alert(get_string(message_key, self.locale))
        self.ui.navigate(self.list_route)
        self.status = FormStatus.NAVIGATED

    def _fail(self, action: str, exc: Exception) -> None:
        self.status = FormStatus.FAILED
        if isinstance(exc, AuthenticationError):
            self.ui.alert(get_string("alert.auth.required", self.locale))
            return
        logger.warning(
            f"{self.noun} {action} failed: {exc}",
            extra={"endpoint": self.item_endpoint or self.collection_endpoint},
        )
        self.ui.alert(get_string(
            f"alert.{action}.failed", self.locale,
            detail=describe_failure(exc, self.locale),
        ))


class CategoryFormController(_FormController):
    collection_endpoint = ADMIN_CATEGORIES_ENDPOINT
    list_route = ADMIN_CATEGORIES_ROUTE
    noun = "category"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields = CategoryFormData()

    def set_name(self, name: str) -> None:
        self.fields.name = name

    def validate(self) -> FormErrors:
        return validate_category_form(self.fields, self.locale)

    def payload(self) -> dict:
        return self.fields.to_payload()

    def populate(self, data: dict) -> None:
        category = data.get("category") or {}
        self.fields = CategoryFormData(name=category.get("name", ""))


class PostFormController(_FormController):
    """Post form, including category options and thumbnail upload."""

    collection_endpoint = ADMIN_POSTS_ENDPOINT
    list_route = ADMIN_POSTS_ROUTE
    noun = "post"

    def __init__(
        self,
        *args,
        storage: StorageClient | None = None,
        require_thumbnail: bool = False,
        thumbnail_prefix: str = "private",
        cache_control: str | None = "max-age=3600",
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.fields = PostFormData()
        self.storage = storage
        self.require_thumbnail = require_thumbnail
        self.thumbnail_prefix = thumbnail_prefix
        self.cache_control = cache_control
        self.category_options: list[dict[str, Any]] = []

    def set_field(self, name: str, value: str) -> None:
        if name not in ("title", "content", "thumbnail_image_key"):
            raise ValueError(f"Unknown post field: {name}")
        setattr(self.fields, name, value)

    def select_categories(self, category_ids: list[int]) -> None:
        self.fields.categories = [int(cid) for cid in category_ids]

    async def load_categories(self) -> FetchState:
        state = await self.cache.load(ADMIN_CATEGORIES_ENDPOINT, self.api.get)
        if state.data is not None:
            self.category_options = state.data.get("categories", [])
        return state

    async def upload_thumbnail(
        self, data: bytes, content_type: str = "application/octet-stream",
    ) -> str | None:
        """Upload an image; on success the returned key becomes thumbnail_image_key."""
        if not data:
            return None
        if self.storage is None:
            logger.error("Thumbnail upload attempted without a storage client")
            self.ui.alert(get_string(
                "alert.upload.failed", self.locale,
                detail=get_string("upload.storage.missing", self.locale),
            ))
            return None
        try:
            key = await upload_thumbnail(
                self.storage, data, content_type,
                prefix=self.thumbnail_prefix, cache_control=self.cache_control,
            )
        except StorageError as e:
            self.ui.alert(get_string("alert.upload.failed", self.locale, detail=e.message))
            return None
        self.fields.thumbnail_image_key = key
        return key

    @property
    def thumbnail_url(self) -> str | None:
        if self.storage is None:
            return None
        return resolve_thumbnail_url(self.storage, self.fields.thumbnail_image_key)

    def validate(self) -> FormErrors:
        return validate_post_form(
            self.fields, self.locale, require_thumbnail=self.require_thumbnail,
        )

    def payload(self) -> dict:
        return self.fields.to_payload()

    def populate(self, data: dict) -> None:
        self.fields = PostFormData.from_post(data.get("post") or {})
