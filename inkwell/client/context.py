"""Client Context - wires clients, cache and storage from Settings for one user session.

Invariants:
    - One FetchCache per context: every page and form of a session shares it,
      so a form's invalidation is seen by the list page that follows
    - The AuthContext is passed in explicitly; signing in replaces its token
    - Storage defaults to the S3 client built from Settings; tests pass a fake
    - Contact forms share one webhook HTTP client, closed by aclose()
"""

from dataclasses import dataclass, field

import httpx

from inkwell.client.api import ApiClient, PublicClient
from inkwell.client.cache import FetchCache
from inkwell.client.contact import ContactFormController
from inkwell.client.forms import CategoryFormController, PostFormController
from inkwell.client.pages import (
    AdminCategoryListPage, AdminPostListPage, PostDetailPage, PostListPage,
)
from inkwell.client.session import AuthContext
from inkwell.client.signup import SignupFormController
from inkwell.client.ui import UserInterface
from inkwell.config import Settings
from inkwell.core.domain_types import Locale
from inkwell.infrastructure.auth_provider import AuthProvider
from inkwell.infrastructure.storage import StorageClient, build_storage_client


@dataclass
class ClientContext:
    settings: Settings
    auth: AuthContext
    ui: UserInterface
    provider: AuthProvider
    storage: StorageClient | None = None
    transport: httpx.AsyncBaseTransport | None = None
    cache: FetchCache = field(default_factory=FetchCache)

    def __post_init__(self):
        self.locale = Locale(self.settings.locale)
        if self.storage is None:
            self.storage = build_storage_client(self.settings)
        self.api = ApiClient(
            self.settings.api_base_url, self.auth,
            transport=self.transport, timeout=self.settings.request_timeout_seconds,
        )
        self.public = PublicClient(
            self.settings.api_base_url,
            transport=self.transport, timeout=self.settings.request_timeout_seconds,
        )
        self.webhook_http = httpx.AsyncClient(
            transport=self.transport, timeout=self.settings.request_timeout_seconds,
        )

    async def sign_in(self, email: str, password: str) -> AuthContext:
        session = await self.provider.sign_in_with_password(email, password)
        fresh = AuthContext.from_session(session)
        self.auth.access_token = fresh.access_token
        self.auth.user_email = fresh.user_email
        return self.auth

    # --- public pages ------------------------------------------------------

    def post_list_page(self) -> PostListPage:
        return PostListPage(self.public.get, self.cache, self.locale)

    def post_detail_page(self, post_id: int) -> PostDetailPage:
        return PostDetailPage(
            self.public.get, self.cache, post_id, storage=self.storage, locale=self.locale,
        )

    def contact_form(self) -> ContactFormController:
        return ContactFormController(
            self.settings.contact_webhook_url, self.ui,
            locale=self.locale, client=self.webhook_http,
        )

    def signup_form(self) -> SignupFormController:
        return SignupFormController(
            self.provider, self.ui,
            redirect_to=self.settings.signup_redirect_url, locale=self.locale,
        )

    # --- admin -------------------------------------------------------------

    def admin_post_list_page(self) -> AdminPostListPage:
        return AdminPostListPage(self.api.get, self.cache, self.locale)

    def admin_category_list_page(self) -> AdminCategoryListPage:
        return AdminCategoryListPage(self.api.get, self.cache, self.locale)

    def post_form(self, post_id: int | None = None) -> PostFormController:
        return PostFormController(
            self.api, self.cache, self.ui, item_id=post_id, locale=self.locale,
            storage=self.storage, thumbnail_prefix=self.settings.thumbnail_prefix,
            cache_control=self.settings.thumbnail_cache_control,
        )

    def category_form(self, category_id: int | None = None) -> CategoryFormController:
        return CategoryFormController(
            self.api, self.cache, self.ui, item_id=category_id, locale=self.locale,
        )

    async def aclose(self) -> None:
        await self.api.aclose()
        await self.public.aclose()
        await self.webhook_http.aclose()
