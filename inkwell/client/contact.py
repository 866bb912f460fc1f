"""Contact Form - public form posting {name, email, message} to an external webhook.

Invariants:
    - No Authorization header: the webhook is public
    - Fields reset only after a 2xx response
    - Failure alerts carry the webhook's message when it sent one
    - aclose() closes the HTTP client only when this controller created it
"""

import logging

import httpx

from inkwell.client.ui import UserInterface
from inkwell.core.domain_types import FormStatus, Locale
from inkwell.core.form_data import ContactFormData
from inkwell.core.language_strings import get_string
from inkwell.core.validation import FormErrors, validate_contact_form

logger = logging.getLogger(__name__)


class ContactFormController:

    def __init__(
        self,
        webhook_url: str,
        ui: UserInterface,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
        locale: Locale = Locale.EN,
        client: httpx.AsyncClient | None = None,
    ):
        self.webhook_url = webhook_url
        self.ui = ui
        self.locale = locale
        self.fields = ContactFormData()
        self.errors: FormErrors = {}
        self.status = FormStatus.IDLE
        self._owns_http = client is None
        self._http = client or httpx.AsyncClient(transport=transport, timeout=timeout)

    @property
    def is_submitting(self) -> bool:
        return self.status == FormStatus.SUBMITTING

    def reset(self) -> None:
        self.fields = ContactFormData()
        self.errors = {}

    async def submit(self) -> bool:
        if self.is_submitting:
            return False
        self.status = FormStatus.VALIDATING
        self.errors = validate_contact_form(self.fields, self.locale)
        if self.errors:
            self.status = FormStatus.INVALID
            return False

        self.status = FormStatus.SUBMITTING
        try:
            response = await self._http.post(self.webhook_url, json=self.fields.to_payload())
        except httpx.HTTPError as e:
            logger.error(f"Contact webhook unreachable: {e}")
            self._fail(get_string("alert.retry", self.locale))
            return False

        if not response.is_success:
            self._fail(self._remote_message(response))
            return False

        self.reset()
        self.status = FormStatus.IDLE
        self.ui.alert(get_string("alert.contact.sent", self.locale))
        return True

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def _remote_message(self, response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return get_string("alert.status", self.locale, status=response.status_code)

    def _fail(self, detail: str) -> None:
        self.status = FormStatus.FAILED
        self.ui.alert(get_string("alert.contact.failed", self.locale, detail=detail))
