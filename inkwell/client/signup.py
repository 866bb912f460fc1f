"""Signup Form - email/password registration through the hosted auth provider.

Invariants:
    - The provider sends a confirmation mail that links back to redirect_to
    - Fields reset only on success; any provider failure shows one generic alert
"""

import logging

from inkwell.client.ui import UserInterface
from inkwell.core.domain_types import FormStatus, Locale
from inkwell.core.errors import InkwellError
from inkwell.core.form_data import SignupFormData
from inkwell.core.language_strings import get_string
from inkwell.core.validation import FormErrors, validate_signup_form
from inkwell.infrastructure.auth_provider import AuthProvider

logger = logging.getLogger(__name__)


class SignupFormController:

    def __init__(
        self,
        provider: AuthProvider,
        ui: UserInterface,
        redirect_to: str | None = None,
        locale: Locale = Locale.EN,
    ):
        self.provider = provider
        self.ui = ui
        self.redirect_to = redirect_to
        self.locale = locale
        self.fields = SignupFormData()
        self.errors: FormErrors = {}
        self.status = FormStatus.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.status == FormStatus.SUBMITTING

    async def submit(self) -> bool:
        if self.is_submitting:
            return False
        self.status = FormStatus.VALIDATING
        self.errors = validate_signup_form(self.fields, self.locale)
        if self.errors:
            self.status = FormStatus.INVALID
            return False

        self.status = FormStatus.SUBMITTING
        try:
            await self.provider.sign_up(
                self.fields.email, self.fields.password, redirect_to=self.redirect_to,
            )
        except InkwellError as e:
            logger.warning(f"Signup failed: {e.message}", extra={"error_code": e.code})
            self.status = FormStatus.FAILED
            self.ui.alert(get_string("alert.signup.failed", self.locale))
            return False

        self.fields = SignupFormData()
        self.status = FormStatus.IDLE
        self.ui.alert(get_string("alert.signup.sent", self.locale))
        return True
