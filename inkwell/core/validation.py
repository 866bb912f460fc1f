"""Form Validation - pure functions mapping form values to per-field error messages.

Invariants:
    - Return value is {wire_field_name: message}; an absent key means valid
    - At most one message per field (required check wins over length check)
    - Never mutates the input; never does IO
    - Required checks strip whitespace; length checks use the raw value

Design Decisions:
    - Plain functions over pydantic models: the client needs every field's
      message at once in a fixed wording, not a ValidationError trace
    - Keys are wire names (thumbnailImageKey, not thumbnail_image_key) so the
      same dict can be rendered next to the field it came from
    - Email syntax is delegated to pydantic EmailStr (email-validator) and
      only its pass/fail outcome is kept
"""

import re

from pydantic import EmailStr, TypeAdapter, ValidationError

from inkwell.core.domain_types import Locale
from inkwell.core.form_data import (
    CategoryFormData, PostFormData, LegacyPostFormData,
    ContactFormData, SignupFormData,
)
from inkwell.core.language_strings import get_string

CATEGORY_NAME_MAX = 50
POST_TITLE_MAX = 50
POST_CONTENT_MAX = 1000
CONTACT_NAME_MAX = 30
CONTACT_MESSAGE_MAX = 500
PASSWORD_MIN = 8

THUMBNAIL_URL_PATTERN = re.compile(r"^(https?://)\S+$")
_EMAIL_ADAPTER = TypeAdapter(EmailStr)

FormErrors = dict[str, str]


def _check_text(
    errors: FormErrors, field: str, value: str, max_length: int,
    required_key: str, too_long_key: str, locale: Locale,
) -> None:
    if not value.strip():
        errors[field] = get_string(required_key, locale)
    elif len(value) > max_length:
        errors[field] = get_string(too_long_key, locale)


def _is_email(value: str) -> bool:
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


def _check_categories(errors: FormErrors, categories: list[int], locale: Locale) -> None:
    if not categories:
        errors["categories"] = get_string("post.categories.required", locale)


def validate_category_form(
    form: CategoryFormData, locale: Locale = Locale.EN,
) -> FormErrors:
    errors: FormErrors = {}
    _check_text(
        errors, "name", form.name, CATEGORY_NAME_MAX,
        "category.name.required", "category.name.too_long", locale,
    )
    return errors


def validate_post_form(
    form: PostFormData,
    locale: Locale = Locale.EN,
    require_thumbnail: bool = False,
) -> FormErrors:
    """Validate the canonical post form.

    The thumbnail is referenced by storage key; it is optional unless
    require_thumbnail is set.
    """
    errors: FormErrors = {}
    _check_text(
        errors, "title", form.title, POST_TITLE_MAX,
        "post.title.required", "post.title.too_long", locale,
    )
    _check_text(
        errors, "content", form.content, POST_CONTENT_MAX,
        "post.content.required", "post.content.too_long", locale,
    )
    if require_thumbnail and not (form.thumbnail_image_key or "").strip():
        errors["thumbnailImageKey"] = get_string("post.thumbnail_key.required", locale)
    _check_categories(errors, form.categories, locale)
    return errors


def validate_legacy_post_form(
    form: LegacyPostFormData, locale: Locale = Locale.EN,
) -> FormErrors:
    """Validate the superseded form variant that stored a literal thumbnail URL."""
    errors: FormErrors = {}
    _check_text(
        errors, "title", form.title, POST_TITLE_MAX,
        "post.title.required", "post.title.too_long", locale,
    )
    _check_text(
        errors, "content", form.content, POST_CONTENT_MAX,
        "post.content.required", "post.content.too_long", locale,
    )
    if not form.thumbnail_url.strip():
        errors["thumbnailUrl"] = get_string("post.thumbnail_url.required", locale)
    elif not THUMBNAIL_URL_PATTERN.match(form.thumbnail_url):
        errors["thumbnailUrl"] = get_string("post.thumbnail_url.invalid", locale)
    _check_categories(errors, form.categories, locale)
    return errors


def validate_contact_form(
    form: ContactFormData, locale: Locale = Locale.EN,
) -> FormErrors:
    errors: FormErrors = {}
    _check_text(
        errors, "name", form.name, CONTACT_NAME_MAX,
        "contact.name.required", "contact.name.too_long", locale,
    )
    if not form.email:
        errors["email"] = get_string("contact.email.required", locale)
    elif not _is_email(form.email):
        errors["email"] = get_string("contact.email.invalid", locale)
    _check_text(
        errors, "message", form.message, CONTACT_MESSAGE_MAX,
        "contact.message.required", "contact.message.too_long", locale,
    )
    return errors


def validate_signup_form(
    form: SignupFormData, locale: Locale = Locale.EN,
) -> FormErrors:
    errors: FormErrors = {}
    if not form.email:
        errors["email"] = get_string("signup.email.required", locale)
    elif not _is_email(form.email):
        errors["email"] = get_string("signup.email.invalid", locale)
    if len(form.password) < PASSWORD_MIN:
        errors["password"] = get_string("signup.password.too_short", locale)
    return errors
