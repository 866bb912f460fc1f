"""SignupFormController - provider signup with confirmation redirect."""

from inkwell.client.signup import SignupFormController
from inkwell.core.domain_types import FormStatus
from inkwell.core.form_data import SignupFormData
from tests.fakes import FakeAuthProvider, RecordingUI


async def test_signup_success():
    provider, ui = FakeAuthProvider(), RecordingUI()
    form = SignupFormController(provider, ui, redirect_to="http://localhost:3000/login")
    form.fields = SignupFormData("new@example.com", "password1")

    assert await form.submit() is True
    assert provider.signups == [{
        "email": "new@example.com", "password": "password1",
        "redirect_to": "http://localhost:3000/login",
    }]
    assert form.fields == SignupFormData()
    assert ui.alerts == ["A confirmation email has been sent."]


async def test_signup_validation_blocks_provider():
    provider, ui = FakeAuthProvider(), RecordingUI()
    form = SignupFormController(provider, ui)
    form.fields = SignupFormData("bad", "short")

    assert await form.submit() is False
    assert set(form.errors) == {"email", "password"}
    assert provider.signups == []


async def test_signup_provider_failure():
    provider, ui = FakeAuthProvider(), RecordingUI()
    provider.fail_signup = True
    form = SignupFormController(provider, ui)
    form.fields = SignupFormData("taken@example.com", "password1")

    assert await form.submit() is False
    assert form.status == FormStatus.FAILED
    assert form.fields.email == "taken@example.com"
    assert ui.alerts == ["Sign-up failed."]
