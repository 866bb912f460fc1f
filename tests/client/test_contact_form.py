"""ContactFormController - webhook post, reset on success, message on failure."""

import json

import httpx

from inkwell.client.contact import ContactFormController
from inkwell.core.domain_types import FormStatus
from inkwell.core.form_data import ContactFormData
from tests.fakes import RecordingUI

WEBHOOK = "https://hooks.test/contacts"


def _form(handler, ui):
    form = ContactFormController(WEBHOOK, ui, transport=httpx.MockTransport(handler))
    form.fields = ContactFormData("Taro", "taro@example.com", "Hello")
    return form


async def test_success_posts_payload_and_resets():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"ok": True})

    ui = RecordingUI()
    form = _form(handler, ui)
    assert await form.submit() is True

    assert str(requests[0].url) == WEBHOOK
    assert "authorization" not in requests[0].headers
    assert json.loads(requests[0].read()) == {
        "name": "Taro", "email": "taro@example.com", "message": "Hello",
    }
    assert form.fields == ContactFormData()
    assert form.status == FormStatus.IDLE
    assert ui.alerts == ["Your message has been sent."]
    await form.aclose()


async def test_invalid_form_sends_nothing():
    requests = []
    ui = RecordingUI()
    form = ContactFormController(
        WEBHOOK, ui, transport=httpx.MockTransport(lambda r: requests.append(r)),
    )
    assert await form.submit() is False
    assert form.status == FormStatus.INVALID
    assert requests == []
    assert ui.alerts == []


async def test_webhook_message_shown_and_fields_kept():
    ui = RecordingUI()
    form = _form(lambda r: httpx.Response(429, json={"message": "Too many requests"}), ui)
    assert await form.submit() is False
    assert ui.alerts == ["Failed to send. Too many requests"]
    assert form.fields.name == "Taro"
    assert form.status == FormStatus.FAILED


async def test_status_used_when_body_has_no_message():
    ui = RecordingUI()
    form = _form(lambda r: httpx.Response(500, text="oops"), ui)
    await form.submit()
    assert ui.alerts == ["Failed to send. Error: 500"]


async def test_unreachable_webhook():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    ui = RecordingUI()
    form = _form(handler, ui)
    await form.submit()
    assert ui.alerts == ["Failed to send. Please try again."]


async def test_shared_client_left_open_for_its_owner():
    shared = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    form = ContactFormController(WEBHOOK, RecordingUI(), client=shared)
    form.fields = ContactFormData("Taro", "taro@example.com", "Hello")

    assert await form.submit() is True
    await form.aclose()
    assert shared.is_closed is False
    await shared.aclose()
