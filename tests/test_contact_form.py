# -*- coding: utf-8 -*-
"""Contact form: validation, outcomes, transient status."""

from __future__ import annotations

import asyncio

import pytest
import requests

from core.types import Locale, SubmitResult, Tone
from domain.contact_validation import is_valid_email, validation_error
from services.contact_channel import FORM_SELECTOR, ContactForm, RequestsContactTransport
from services.errors import ValidationFailure

VALID = {"name": "Ana", "email": "ana@example.com", "message": "Hola"}
TEXTS = {"contact_send": "Enviar", "contact_required": "Completa todos los campos.",
         "contact_email_invalid": "Email no válido.", "contact_success": "Mensaje enviado.",
         "contact_error": "No se pudo enviar.", "contact_network_error": "Error de red."}


def _form(transport, renderer, clear_after=5.0) -> ContactForm:
    return ContactForm(
        transport, renderer,
        translate=lambda k: TEXTS.get(k, k),
        language=lambda: Locale.ES,
        clear_after=clear_after,
    )


def test_is_valid_email() -> None:
    assert is_valid_email("a@b.com") is True
    assert is_valid_email("bad") is False
    assert is_valid_email("a b@c.com") is False
    assert is_valid_email("a@b") is False
    assert is_valid_email("a@b.com\n") is False


def test_validation_order() -> None:
    assert validation_error({"name": "  ", "email": "bad", "message": "x"}) == "contact_required"
    assert validation_error({**VALID, "email": "bad"}) == "contact_email_invalid"
    assert validation_error(VALID) is None
    with pytest.raises(ValidationFailure) as info:
        ContactForm.validate({})
    assert info.value.key == "contact_required"


@pytest.mark.asyncio
async def test_required_fields_are_not_submitted(transport, renderer) -> None:
    form = _form(transport, renderer)
    assert await form.handle_submit({**VALID, "message": "   "}) is None
    assert transport.sent == []
    assert renderer.status == ("Completa todos los campos.", Tone.ERROR)


@pytest.mark.asyncio
async def test_invalid_email_message(transport, renderer) -> None:
    form = _form(transport, renderer)
    await form.handle_submit({**VALID, "email": "ana"})
    assert renderer.status == ("Email no válido.", Tone.ERROR)


@pytest.mark.asyncio
async def test_success_resets_form_and_restores_button(transport, renderer) -> None:
    form = _form(transport, renderer)
    assert await form.handle_submit(VALID) is SubmitResult.OK
    assert transport.sent == [VALID]
    assert renderer.status == ("Mensaje enviado.", Tone.SUCCESS)
    assert renderer.form_resets == 1
    assert renderer.submit_busy is False
    assert renderer.submit_label == "Enviar"


@pytest.mark.asyncio
@pytest.mark.parametrize("result, text", [
    (SubmitResult.REJECTED, "No se pudo enviar."),
    (SubmitResult.NETWORK_ERROR, "Error de red."),
])
async def test_failure_outcomes_are_distinct(renderer, make_transport, result, text) -> None:
    form = _form(make_transport(result), renderer)
    assert await form.handle_submit(VALID) is result
    assert renderer.status == (text, Tone.ERROR)
    assert renderer.form_resets == 0


@pytest.mark.asyncio
async def test_button_is_busy_while_sending(renderer) -> None:
    seen = []

    class SlowTransport:
        async def submit(self, fields):
            seen.append((renderer.submit_busy, renderer.submit_label))
            return SubmitResult.OK

    await _form(SlowTransport(), renderer).handle_submit(VALID)
    assert seen == [(True, "Enviando...")]


@pytest.mark.asyncio
async def test_status_clears_after_delay(transport, renderer) -> None:
    form = _form(transport, renderer, clear_after=0.01)
    await form.handle_submit({})
    assert renderer.status is not None
    await asyncio.sleep(0.05)
    assert renderer.status is None
    assert form.last_message is None


@pytest.mark.asyncio
async def test_bind_routes_submits(transport, renderer) -> None:
    form = _form(transport, renderer)
    tasks = []
    unbind = form.bind(lambda fields: tasks.append(asyncio.ensure_future(form.handle_submit(fields))))
    renderer.click(FORM_SELECTOR, **VALID)
    await asyncio.gather(*tasks)
    assert transport.sent == [VALID]
    unbind()
    assert FORM_SELECTOR not in renderer.bound_selectors()


class _Response:
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code


class _Session:
    def __init__(self, status_code=200, exc=None) -> None:
        self.status_code = status_code
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return _Response(self.status_code)


@pytest.mark.asyncio
async def test_requests_transport_maps_statuses() -> None:
    ok = _Session(204)
    transport = RequestsContactTransport("https://forms.example/f/abc", session=ok)
    assert await transport.submit(VALID) is SubmitResult.OK
    url, kwargs = ok.calls[0]
    assert url == "https://forms.example/f/abc"
    assert kwargs["data"] == VALID
    assert kwargs["headers"]["Accept"] == "application/json"

    rejected = RequestsContactTransport("https://x", session=_Session(422))
    assert await rejected.submit(VALID) is SubmitResult.REJECTED

    down = RequestsContactTransport("https://x", session=_Session(exc=requests.ConnectionError("down")))
    assert await down.submit(VALID) is SubmitResult.NETWORK_ERROR
