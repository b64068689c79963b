# -*- coding: utf-8 -*-
"""Contact form: validation, submission and transient status messages.

The network side is a ``ContactTransport``; the default one posts the form
with ``requests`` from a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Dict, Mapping, Optional

import requests

from app.ports import ContactTransport, RenderPort, Unbind
from core.types import Locale, SubmitResult, Tone
from domain.contact_validation import REQUIRED_FIELDS, validation_error
from domain.labels import CatalogLabels
from services.errors import SubmissionFailure, ValidationFailure

log = logging.getLogger(__name__)

FORM_SELECTOR = "#contact-form"
STATUS_CLEAR_S = 5.0

_RESULT_MESSAGES = {
    SubmitResult.OK: ("contact_success", Tone.SUCCESS),
    SubmitResult.REJECTED: ("contact_error", Tone.ERROR),
    SubmitResult.NETWORK_ERROR: ("contact_network_error", Tone.ERROR),
}


class RequestsContactTransport:
    """POST the form fields; 2xx is ok, other statuses are rejected."""

    def __init__(self, endpoint: str, *, timeout: float = 10.0, session: Optional[requests.Session] = None) -> None:
        self.endpoint = endpoint
        self.timeout = float(timeout)
        self._session = session or requests.Session()

    def _post(self, fields: Mapping[str, str]) -> int:
        try:
            response = self._session.post(
                self.endpoint,
                data=dict(fields),
                headers={"Accept": "application/json", "X-Requested-With": "XMLHttpRequest"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise SubmissionFailure(f"contact endpoint unreachable: {exc}") from exc
        return int(response.status_code)

    async def submit(self, fields: Mapping[str, str]) -> SubmitResult:
        try:
            status = await asyncio.to_thread(self._post, fields)
        except SubmissionFailure as exc:
            log.warning("%s", exc)
            return SubmitResult.NETWORK_ERROR
        if 200 <= status < 300:
            return SubmitResult.OK
        log.warning("Contact endpoint rejected submission (HTTP %s)", status)
        return SubmitResult.REJECTED


class ContactForm:
    def __init__(
        self,
        transport: ContactTransport,
        renderer: RenderPort,
        *,
        translate: Callable[[str], str],
        language: Callable[[], Locale],
        clear_after: float = STATUS_CLEAR_S,
    ) -> None:
        self._transport = transport
        self._renderer = renderer
        self._translate = translate
        self._language = language
        self.clear_after = float(clear_after)
        self._clear_handle: Optional[asyncio.TimerHandle] = None
        self.last_message: Optional[str] = None

    def bind(self, schedule: Callable[[Mapping[str, str]], object]) -> Unbind:
        """Route form submits through ``schedule`` (the caller owns the task)."""
        return self._renderer.bind_click(FORM_SELECTOR, schedule)

    @staticmethod
    def validate(fields: Mapping[str, object]) -> Dict[str, str]:
        """Return the trimmed-checked fields or raise ValidationFailure."""
        key = validation_error(fields)
        if key is not None:
            raise ValidationFailure(key)
        return {name: str(fields.get(name) or "") for name in REQUIRED_FIELDS}

    async def handle_submit(self, fields: Mapping[str, object]) -> Optional[SubmitResult]:
        """Validate and submit. Returns None when validation stopped it."""
        try:
            clean = self.validate(fields)
        except ValidationFailure as exc:
            self.show_message(exc.key, Tone.ERROR)
            return None

        self.set_loading_state(True)
        try:
            result = await self._transport.submit(clean)
        except Exception:
            log.warning("Contact transport failed", exc_info=True)
            result = SubmitResult.NETWORK_ERROR
        finally:
            self.set_loading_state(False)

        key, tone = _RESULT_MESSAGES[result]
        self.show_message(key, tone)
        if result is SubmitResult.OK:
            self._renderer.reset_form()
        return result

    def set_loading_state(self, loading: bool) -> None:
        if loading:
            label = CatalogLabels.for_locale(self._language()).caption("sending")
        else:
            label = self._translate("contact_send")
        self._renderer.set_submit_busy(loading, label)

    def show_message(self, key: str, tone: Tone) -> None:
        self.last_message = key
        self._renderer.show_status(self._translate(key), tone)
        self._schedule_clear()

    def _schedule_clear(self) -> None:
        if self._clear_handle is not None:
            self._clear_handle.cancel()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            log.debug("No running loop; status will not auto-clear")
            self._clear_handle = None
            return
        self._clear_handle = loop.call_later(self.clear_after, self._clear)

    def _clear(self) -> None:
        self._clear_handle = None
        self.last_message = None
        self._renderer.clear_status()

    def destroy(self) -> None:
        if self._clear_handle is not None:
            self._clear_handle.cancel()
            self._clear_handle = None
