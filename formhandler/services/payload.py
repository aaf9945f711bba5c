"""Request body decoding"""
import base64
import binascii
import json
import logging
from functools import cached_property
from typing import Any, Dict, Mapping, Optional
from urllib.parse import parse_qs

import httpx

from formhandler.models.events import InboundEvent, RequestPayload

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class PayloadDecodeError(ValueError):
    """Raised when a request body can't be decoded"""


def decode_urlencoded(body: str) -> Dict[str, str]:
    """
    Decode a form post body, keeping blank values.
    A key posted more than once is joined into a single value.
    """
    return {
        key: ", ".join(values)
        for key, values in parse_qs(body, keep_blank_values=True).items()
    }


class PayloadDecoder:
    """
    Decodes the body of an inbound event once, by content type.

    `payload` is None when there is no readable body; callers treat that as
    an empty post rather than an error.
    """

    def __init__(self, event: InboundEvent):
        self.event = event
        self.headers = httpx.Headers(event.headers)
        self.decode_error: Optional[PayloadDecodeError] = None

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    @cached_property
    def payload(self) -> Optional[RequestPayload]:
        try:
            return self._decode()
        except PayloadDecodeError as e:
            self.decode_error = e
            logger.warning(f"Unreadable request body, treating as empty: {e}")
            return None

    def _decode(self) -> Optional[RequestPayload]:
        body = self.event.body

        if not body:
            return None

        if isinstance(body, Mapping):
            return RequestPayload(fields=dict(body))

        if self.event.is_base64_encoded:
            try:
                body = base64.b64decode(body, validate=True).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as e:
                raise PayloadDecodeError(f"invalid base64 body: {e}") from e

        content_type = self.content_type.strip().lower()

        if content_type.startswith(JSON_CONTENT_TYPE):
            try:
                data: Any = json.loads(body)
            except json.JSONDecodeError as e:
                raise PayloadDecodeError(f"malformed JSON: {e}") from e

            if isinstance(data, dict):
                return RequestPayload(fields=data)

            return RequestPayload(opaque=data)

        if content_type.startswith(FORM_CONTENT_TYPE):
            return RequestPayload(fields=decode_urlencoded(body))

        return RequestPayload(opaque=body)
