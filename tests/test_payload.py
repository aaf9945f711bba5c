"""
Tests for request body decoding
"""
import base64
import json

import pytest

from formhandler.models.events import InboundEvent
from formhandler.services.payload import PayloadDecodeError, PayloadDecoder, decode_urlencoded


def decoder_for(body, content_type="application/json", **extra):
    return PayloadDecoder(InboundEvent.model_validate({
        "headers": {"Content-Type": content_type},
        "body": body,
        **extra
    }))


@pytest.mark.parametrize("body", [None, ""])
def test_missing_body_is_absent(body):
    assert decoder_for(body).payload is None


def test_json_object_becomes_fields():
    payload = decoder_for(json.dumps({"form": "contact", "name": "Lindsay"})).payload

    assert payload.fields == {"form": "contact", "name": "Lindsay"}
    assert payload.opaque is None


def test_json_content_type_with_charset():
    payload = decoder_for('{"name": "Lindsay"}', "application/json; charset=utf-8").payload

    assert payload.get("name") == "Lindsay"


def test_content_type_header_lookup_is_case_insensitive():
    decoder = PayloadDecoder(InboundEvent.model_validate({
        "headers": {"CONTENT-TYPE": "application/json"},
        "body": '{"name": "Lindsay"}'
    }))

    assert decoder.payload.get("name") == "Lindsay"


def test_malformed_json_is_absent_and_recorded():
    decoder = decoder_for("{nope")

    assert decoder.payload is None
    assert isinstance(decoder.decode_error, PayloadDecodeError)


def test_json_array_is_opaque():
    payload = decoder_for("[1, 2]").payload

    assert payload.fields == {}
    assert payload.opaque == [1, 2]


def test_urlencoded_body():
    payload = decoder_for(
        "form=contact&name=Maeby+F%C3%BCnke&fax=",
        "application/x-www-form-urlencoded"
    ).payload

    assert payload.fields == {"form": "contact", "name": "Maeby Fünke", "fax": ""}


def test_repeated_urlencoded_keys_are_joined():
    assert decode_urlencoded("topic=a&topic=b") == {"topic": "a, b"}


def test_base64_body_is_decoded_first():
    encoded = base64.b64encode(b'{"name": "Buster"}').decode("ascii")

    payload = decoder_for(encoded, isBase64Encoded=True).payload

    assert payload.get("name") == "Buster"


def test_invalid_base64_is_absent():
    decoder = decoder_for("***", isBase64Encoded=True)

    assert decoder.payload is None
    assert decoder.decode_error is not None


def test_other_content_types_pass_through():
    payload = decoder_for("just text", "text/plain").payload

    assert payload.opaque == "just text"
    assert payload.fields == {}


def test_mapping_body_is_used_directly():
    payload = decoder_for({"form": "contact"}).payload

    assert payload.get("form") == "contact"


def test_payload_is_decoded_once():
    decoder = decoder_for('{"name": "Gob"}')

    first = decoder.payload
    decoder.event = InboundEvent(body='{"name": "Oscar"}')

    assert decoder.payload is first
    assert decoder.payload.get("name") == "Gob"
