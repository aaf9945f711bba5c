"""Form submission pipeline"""
import logging
from typing import Any, Mapping, Union

from formhandler.config import Settings
from formhandler.models.events import InboundEvent, ResponseOutcome
from formhandler.registry import FormRegistry
from formhandler.services.notifier import NotificationDispatcher
from formhandler.services.payload import PayloadDecoder
from formhandler.services.resolver import ResolutionStatus, resolve_form
from formhandler.services.response_builder import SubmissionState, build_response
from formhandler.services.validator import validate_form_fields

logger = logging.getLogger(__name__)


async def process_submission(
    event: Union[InboundEvent, Mapping[str, Any]],
    settings: Settings,
    registry: FormRegistry,
    dispatcher: NotificationDispatcher
) -> ResponseOutcome:
    """
    Decode, resolve, validate and dispatch a form submission.

    Args:
        event: Inbound HTTP-style event
        settings: Application settings
        registry: Registered forms
        dispatcher: Notification sender

    Returns:
        The response for the serverless host
    """
    if not isinstance(event, InboundEvent):
        event = InboundEvent.model_validate(event)

    decoder = PayloadDecoder(event)
    payload = decoder.payload
    resolution = resolve_form(payload, event.path, registry)

    state = SubmissionState(resolution=resolution, has_payload=payload is not None)

    if payload is not None:
        redirect = payload.get("redirect")
        if isinstance(redirect, str):
            state.redirect = redirect

    if resolution.status is ResolutionStatus.RESOLVED:
        result = validate_form_fields(payload, resolution.form, decoder.headers)
        state.errors = result.errors

        if result.is_valid:
            await dispatcher.notify(resolution.form, result.fields)
            state.did_send = True
            logger.info(f"Processed {resolution.form_id} submission")
    elif resolution.status is ResolutionStatus.INVALID_ID:
        logger.info(f"Rejected submission for unknown form ID: {resolution.form_id}")

    return build_response(state, settings, decoder.headers)
