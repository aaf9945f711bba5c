"""Form submission endpoints"""
from fastapi import APIRouter, Depends, Request, Response
import logging

from formhandler.config import Settings, get_settings
from formhandler.dependencies import get_dispatcher, get_form_registry
from formhandler.models.events import InboundEvent
from formhandler.registry import FormRegistry
from formhandler.services.notifier import NotificationDispatcher
from formhandler.services.submission import process_submission

logger = logging.getLogger(__name__)
router = APIRouter()


async def request_to_event(request: Request) -> InboundEvent:
    """Convert an HTTP request into the event shape the pipeline expects"""
    body = await request.body()

    return InboundEvent(
        headers=dict(request.headers),
        body=body.decode("utf-8", errors="replace") if body else None,
        path=request.url.path
    )


@router.api_route("/{path:path}", methods=["GET", "POST"])
async def submit_form(
    request: Request,
    settings: Settings = Depends(get_settings),
    registry: FormRegistry = Depends(get_form_registry),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher)
):
    """
    Handle form submission (PUBLIC endpoint)
    The form ID comes from a `form` field or a `/form/{id}` path.
    """
    event = await request_to_event(request)
    outcome = await process_submission(event, settings, registry, dispatcher)

    return Response(
        content=outcome.body,
        status_code=outcome.status_code,
        headers=outcome.headers
    )
