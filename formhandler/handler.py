"""Serverless entry point"""
import asyncio
import json
import logging
from typing import Any, Dict, Mapping, Optional

from formhandler.config import Settings, get_settings
from formhandler.registry import FormRegistry, load_form_registry
from formhandler.services.notifier import NotificationDispatcher
from formhandler.services.response_builder import fallback_response
from formhandler.services.submission import process_submission

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


async def handle_event(
    event: Mapping[str, Any],
    settings: Optional[Settings] = None,
    registry: Optional[FormRegistry] = None,
    dispatcher: Optional[NotificationDispatcher] = None
) -> Dict[str, Any]:
    """
    Handle one inbound event and return the response dict.
    Never raises: anything unexpected becomes a generic 400.
    """
    try:
        if settings is None:
            settings = get_settings()

        if not settings.test:
            logger.info("EVENT\n" + json.dumps(event, indent=2, default=str))

        if registry is None:
            registry = load_form_registry(settings.test, settings.forms_file)
        if dispatcher is None:
            dispatcher = NotificationDispatcher(settings)

        response = await process_submission(event, settings, registry, dispatcher)
        return response.to_event()

    except Exception as e:
        logger.exception(f"Unhandled error processing event: {e}")
        return fallback_response().to_event()


def lambda_handler(event: Dict[str, Any], context: object) -> Dict[str, Any]:
    """AWS Lambda function handler"""
    return asyncio.run(handle_event(event))
