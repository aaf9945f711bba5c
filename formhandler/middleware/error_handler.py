"""Global error handling middleware"""
from fastapi import Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
import traceback
import logging

from formhandler.services.response_builder import fallback_response

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turns unhandled errors into the generic failure response"""

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            logger.error(f"Unhandled error: {exc}")
            logger.error(traceback.format_exc())

            outcome = fallback_response()
            return Response(
                content=outcome.body,
                status_code=outcome.status_code,
                headers=outcome.headers
            )
