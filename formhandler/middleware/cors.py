"""CORS middleware configuration"""
from fastapi.middleware.cors import CORSMiddleware
from formhandler.config import get_settings

settings = get_settings()


def setup_cors(app):
    """
    Answer CORS preflight requests for the configured origins.
    Submission responses echo the allowed origin themselves.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origin_list,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
