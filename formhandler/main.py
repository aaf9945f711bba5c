"""Main FastAPI application"""
from fastapi import Depends, FastAPI
from formhandler.dependencies import get_form_registry
from formhandler.middleware.cors import setup_cors
from formhandler.middleware.error_handler import ErrorHandlerMiddleware
from formhandler.registry import FormRegistry
from contextlib import asynccontextmanager
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup: load the form set before the first request
    from formhandler.config import get_settings
    settings = get_settings()
    get_form_registry(settings)
    logger.info(f"Form handler started ({settings.environment})")
    yield


# Create FastAPI app with lifespan
app = FastAPI(
    title="Form Handler",
    description="Validates form submissions and sends email and chat notifications",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    lifespan=lifespan
)

# Setup CORS
setup_cors(app)

# Add error handling middleware
app.add_middleware(ErrorHandlerMiddleware)


# Health check endpoint
@app.get("/health")
async def health_check(registry: FormRegistry = Depends(get_form_registry)):
    """Health check endpoint"""
    return {"status": "healthy", "service": "form-handler", "forms": len(registry)}


# Import and include routers
from formhandler.routers import forms

app.include_router(forms.router, tags=["Forms"])

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
