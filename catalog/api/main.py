"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import catalog.api.products_router as products_module
from catalog.api.products_router import router as products_router
from catalog.error_handler import ErrorHandler
from catalog.integrations.clients.mocks.local_products import LocalProductsClient
from catalog.integrations.clients.real_http.products_api import RealProductsClient
from catalog.state_manager import SessionNotFound, StateManager
from catalog.utils.config_loader import load_catalog_config
from catalog.validation import FormValidationError

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Product Catalog API",
    description="Product list and detail views over a read-only product service",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

catalog_cfg = load_catalog_config()

# Mock vs real product source is chosen here and nowhere else
if catalog_cfg.local_data.enabled:
    catalogue_client = LocalProductsClient(data_path=catalog_cfg.local_data.resolved_path())
    logger.info("Serving products from local data %s", catalogue_client.data_path)
else:
    catalogue_client = RealProductsClient(
        base_url=catalog_cfg.api.base_url,
        timeout_seconds=catalog_cfg.api.timeout_seconds,
    )
    logger.info("Serving products from %s", catalogue_client.base_url)

state_manager = StateManager(catalogue_client, default_sort=catalog_cfg.views.default_sort)

products_module.state_manager = state_manager
app.include_router(products_router, prefix="/api/v1")

error_handler = ErrorHandler()


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================
@app.exception_handler(FormValidationError)
async def form_validation_error_handler(request: Request, exc: FormValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "field_errors": exc.field_errors},
    )


@app.exception_handler(SessionNotFound)
async def session_not_found_handler(request: Request, exc: SessionNotFound):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Session not found"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    payload = error_handler.handle_exception(
        exc,
        method=request.method,
        path=request.url.path,
        path_params=request.path_params,
    )
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {"service": "Product Catalog API", "status": "healthy", "version": "1.0.0", "timestamp": datetime.now().isoformat()}


@app.get("/health", tags=["Health"])
async def health_check():
    """Reports which product source the views read from."""
    return {
        "status": "healthy",
        "product_source": "local" if catalog_cfg.local_data.enabled else "http",
        "timestamp": datetime.now().isoformat(),
    }
