"""
Main FastAPI application entry point.
"""
import sys
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Iterable, Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

# Load environment variables
load_dotenv()

# Add project root to path
ROOT_DIR = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT_DIR))

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    force=True
)

logger = logging.getLogger(__name__)

from config import settings
from database import SessionLocal, engine
from Bootstrap_module.bootstrap import StoreLifecycleManager, run_startup
from Gateway_module.error_handlers import register_exception_handlers
from Gateway_module.middleware import build_middleware

# Routers
from Product_module.Product_router import router as product_router
from DeliveryOption_module.DeliveryOption_router import router as delivery_option_router
from Cart_module.Cart_router import router as cart_router
from Orders_module.Order_router import router as order_router
from Reset_module.Reset_router import router as reset_router
from PaymentSummary_module.PaymentSummary_router import router as payment_summary_router

IMAGES_DIR = ROOT_DIR / "images"


def create_app(
    lifecycle: Optional[StoreLifecycleManager] = None,
    allowed_origins: Optional[Iterable[str]] = None,
) -> FastAPI:
    """
    Build the API. ``lifecycle`` prepares the store during startup; uvicorn
    only accepts connections once it has finished.
    """
    if lifecycle is None:
        lifecycle = StoreLifecycleManager(engine, SessionLocal)
    if allowed_origins is None:
        allowed_origins = settings.allowed_origins

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan event handler for startup and shutdown."""
        logger.info("Starting application...")
        # A StartupError here aborts startup before the socket is bound
        await run_startup(lifecycle, timeout=settings.STARTUP_TIMEOUT_SECONDS)
        logger.info("Application started successfully")
        yield
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan,
        middleware=build_middleware(allowed_origins),
    )
    app.state.lifecycle = lifecycle

    register_exception_handlers(app)

    @app.get("/")
    def root():
        """Root endpoint with API information."""
        return {
            "status": "success",
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "endpoints": {
                "health": "/api/health",
                "products": "/api/products",
                "delivery_options": "/api/delivery-options",
                "cart_items": "/api/cart-items",
                "orders": "/api/orders",
                "payment_summary": "/api/payment-summary",
                "reset": "/api/reset",
                "images": "/images",
            },
            "docs": "/docs",
        }

    @app.get("/api/health")
    def health_check():
        """Health check endpoint; does not touch the database."""
        return {"status": "ok"}

    app.mount("/images", StaticFiles(directory=IMAGES_DIR, check_dir=False), name="images")

    # Include routers
    app.include_router(product_router)
    app.include_router(delivery_option_router)
    app.include_router(cart_router)
    app.include_router(order_router)
    app.include_router(reset_router)
    app.include_router(payment_summary_router)

    return app


app = create_app()


# Run application
if __name__ == "__main__":
    import uvicorn

    logger.info("Starting %s on port %s", settings.APP_NAME, settings.PORT)

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=False,
        # Exit instead of serving if database initialization fails
        lifespan="on",
        log_level="info",
        access_log=True,
    )
