# lazy_image/main.py
# Responsibility: Application entry point. Configures and launches the FastAPI app.

import uvicorn
from fastapi import FastAPI

from lazy_image.config.log_setup import configure_logging
from lazy_image.config.settings import settings
from lazy_image.routers import srcset


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.
    """
    configure_logging()

    app = FastAPI(
        title="Lazy Image",
        description="Responsive image candidate resolution.",
        version=settings.VERSION,
        debug=settings.SERVER.DEBUG
    )

    # Register Routers
    app.include_router(srcset.router)

    # Health Check
    @app.get("/health", tags=["System"])
    def health_check():
        return {"status": "ok", "version": settings.VERSION}

    return app

# Application instance
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "lazy_image.main:app",
        host=settings.SERVER.HOST,
        port=settings.SERVER.PORT,
        reload=settings.SERVER.DEBUG
    )
