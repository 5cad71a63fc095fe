"""
FastAPI Application
==================
Main entry point for the storefront API.

Run with:
    uvicorn nameclutch.web.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nameclutch import __version__
from nameclutch.config import settings
from nameclutch.web.routers import domains, health

# Create application
app = FastAPI(
    title="NameClutch",
    description="Premium domain names: catalog, pitches and inquiries",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(domains.router, prefix="/api/domains", tags=["Domains"])


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "NameClutch",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m nameclutch.web.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
