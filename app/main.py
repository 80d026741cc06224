"""
Main FastAPI application entry point.
"""

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from fastapi.responses import HTMLResponse

from app.config import get_settings
from app.logging_config import setup_logging
from app.api import router as api_router

settings = get_settings()
setup_logging()

UI_DIR = Path(__file__).resolve().parent / "ui"

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Income statement, balance sheet, ratio, break-even and compound interest calculators",
    version="0.1.0",
    debug=settings.debug,
)

# Mount static files
app.mount("/static", StaticFiles(directory=UI_DIR / "static"), name="static")

# Set up templates
templates = Jinja2Templates(directory=UI_DIR / "templates")

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Render the calculator page."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"request": request, "title": settings.app_name},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=settings.debug)
