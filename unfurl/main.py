from fastapi import FastAPI
from contextlib import asynccontextmanager
from unfurl.api.routes import router
from unfurl.core.config import settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    """
    # Startup
    loader = "mock" if settings.USE_MOCK else settings.PAGE_LOADER
    print(f"Initializing Unfurl (page loader: {loader})...")

    yield

    # Shutdown
    print("Shutting down Unfurl...")

app = FastAPI(
    title="Unfurl",
    description="API for fetching a web page and summarizing it for link previews",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Unfurl",
        "version": "1.0.0",
        "endpoints": {
            "fetch": "POST /fetch",
            "health": "GET /health"
        }
    }
