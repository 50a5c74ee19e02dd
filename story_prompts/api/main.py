"""
FastAPI application entry point.

Serves the single-page story prompt generator and its JSON API.

Startup requires GEMINI_API_KEY; without it the lifespan raises and the
server does not start.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .. import __version__
from .routers import session, story
from .services.generation_service import (
    startup_generation_client,
    shutdown_generation_client,
)

load_dotenv()

STATIC_DIR = Path(__file__).resolve().parent.parent / "ui" / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the Gemini generation client on startup and drops it on shutdown.
    """
    await startup_generation_client()

    yield

    await shutdown_generation_client()

tags_metadata = [
    {
        "name": "story",
        "description": "Direct generation - paste prompts, receive a hook and new story prompts",
    },
    {
        "name": "session",
        "description": "Single-page form state - input, submit, theme and copy transitions per browser session",
    },
]

app = FastAPI(
    title="Story Prompt Generator",
    lifespan=lifespan,
    description="""
## Story Prompt Generator

Transform a collection of story ideas into a coherent, cinematic story:
a tense opening hook plus one new prompt per pasted line, generated by
Google Gemini with structured JSON output.

### Usage
```bash
uvicorn story_prompts.api.main:app --host 127.0.0.1 --port 8000

curl -X POST http://localhost:8000/story/generate \\
  -H "Content-Type: application/json" \\
  -d '{"prompts": "A puppy finds a map\\nThe baby laughs at the moon"}'
```
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=tags_metadata,
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/", include_in_schema=False)
async def index():
    """The single-page form."""
    return FileResponse(
        STATIC_DIR / "index.html",
        headers={"Accept-CH": "Sec-CH-Prefers-Color-Scheme"},
    )


app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

app.include_router(
    story.router, prefix="/story", tags=["story"]
)
app.include_router(
    session.router, prefix="/session", tags=["session"]
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
