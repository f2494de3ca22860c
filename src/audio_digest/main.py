"""ASGI entry point for the audio-digest service."""

import os

import uvicorn
from ddtrace import patch

from audio_digest.api import create_app

patch(fastapi=True, httpx=True, urllib3=True)

app = create_app()


def run():
    """Serves the application with uvicorn."""
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_config=None,
    )


if __name__ == "__main__":
    run()
