"""FastAPI entrypoint for the WhatsApp Bling bot."""

from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI

from storebot.api.router import build_api_router
from storebot.core.logging_config import configure_logging
from storebot.core.settings import settings

configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name, version=settings.app_version)


@app.get("/")
async def health_check() -> dict[str, str]:
    """Simple health endpoint to validate service status."""
    return {
        "status": "✅ Bot WhatsApp + Bling rodando!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


app.include_router(build_api_router(include_test_routes=not settings.is_production))


def run() -> None:
    """Start the HTTP server on the configured port."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
