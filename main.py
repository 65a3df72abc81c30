"""Entry point for running the swagdoc server via ``python main.py``."""

import uvicorn

from swagdoc.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "swagdoc.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
