"""CLI entrypoint for running the pet store service."""

from __future__ import annotations

import uvicorn

from .config import PetStoreSettings
from .server import create_app


def main() -> None:
    settings = PetStoreSettings.from_env()
    app = create_app(settings)
    # log_config=None keeps the handlers installed by configure_root_logger
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
