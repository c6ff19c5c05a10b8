"""Command-line entry point that runs the API server."""

import logging

import uvicorn

from photo_share.api.app import create_app
from photo_share.app_logging import configure_logging
from photo_share.config import Settings
from photo_share.containers import build_container


def main(settings: Settings | None = None) -> None:
    """Build the app and serve it on the configured host and port."""
    configure_logging()
    logger = logging.getLogger(__name__)
    resolved_settings = settings or Settings()
    app = create_app(build_container(resolved_settings))
    logger.info(
        "Listening at %s exporting the directory %s",
        resolved_settings.listen_url(),
        resolved_settings.static_root.resolve(),
    )
    uvicorn.run(app, host=resolved_settings.host, port=resolved_settings.port)


if __name__ == "__main__":
    main()
