"""ASGI entrypoint, served with ``uvicorn diet_tracker.api.asgi:app``."""

import logging

from diet_tracker.api.app import create_app
from diet_tracker.config import Settings
from diet_tracker.containers import build_container

settings = Settings()
app = create_app(build_container(settings))

logging.getLogger(__name__).info(
    "Diet tracker API ready: environment=%s cookie=%s",
    settings.environment,
    settings.session_cookie_name,
)
