"""CORS for the web client.

The browser app sends the bearer header or the ``token`` cookie, so
credentials are allowed and origins must be listed explicitly.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gosmooth.config import Settings

ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Origin", "Content-Type", "Accept", "Authorization", "X-Requested-With", "X-Request-Id"]
EXPOSED_HEADERS = ["Content-Length", "Content-Range", "X-Request-Id"]


def setup_cors(app: FastAPI, settings: Settings) -> None:
    if "*" in settings.cors_origins:
        msg = "GOSMOOTH_CORS_ORIGINS cannot contain '*' while credentials are allowed"
        raise ValueError(msg)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
        expose_headers=EXPOSED_HEADERS,
        max_age=settings.cors_max_age_seconds,
    )
