from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scorecard.core.config import settings

# POST is used only by /grading/report
ALLOWED_METHODS = ("GET", "POST")


def cors_allowed_origins() -> list[str]:
    return list(settings.cors_allowed_origins)


def cors_allow_origin_regex() -> str | None:
    regex = (settings.cors_allow_origin_regex or "").strip()
    return regex or None


def cors_middleware_options() -> dict[str, Any]:
    return {
        "allow_origins": cors_allowed_origins(),
        "allow_origin_regex": cors_allow_origin_regex(),
        "allow_credentials": settings.cors_allow_credentials,
        "allow_methods": list(ALLOWED_METHODS),
        "allow_headers": ["*"],
    }


def install_cors(app: FastAPI) -> None:
    app.add_middleware(CORSMiddleware, **cors_middleware_options())
