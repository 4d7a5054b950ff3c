"""HTTP surface of the admin panel helpers.

Only the template version check is exposed::

    GET /api/admin/version -> {installed, latest, upToDate, changelog}

Run it with ``python -m theme_wizard serve``.
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse
from starlette.status import HTTP_200_OK, HTTP_500_INTERNAL_SERVER_ERROR

from theme_wizard.config import Config
from theme_wizard.utils import print_error
from theme_wizard.version import VersionChecker


def create_app(config: Config | None = None) -> FastAPI:
    """Build the FastAPI app for *config* (defaults to ``Config.from_env()``)."""
    config = config or Config.from_env()
    checker = VersionChecker(config)
    router = APIRouter(prefix="/api/admin", tags=["admin"])

    @router.get("/version")
    async def get_version() -> JSONResponse:
        try:
            info = await checker.check()
        except Exception as exc:  # noqa: BLE001
            print_error(f"Template version check failed: {exc}")
            return JSONResponse(
                checker.fallback().model_dump(by_alias=True),
                status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return JSONResponse(info.model_dump(by_alias=True), status_code=HTTP_200_OK)

    app = FastAPI(title="Theme Wizard", version="0.1.0")
    app.state.config = config
    app.state.version_checker = checker
    app.include_router(router)
    return app
