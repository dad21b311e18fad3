from __future__ import annotations

import json

from litestar import Litestar, MediaType, Request, Response, Router, get
from litestar.config.cors import CORSConfig
from litestar.di import Provide
from litestar.exceptions import ValidationException
from litestar.openapi import OpenAPIConfig
import uvicorn

from loguru import logger

from shopzap.api.api import ShopzapAPI
from shopzap.exceptions import LookupUnavailable, NotFound


@get(path="/ping", summary="Ping")
async def ping() -> bool:
    return True


def handle_validation_exception(_: Request, exc: ValidationException) -> Response:
    return Response(
        media_type=MediaType.JSON,
        content={
            "extra": {"error_message": f"Validation exception {json.dumps(exc.extra)}"},
            "detail": exc.detail,
        },
        status_code=400,
    )


def handle_not_found(_: Request, exc: NotFound) -> Response:
    return Response(
        media_type=MediaType.JSON,
        content={"detail": "Store not found"},
        status_code=404,
    )


def handle_lookup_unavailable(_: Request, exc: LookupUnavailable) -> Response:
    logger.error(f"Store lookup unavailable: {exc.__cause__}")
    return Response(
        media_type=MediaType.JSON,
        content={"detail": "Store lookup unavailable"},
        status_code=503,
    )


class LitestarAPI(ShopzapAPI):
    async def provide_api(self) -> LitestarAPI:
        """Provides instance of self to route handlers
        """
        return self

    def generate_app(self) -> Litestar:
        from shopzap.api.litestar.controllers import (
            StoreController,
            CheckoutController,
            resolve_route
        )

        main_router = Router(
            path="/",
            route_handlers=[
                StoreController,
                CheckoutController,
                resolve_route,
                ping
            ],
        )

        cors_config = None

        if self.allowed_origins:
            cors_config = CORSConfig(
                allow_origins=self.allowed_origins,
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            )

        self.app = Litestar(
            route_handlers=[main_router],
            exception_handlers={
                ValidationException: handle_validation_exception,
                NotFound: handle_not_found,
                LookupUnavailable: handle_lookup_unavailable,
            },
            openapi_config=OpenAPIConfig(
                title=self.name,
                version=self.version or "0.1.0",
                use_handler_docstrings=True,
            ),
            dependencies={
                "api": Provide(self.provide_api)
            },
            cors_config=cors_config
        )

        return self.app

    def run(self, host: str, port: int) -> None:
        uvicorn.run(self.app, port=port, host=host)


if __name__ == "__main__":
    from shopzap.config import load_config

    api = LitestarAPI.from_config(load_config())
    api.generate_app()
    api.run(host="0.0.0.0", port=8000)
