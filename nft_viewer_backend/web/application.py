from importlib import metadata

from fastapi import FastAPI
from fastapi.responses import UJSONResponse

from nft_viewer_backend.web.api.router import api_router
from nft_viewer_backend.web.lifespan import lifespan_setup


def get_app() -> FastAPI:
    """
    Get FastAPI application.

    This is the main constructor of an application.

    :return: application.
    """
    try:
        version = metadata.version("nft_viewer_backend")
    except metadata.PackageNotFoundError:
        version = "0.2.0"  # Running from a source checkout

    app = FastAPI(
        title="nft_viewer_backend",
        version=version,
        lifespan=lifespan_setup,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        default_response_class=UJSONResponse,
    )

    # Main router for the API.
    app.include_router(router=api_router, prefix="/api")

    return app
