"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from artzyful.api.admin import router as admin_router
from artzyful.api.models import (
    CheckoutRequest,
    EditImageRequest,
    PrintRequest,
    SessionRequest,
)
from artzyful.app_logging import configure_logging
from artzyful.containers import AppContainer
from artzyful.domain.checkout import SessionDetails
from artzyful.domain.errors import ArtzyfulError
from artzyful.domain.images import GeneratedImage


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Admin-Token"],
    )
    app.include_router(admin_router)

    @app.exception_handler(ArtzyfulError)
    async def artzyful_error_handler(
        request: Request, exc: ArtzyfulError
    ) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "error": type(exc).__name__},
            )
        else:
            logger.info(
                "Request rejected",
                extra={"path": request.url.path, "error": type(exc).__name__},
            )
        return _error_response(exc.status_code, str(exc))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        response = _error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/styles")
    async def list_styles(request: Request) -> dict[str, object]:
        """Return the styles on offer in canonical order."""
        state_container: AppContainer = request.app.state.container
        return {
            "status": "success",
            "styles": state_container.catalog_service.styles(),
        }

    @app.post("/api/checkout")
    async def checkout(body: CheckoutRequest, request: Request) -> dict[str, object]:
        """Create a hosted checkout session for an order."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.checkout_service.create_checkout(
            image_url=body.image_url,
            style=body.style,
            product_type=body.product_type,
        )
        return {
            "status": "success",
            "sessionId": result.session.id,
            "url": result.session.url,
            "imageReduction": result.image.outcome.value,
        }

    @app.post("/api/get-session")
    async def get_session(body: SessionRequest, request: Request) -> dict[str, object]:
        """Return payment status and order metadata for a session."""
        state_container: AppContainer = request.app.state.container
        checkout_service = state_container.checkout_service
        details = await checkout_service.get_session(body.session_id)
        return {"status": "success", "session": _serialize_session(details)}

    @app.post("/api/edit-image")
    async def edit_image(
        body: EditImageRequest, request: Request
    ) -> dict[str, object]:
        """Generate one stylized image."""
        state_container: AppContainer = request.app.state.container
        generation = state_container.generation_service
        image = await generation.edit_image(body.image_url, body.style)
        return {
            "status": "success",
            **_serialize_image(image),
            "modelUsed": generation.client.model,
            "settings": {"prompt": image.prompt},
        }

    @app.post("/api/fulfill")
    async def fulfill(body: SessionRequest, request: Request) -> dict[str, object]:
        """Generate every image a paid session is entitled to."""
        state_container: AppContainer = request.app.state.container
        checkout_service = state_container.checkout_service
        details = await checkout_service.get_session(body.session_id)
        images = await state_container.generation_service.fulfill(details)
        return {
            "status": "success",
            "productType": details.metadata.get("productType"),
            "images": [_serialize_image(image) for image in images],
        }

    @app.post("/api/prepare-for-print")
    async def prepare_for_print(
        body: PrintRequest, request: Request
    ) -> dict[str, object]:
        """Crop an image to a print aspect ratio."""
        state_container: AppContainer = request.app.state.container
        printable = await state_container.print_service.prepare(
            body.image_url, body.orientation
        )
        return {
            "status": "success",
            "processedImageUrl": printable.data_url,
            "dimensions": {"width": printable.width, "height": printable.height},
            "orientation": printable.orientation,
        }

    return app


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def _serialize_session(details: SessionDetails) -> dict[str, object]:
    return {
        "id": details.id,
        "payment_status": details.payment_status,
        "amount_total": details.amount_total,
        "metadata": details.metadata,
    }


def _serialize_image(image: GeneratedImage) -> dict[str, str]:
    return {
        "style": image.style,
        "imageUrl": image.image_url,
        "displayName": image.display_name,
    }
