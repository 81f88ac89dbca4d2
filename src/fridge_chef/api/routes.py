"""Ingredient detection and recipe generation endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException

from fridge_chef.api.models import DetectIngredientsResponse, GenerateRecipesRequest
from fridge_chef.domain.errors import InputError, UpstreamError
from fridge_chef.services.images import validate_image

if TYPE_CHECKING:
    from fridge_chef.containers import AppContainer

router = APIRouter(prefix="/api", tags=["ingredients"])

_logger = logging.getLogger(__name__)


@router.post("/detect-ingredients")
async def detect_ingredients(request: Request) -> JSONResponse:
    """Detect refrigerator contents in an uploaded photo."""
    container: AppContainer = request.app.state.container
    vocabulary = container.vocabulary
    try:
        image_bytes = await _read_image(request, container.settings.max_image_bytes)
        result = await container.scan_service.scan(image_bytes)
    except InputError as exc:
        body = DetectIngredientsResponse.failure(str(exc), vocabulary)
        return JSONResponse(body.to_json(), status_code=status.HTTP_400_BAD_REQUEST)
    except UpstreamError as exc:
        _logger.error(
            "Ingredient detection failed: service=%s status=%s: %s",
            exc.service,
            exc.status_code,
            exc,
        )
        body = DetectIngredientsResponse.failure("Failed to process image", vocabulary)
        return JSONResponse(
            body.to_json(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    except Exception:
        _logger.exception("Unexpected error processing image")
        body = DetectIngredientsResponse.failure("Failed to process image", vocabulary)
        return JSONResponse(
            body.to_json(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    body = DetectIngredientsResponse.from_result(result, vocabulary)
    return JSONResponse(body.to_json())


@router.post("/generate-recipes")
async def generate_recipes(request: Request) -> JSONResponse:
    """Generate recipes for a curated ingredient list."""
    container: AppContainer = request.app.state.container
    try:
        payload = await _read_recipe_request(request)
        recipes = await container.recipe_service.generate(payload.ingredients)
    except InputError as exc:
        return JSONResponse(
            {"error": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST
        )
    except UpstreamError as exc:
        _logger.error(
            "Recipe generation failed: service=%s status=%s: %s",
            exc.service,
            exc.status_code,
            exc,
        )
        return JSONResponse(
            {"error": "Failed to generate recipes"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    except Exception:
        _logger.exception("Unexpected error generating recipes")
        return JSONResponse(
            {"error": "Failed to generate recipes"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return JSONResponse(
        {"recipes": [recipe.model_dump(by_alias=True) for recipe in recipes]}
    )


async def _read_recipe_request(request: Request) -> GenerateRecipesRequest:
    """Parse the recipe request body, mapping bad input to ``InputError``."""
    try:
        payload = await request.json()
    except ValueError as exc:
        raise InputError("Request body must be JSON") from exc
    try:
        return GenerateRecipesRequest.model_validate(payload)
    except ValidationError as exc:
        raise InputError("An ingredients list of strings is required") from exc


async def _read_image(request: Request, max_bytes: int) -> bytes:
    """Read the ``image`` form field; anything but an uploaded file is bad input."""
    try:
        form = await request.form()
    except HTTPException as exc:
        raise InputError("Invalid form data") from exc
    try:
        image = form.get("image")
        if not isinstance(image, UploadFile):
            raise InputError("No image provided")
        image_bytes = await image.read()
        validate_image(image_bytes, image.content_type, max_bytes)
        return image_bytes
    finally:
        await form.close()
