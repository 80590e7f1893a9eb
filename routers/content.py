from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.errors import APIError
from app.core.security import require_api_key
from schemas.content_generation import GenerationRequest, GenerationResponse
from services.content_generator import ContentGeneratorService
from services.content_packager import build_generation_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["content"])


async def get_content_generator(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[ContentGeneratorService, None]:
    generator = ContentGeneratorService(api_key=settings.openai_api_key)
    try:
        yield generator
    finally:
        await generator.aclose()


@router.post(
    "/generate-content",
    response_model=GenerationResponse,
    dependencies=[Depends(require_api_key)],
)
async def generate_content(
    payload: GenerationRequest,
    generator: ContentGeneratorService = Depends(get_content_generator),
    settings: Settings = Depends(get_settings),
) -> GenerationResponse:
    try:
        generated = await generator.generate(payload.prompt)
        response = build_generation_response(payload, generated)
    except Exception as exc:  # noqa: BLE001 - every upstream or assembly fault is INTERNAL_ERROR
        logger.exception("Content generation failed: %s", exc)
        raise APIError.internal(str(exc) if settings.expose_error_details else None) from exc

    logger.info(
        "Generated content %s for region %s (%s keywords)",
        response.generation_metadata.request_id,
        payload.region,
        len(payload.ophthalmology_keywords),
    )
    return response
