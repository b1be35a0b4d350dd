import json
import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from ..errors import (
    InvalidRequestBodyError,
    MissingFieldsError,
    TranslationProxyError,
    UnhandledInternalError,
    UnsupportedMethodError,
)
from ..providers import get_provider
from ..schemas import ErrorResponse, TranslationRequest, TranslationResponse
from ..services import log_length_ratio, translate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["translate"])

ERROR_RESPONSES = {
    code: {"model": ErrorResponse}
    for code in (400, 401, 402, 405, 429, 500, 504)
}


async def read_translation_request(request: Request) -> TranslationRequest:
    raw = await request.body()
    body = json.loads(raw) if raw else {}

    fields = body if isinstance(body, dict) else {}
    if not fields.get("text") or not fields.get("apiKey"):
        raise MissingFieldsError(has_api_key=bool(fields.get("apiKey")), has_text=bool(fields.get("text")))

    try:
        return TranslationRequest.model_validate(body)
    except ValidationError as exc:
        raise InvalidRequestBodyError(
            details=exc.errors(include_url=False, include_context=False, include_input=False)
        ) from exc


@router.post("/translate", response_model=TranslationResponse, responses=ERROR_RESPONSES)
async def translate_text(request: Request) -> TranslationResponse:
    try:
        payload = await read_translation_request(request)

        provider = get_provider(payload.provider)
        logger.info(
            "Translation requested: provider=%s %s->%s style=%s chars=%d part=%s/%s key_supplied=%s",
            provider.name,
            payload.source_lang,
            payload.target_lang,
            payload.style,
            len(payload.text),
            payload.part_index,
            payload.total_parts,
            bool(payload.api_key),
        )

        translation = await translate(provider, payload)
        log_length_ratio(payload.text, translation, payload.part_index, payload.total_parts)

        logger.info("Translation sent: provider=%s chars=%d", provider.name, len(translation))
        return TranslationResponse(
            translation=translation,
            original_length=len(payload.text),
            translation_length=len(translation),
            part_index=payload.part_index,
            total_parts=payload.total_parts,
            success=True,
            provider=provider.name,
        )
    except TranslationProxyError:
        raise
    except Exception as exc:
        logger.exception("Unhandled error while translating")
        raise UnhandledInternalError(str(exc)) from exc


@router.api_route(
    "/translate",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def reject_method(request: Request) -> None:
    logger.info("Rejected %s on %s", request.method, request.url.path)
    raise UnsupportedMethodError()
