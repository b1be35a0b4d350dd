import asyncio
import logging
from time import perf_counter

import httpx

from . import config
from .errors import MalformedUpstreamResponseError, UpstreamTimeoutError
from .prompts import build_system_prompt, temperature_for_style
from .providers import TranslationProvider
from .schemas import TranslationRequest

logger = logging.getLogger(__name__)


async def post_with_deadline(
    provider: TranslationProvider,
    api_key: str,
    payload: dict,
) -> httpx.Response:
    """Send one request upstream, cancelling it once the provider's deadline has passed."""
    deadline = provider.deadline_seconds
    logger.info(
        "Dispatching to %s at %s (model=%s, deadline=%.1fs)",
        provider.name,
        provider.endpoint,
        payload.get("model"),
        deadline,
    )
    started = perf_counter()
    try:
        async with httpx.AsyncClient(timeout=deadline) as client:
            response = await asyncio.wait_for(
                client.post(provider.endpoint, headers=provider.build_headers(api_key), json=payload),
                timeout=deadline,
            )
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        elapsed_ms = (perf_counter() - started) * 1000
        logger.warning("%s did not answer within %.1fs (%.0f ms elapsed)", provider.name, deadline, elapsed_ms)
        raise UpstreamTimeoutError(provider.label, provider=provider.name) from exc

    latency_ms = (perf_counter() - started) * 1000
    logger.info("%s responded with HTTP %s in %.0f ms", provider.name, response.status_code, latency_ms)
    return response


def read_json(response: httpx.Response):
    try:
        return response.json()
    except ValueError:
        return None


async def translate(provider: TranslationProvider, request: TranslationRequest) -> str:
    system_prompt = build_system_prompt(
        source_lang=request.source_lang,
        target_lang=request.target_lang,
        style=request.style,
        part_index=request.part_index,
        total_parts=request.total_parts,
    )
    payload = provider.build_payload(
        model=request.model,
        system_prompt=system_prompt,
        text=request.text,
        temperature=temperature_for_style(request.style),
    )

    response = await post_with_deadline(provider, request.api_key, payload)
    data = read_json(response)

    if not response.is_success:
        error = provider.error_for(response.status_code, data)
        logger.warning(
            "%s rejected the translation with HTTP %s: %s",
            provider.name,
            response.status_code,
            provider.extract_error_message(data) or "no error message",
        )
        raise error

    translation = provider.extract_translation(data)
    if translation is None:
        logger.error("%s returned an unexpected body shape", provider.name)
        raise MalformedUpstreamResponseError(provider=provider.name)
    return translation


def length_ratio(original: str, translation: str) -> float:
    if not original:
        return 0.0
    return len(translation) / len(original)


def log_length_ratio(
    original: str,
    translation: str,
    part_index: int | None = None,
    total_parts: int | None = None,
) -> float:
    ratio = length_ratio(original, translation)
    fragment = f" (part {part_index + 1}/{total_parts})" if part_index is not None else ""
    logger.info(
        "Translation length %d vs original %d, ratio %.2f%s",
        len(translation),
        len(original),
        ratio,
        fragment,
    )
    if ratio < config.SHORT_TRANSLATION_RATIO:
        logger.warning("Translation is much shorter than the original%s and may be incomplete", fragment)
    return ratio
