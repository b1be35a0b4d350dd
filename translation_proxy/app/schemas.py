from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranslationRequest(CamelModel):
    text: str | None = None
    source_lang: str | None = "auto"
    target_lang: str | None = None
    style: str | None = "intelligent"
    api_key: str | None = Field(default=None, repr=False)
    provider: str | None = "anthropic"
    model: str | None = None
    part_index: int | None = None
    total_parts: int | None = None


class TranslationResponse(CamelModel):
    translation: str
    original_length: int
    translation_length: int
    part_index: int | None = None
    total_parts: int | None = None
    success: bool = True
    provider: str


class ErrorResponse(CamelModel):
    error: str
    details: Any | None = None
    provider_error: Any | None = None
    timeout: bool | None = None
    status: int | None = None
    provider: str | None = None
    message: str | None = None
