from typing import Any

from fastapi import status

from .schemas import ErrorResponse


class TranslationProxyError(Exception):
    """Base class for failures that are reported to the caller as a JSON error body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, error: str | None = None, *, status_code: int | None = None, **extra: Any) -> None:
        self.message = error or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra
        super().__init__(self.message)

    def to_body(self) -> dict[str, Any]:
        return ErrorResponse(error=self.message, **self.extra).model_dump(by_alias=True, exclude_none=True)


class MissingFieldsError(TranslationProxyError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"

    def __init__(self, *, has_api_key: bool, has_text: bool) -> None:
        super().__init__(details={"hasApiKey": has_api_key, "hasText": has_text})


class InvalidRequestBodyError(TranslationProxyError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request body"


class UnsupportedMethodError(TranslationProxyError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    default_message = "Method not allowed"


class UpstreamError(TranslationProxyError):
    """A non-2xx answer from the provider; the provider's status is passed through."""

    default_message = "Translation failed"


class UpstreamAuthError(UpstreamError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Chave de API inválida. Verifique sua chave da {provider}."


class UpstreamBillingError(UpstreamError):
    status_code = status.HTTP_402_PAYMENT_REQUIRED
    default_message = "Créditos insuficientes na conta da {provider}."


class UpstreamRateLimitError(UpstreamError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS
    default_message = "Limite de requisições atingido. Aguarde alguns instantes antes de tentar novamente."


class UpstreamServerError(UpstreamError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Erro no servidor da {provider}. Tente novamente mais tarde."


class UpstreamOtherError(UpstreamError):
    pass


UPSTREAM_ERRORS_BY_STATUS: dict[int, type[UpstreamError]] = {
    401: UpstreamAuthError,
    402: UpstreamBillingError,
    429: UpstreamRateLimitError,
    500: UpstreamServerError,
}


class MalformedUpstreamResponseError(TranslationProxyError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Invalid response from translation API"


class UpstreamTimeoutError(TranslationProxyError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    default_message = (
        "Tempo limite excedido aguardando a resposta da {provider}. "
        "Tente novamente ou envie um texto menor."
    )

    def __init__(self, provider_label: str, **extra: Any) -> None:
        super().__init__(self.default_message.format(provider=provider_label), timeout=True, **extra)


class UnhandledInternalError(TranslationProxyError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, exc_message: str) -> None:
        super().__init__(message=exc_message)
