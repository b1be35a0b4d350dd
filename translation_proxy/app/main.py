import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config
from .cors import apply_cors
from .errors import TranslationProxyError
from .routers import translate

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        )
    root_logger.setLevel(level)


@asynccontextmanager
async def lifespan(_: FastAPI):
    _configure_logging(config.LOG_LEVEL)
    logger.info(
        "Translation proxy ready (anthropic=%s, openai=%s)",
        config.ANTHROPIC_API_URL,
        config.OPENAI_API_URL,
    )
    yield


app = FastAPI(
    title="Translation Proxy API",
    version="0.1.0",
    description="Forwards translation requests to Anthropic or OpenAI on behalf of browser clients",
    lifespan=lifespan,
)

api_router = APIRouter(prefix="/api")
api_router.include_router(translate.router)


@app.exception_handler(TranslationProxyError)
async def translation_proxy_error_handler(_: Request, exc: TranslationProxyError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    error = TranslationProxyError(str(exc.detail), status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content=error.to_body(), headers=exc.headers)


@app.get("/health", include_in_schema=False)
@api_router.get("/health", tags=["health"])
def health() -> dict[str, str]:
    return {"status": "ok"}


app.middleware("http")(apply_cors)
app.include_router(api_router)
