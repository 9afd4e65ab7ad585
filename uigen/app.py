# ============================================================
# uigen FastAPI App
# ------------------------------------------------------------
# Wires the generation pipeline to HTTP:
#   - POST /api/generateCode  (conversation -> component source)
#   - GET  /api/components    (catalog listing)
#   - health routes
# Model client is chosen from settings: OpenAI-compatible, Ollama or Echo.
# ============================================================

from __future__ import annotations

import logging
import secrets
from typing import Optional

from fastapi import Depends, FastAPI, Header, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse, Response

# --- Local imports ---
from uigen import __version__
from uigen.catalog import Catalog, load_catalog
from uigen.generate import ComponentGenerator, ErrorKind, GenerationResult, ModelParams
from uigen.generate.clients import ModelClient
from uigen.generate.clients.echo_dev_client import EchoDevClient
from uigen.logging_setup import configure_logging
from uigen.settings import Settings, settings

logger = logging.getLogger(__name__)


# ------------------------------------------------------------
# 🔧 Model client selection
# ------------------------------------------------------------
def build_model_client(cfg: Settings) -> ModelClient:
    provider = (cfg.LLM_PROVIDER or "auto").lower()
    if provider == "auto":
        provider = "openai" if cfg.LLM_API_KEY else "echo"

    if provider == "openai":
        from uigen.generate.clients.openai_client import OpenAIClient
        return OpenAIClient(api_key=cfg.LLM_API_KEY, base_url=cfg.LLM_BASE_URL)
    if provider == "ollama":
        from uigen.generate.clients.ollama_client import OllamaClient
        return OllamaClient(host=cfg.OLLAMA_HOST)
    if provider == "echo":
        return EchoDevClient()
    raise ValueError(f"Unknown LLM_PROVIDER: {cfg.LLM_PROVIDER}")


def build_generator(cfg: Settings, catalog: Optional[Catalog] = None) -> ComponentGenerator:
    return ComponentGenerator(
        model_client=build_model_client(cfg),
        catalog=catalog if catalog is not None else load_catalog(cfg.CATALOG_PATH),
        params=ModelParams(
            temperature=cfg.LLM_TEMPERATURE,
            max_tokens=cfg.LLM_MAX_TOKENS,
            timeout=cfg.LLM_TIMEOUT_S,
        ),
    )


# ------------------------------------------------------------
# 🔐 Authorization gate
# ------------------------------------------------------------
class NotAuthorized(Exception):
    pass


def make_auth_dependency(api_token: Optional[str]):
    def require_authorized(authorization: Optional[str] = Header(default=None)) -> None:
        if not api_token:
            return
        expected = f"Bearer {api_token}".encode("utf-8")
        if not secrets.compare_digest((authorization or "").encode("utf-8"), expected):
            raise NotAuthorized()

    return require_authorized


# ------------------------------------------------------------
# 📦 Result -> HTTP response
# ------------------------------------------------------------
def to_response(result: GenerationResult) -> Response:
    if result.ok:
        return PlainTextResponse(result.source_text)
    err = result.error
    if err.kind is ErrorKind.INVALID_REQUEST:
        return PlainTextResponse(err.message, status_code=err.status)
    return JSONResponse(err.to_body(), status_code=err.status)


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
def create_app(
    generator: Optional[ComponentGenerator] = None,
    api_token: Optional[str] = None,
    cfg: Settings = settings,
) -> FastAPI:
    configure_logging(cfg.LOG_LEVEL)
    generator = generator or build_generator(cfg)
    require_authorized = make_auth_dependency(api_token if api_token is not None else cfg.API_TOKEN)

    app = FastAPI(title=f"{cfg.APP_NAME} API", version=__version__)
    app.state.generator = generator

    @app.exception_handler(NotAuthorized)
    async def _not_authorized(request: Request, exc: NotAuthorized):
        return JSONResponse(
            {"error": "Unauthorized", "details": "Sign in to generate components"},
            status_code=401,
        )

    # --------------------------------------------------------
    # 💬 Generation route
    # --------------------------------------------------------
    @app.post("/api/generateCode", dependencies=[Depends(require_authorized)])
    async def generate_code(request: Request) -> Response:
        raw = await request.body()
        result = await run_in_threadpool(generator.generate, raw)
        return to_response(result)

    # --------------------------------------------------------
    # 🧩 Catalog listing
    # --------------------------------------------------------
    @app.get("/api/components")
    def list_components():
        return {
            "components": [
                {"name": c.name, "import": c.import_docs} for c in generator.catalog
            ]
        }

    # --------------------------------------------------------
    # 🧭 Health checks
    # --------------------------------------------------------
    @app.get("/healthz")
    def healthz():
        return {
            "ok": True,
            "env": cfg.ENV,
            "debug": cfg.DEBUG,
            "app": cfg.APP_NAME,
            "engine": type(generator.model_client).__name__,
        }

    @app.get("/health")
    def health():
        return {"status": "ok", "env": cfg.ENV}

    @app.get("/")
    def hello():
        return {"message": f"{cfg.APP_NAME} service running."}

    return app


app = create_app()
