"""
server/main.py
Soulset companion backend – FastAPI
"""

# =========================
# Standard & third-party
# =========================
import logging
import random
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prompts.content_bank import ContentBank, build_content_bank
from server.config import Settings
from server.logging_config import setup_logging
from services.companion import CompanionPipeline
from services.openai_client import CompletionClient, GenerationError
from services.selection import RandomSource

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[CompletionClient] = None,
    rng: Optional[RandomSource] = None,
    bank: Optional[ContentBank] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    bank = bank or build_content_bank(
        card_probability=settings.card_probability,
        two_insights_probability=settings.two_insights_probability,
    )
    client = client or CompletionClient(
        api_key=settings.openai_api_key,
        model=settings.primary_model,
        temperature=settings.temperature,
    )
    pipeline = CompanionPipeline(bank, rng or RandomSource(random.Random()))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # logging is configured when the server starts, not on import
        setup_logging(settings.log_level, settings.log_dir)
        yield

    # =========================
    # App (single instance)
    # =========================
    app = FastAPI(title="Soulset Companion", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.pipeline = pipeline
    app.state.client = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Every HTTP error leaves as {ok: false, error}
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"ok": False, "error": exc.detail},
                            status_code=exc.status_code, headers=exc.headers)

    # =========================
    # Health / Diagnostics
    # =========================
    @app.get("/health")
    async def health(net: int = 0):
        """
        Basic health check. Add ?net=1 to test outbound access to OpenAI.
        """
        info = {"ok": True, "status": "healthy"}
        if net:
            info["net"] = {"env_key_present": bool(settings.openai_api_key)}
            try:
                headers = {"Authorization": f"Bearer {settings.openai_api_key}"}
                async with httpx.AsyncClient(timeout=8) as http:
                    r = await http.get("https://api.openai.com/v1/models", headers=headers)
                info["net"]["openai_models"] = {"status": r.status_code, "ok": r.status_code < 400}
            except httpx.HTTPError as e:
                info["net"]["openai_models"] = f"error: {type(e).__name__}: {e}"
        return JSONResponse(info)

    @app.get("/", response_class=HTMLResponse)
    def root_page():
        return HTMLResponse("<!doctype html><h1>Soulset companion is running.</h1>")

    # =========================
    # /api/analyze – main endpoint
    # =========================
    @app.post("/api/analyze")
    async def analyze(request: Request):
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid JSON body")
        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail="Invalid JSON body")

        raw_text = body.get("text")
        if raw_text is None:
            raw_text = body.get("dilemma")  # legacy field
        text = str(raw_text or "").strip()
        lang = str(body.get("lang") or "").strip().lower()
        if not text:
            raise HTTPException(status_code=400, detail="Missing text")

        if not settings.openai_api_key:
            logger.error("[analyze] OPENAI_API_KEY is not configured")
            raise HTTPException(status_code=500, detail="Missing OPENAI_API_KEY")

        prepared = pipeline.prepare(text, lang)
        try:
            result = await pipeline.run(prepared, client)
        except GenerationError as e:
            raise HTTPException(status_code=500, detail=str(e))

        return JSONResponse(result.to_payload())

    return app


# =========================
# Bootstrap / Config
# =========================
settings = Settings.from_env()
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
