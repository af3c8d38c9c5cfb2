import os
from fastapi import FastAPI, APIRouter, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

import mod
import words
from log import logger


def _read_fields(j):
    """Validate a moderate-text request body and return (text, context)."""
    if not isinstance(j, dict):
        raise HTTPException(400, "Invalid request body")
    text = j.get("text")
    if not text or not isinstance(text, str):
        raise HTTPException(400, "Missing 'text' field")
    context = j.get("context")
    try:
        ctx = mod.Context(context)
    except ValueError:
        raise HTTPException(400, "Missing or invalid 'context' field")
    return text, ctx


def make_app(cfg, config_path: str | None = None):
    cfg = cfg or {}
    app = FastAPI(title="moderate-text")
    app.state.cfg = cfg
    app.state.config_dir = (
        os.path.dirname(os.path.abspath(config_path)) if config_path else None
    )

    ori = cfg.get("cors_allow_origins", "*")
    if ori == "*":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[s.strip() for s in ori.split(",") if s.strip()],
            allow_methods=["*"],
            allow_headers=["*"],
        )
    r = APIRouter(prefix="/api")

    @r.post("/moderate-text")
    async def moderate_text(req: Request):
        try:
            j = await req.json()
        except ValueError:
            raise HTTPException(400, "Invalid request body")
        text, ctx = _read_fields(j)
        v = mod.evaluate(text, ctx)
        if not v.allowed:
            logger.info(
                f"rejected context={ctx.value} flagged={v.flagged_word or '-'}"
            )
        return v.to_dict()

    @r.get("/healthz")
    def healthz():
        return {
            "ok": True,
            "terms": {
                "always_blocked": len(words.ALWAYS_BLOCKED),
                "profanity": len(words.PROFANITY),
                "targeted_insults": len(words.TARGETED_INSULTS),
                "whitelist": len(words.WHITELIST),
                "reserved": len(words.RESERVED_USERNAMES),
            },
        }

    app.include_router(r)
    return app
