"""Server-rendered pages for 3 Hand Monty and Security Gate SG1."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from .config import GambitConfig, load_config
from .errors import InputError
from .forms import parse_round_form
from .hands import Hand, hand_name, parse_hand
from .render import format_amount, payout_label, result_headline
from .resolver import resolve_round
from .rng import ChoiceSource, RandomChoiceSource
from .security_gate import check_clearance
from .stats import SessionStats

logger = logging.getLogger(__name__)

_templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
_templates.env.filters["payout_label"] = payout_label
_templates.env.filters["amount"] = format_amount
_templates.env.globals["result_headline"] = result_headline
_templates.env.globals["HANDS"] = [(int(h), hand_name(h)) for h in Hand]


def ok_response(payload: Dict[str, Any], *, status: int = 200) -> JSONResponse:
    data = {"ok": True}
    data.update(payload)
    return JSONResponse(status_code=status, content=data)


def create_app(
    config: Optional[GambitConfig] = None,
    *,
    source: Optional[ChoiceSource] = None,
) -> FastAPI:
    """
    Build the web app. Each app instance is one session: it owns the stats
    accumulator and the choice source for as long as it lives.
    """

    cfg = config or load_config()
    app = FastAPI(title="Johnson's Gambit", version="1.0.0")
    app.state.config = cfg
    app.state.stats = SessionStats()
    app.state.source = source or RandomChoiceSource(cfg.seed)
    app.state.lock = threading.Lock()

    def _monty_page(
        request: Request,
        *,
        outcome=None,
        error: Optional[str] = None,
        form: Optional[Dict[str, Any]] = None,
        stats: Optional[Dict[str, Any]] = None,
        status: int = 200,
    ):
        if stats is None:
            with app.state.lock:
                stats = app.state.stats.snapshot()
        selected = parse_hand((form or {}).get("hand"))
        ctx = {
            "outcome": outcome,
            "error": error,
            "form": form or {},
            "selected": int(selected) if selected is not None else None,
            "stats": stats,
            "currency": cfg.currency,
        }
        return _templates.TemplateResponse(request, "monty.html", ctx, status_code=status)

    def _gate_page(
        request: Request,
        *,
        clearance=None,
        error: Optional[str] = None,
        form: Optional[Dict[str, Any]] = None,
        status: int = 200,
    ):
        ctx = {"clearance": clearance, "error": error, "form": form or {}}
        return _templates.TemplateResponse(request, "gate.html", ctx, status_code=status)

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return _templates.TemplateResponse(request, "index.html", {})

    @app.get("/monty", response_class=HTMLResponse)
    def monty(request: Request):
        return _monty_page(request)

    @app.post("/monty", response_class=HTMLResponse)
    def monty_play(
        request: Request,
        hand: Optional[str] = Form(None),
        wager: Optional[str] = Form(None),
    ):
        form = {"hand": hand, "wager": wager}
        try:
            req = parse_round_form(hand, wager)
        except InputError as e:
            logger.info("Rejected Monty round: %s", e.message)
            return _monty_page(request, error=e.message, form=form, status=400)

        # the page shows the counters as they were right after this round
        with app.state.lock:
            outcome = resolve_round(req.pick, req.wager, app.state.stats, app.state.source)
            stats = app.state.stats.snapshot()
        logger.info(
            "Round resolved: pick=%s winning=%s payout=%s", outcome.pick, outcome.winning, outcome.payout
        )
        return _monty_page(request, outcome=outcome, form=form, stats=stats)

    @app.get("/api/monty/stats")
    def monty_stats():
        with app.state.lock:
            snap = app.state.stats.snapshot()
        return ok_response({"stats": snap})

    @app.get("/gate", response_class=HTMLResponse)
    def gate(request: Request):
        return _gate_page(request)

    @app.post("/gate", response_class=HTMLResponse)
    def gate_submit(
        request: Request,
        first_name: Optional[str] = Form(None),
        last_name: Optional[str] = Form(None),
        zip_code: Optional[str] = Form(None),
    ):
        form = {"first_name": first_name, "last_name": last_name, "zip_code": zip_code}
        try:
            clearance = check_clearance(
                first_name, last_name, zip_code, name_limit=cfg.gate.name_limit
            )
        except InputError as e:
            logger.info("SG1 validation failed: %s", e.message)
            return _gate_page(request, error=e.message, form=form, status=400)
        return _gate_page(request, clearance=clearance, form=form)

    @app.get("/health")
    def health():
        return ok_response({"status": "ok"})

    return app


__all__ = ["create_app", "ok_response"]
