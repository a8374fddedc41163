from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import Any, Dict, List, Optional

from . import __version__
from .config import GambitConfig, load_config
from .errors import ConfigError, InputError
from .forms import parse_round_form
from .logging_utils import setup_logging, uvicorn_log_options
from .render import clearance_lines, format_amount, payout_label, round_lines, stats_lines
from .resolver import resolve_round
from .rng import ChoiceSource, RandomChoiceSource
from .security_gate import check_clearance
from .stats import SessionStats

log = logging.getLogger(__name__)

_QUIT_WORDS = {"", "q", "quit", "exit"}


# ------------------------------- Helpers ------------------------------------ #


def _input_failed(err: InputError) -> int:
    print(f"error: {err.message}", file=sys.stderr)
    return 2


def _source(cfg: GambitConfig, seed: Optional[int]) -> ChoiceSource:
    return RandomChoiceSource(cfg.seed if seed is None else seed)


def _print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


# ------------------------------- Commands ----------------------------------- #


def _cmd_play(args: argparse.Namespace) -> int:
    cfg: GambitConfig = args._config
    try:
        req = parse_round_form(args.hand, args.wager)
    except InputError as e:
        return _input_failed(e)

    stats = SessionStats()
    outcome = resolve_round(req.pick, req.wager, stats, _source(cfg, args.seed))
    _print_lines(round_lines(outcome, cfg.currency))
    _print_lines(stats_lines(stats))
    return 0


def _cmd_session(args: argparse.Namespace) -> int:
    """Read ``<hand> <wager>`` lines until a blank line, ``quit`` or EOF."""
    cfg: GambitConfig = args._config
    stats = SessionStats()
    source = _source(cfg, args.seed)
    interactive = sys.stdin.isatty()

    while True:
        if interactive:
            print("hand wager> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            break
        text = line.strip()
        if text.lower() in _QUIT_WORDS:
            break

        parts = text.split()
        hand = parts[0]
        wager = parts[1] if len(parts) > 1 else ""
        try:
            req = parse_round_form(hand, wager)
        except InputError as e:
            print(f"error: {e.message}", file=sys.stderr)
            continue

        outcome = resolve_round(req.pick, req.wager, stats, source)
        _print_lines(round_lines(outcome, cfg.currency))
        _print_lines(stats_lines(stats))
        print()

    print("Session over.")
    _print_lines(stats_lines(stats))
    return 0


def _cmd_simulate(args: argparse.Namespace) -> int:
    cfg: GambitConfig = args._config
    if args.rounds < 0:
        print("error: --rounds must be >= 0", file=sys.stderr)
        return 2
    try:
        req = parse_round_form(args.hand, args.wager)
    except InputError as e:
        return _input_failed(e)

    stats = SessionStats()
    source = _source(cfg, args.seed)
    net = 0.0
    for _ in range(args.rounds):
        net += resolve_round(req.pick, req.wager, stats, source).payout
    log.info("Simulated %d rounds on hand %d", args.rounds, int(req.pick))
    if not math.isfinite(net):
        print("error: the net result is too large to report", file=sys.stderr)
        return 2

    summary: Dict[str, Any] = dict(stats.snapshot())
    summary["net"] = net
    if args.json:
        print(json.dumps(summary, sort_keys=True))
    else:
        _print_lines(stats_lines(stats))
        print(f"Net result: {payout_label(net)} bars ({format_amount(req.wager)} per round).")
    return 0


def _cmd_gate(args: argparse.Namespace) -> int:
    cfg: GambitConfig = args._config
    try:
        clearance = check_clearance(args.first, args.last, args.zip, name_limit=cfg.gate.name_limit)
    except InputError as e:
        return _input_failed(e)
    _print_lines(clearance_lines(clearance))
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:  # pragma: no cover - blocks until interrupted
    import uvicorn

    from .http_app import create_app

    cfg: GambitConfig = args._config
    if args.seed is not None:
        cfg.seed = args.seed
    host = args.host or cfg.http.host
    port = cfg.http.port if args.port is None else args.port
    log.info("Serving on http://%s:%d", host, port)
    uvicorn.run(create_app(cfg), host=host, port=port, **uvicorn_log_options(args.verbose))
    return 0


# ------------------------------- Parser ------------------------------------- #


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="johnsons-gambit",
        description="3 Hand Monty and Security Gate SG1.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v INFO, -vv DEBUG)",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON or YAML config file")

    sub = parser.add_subparsers(dest="subcommand")

    p_play = sub.add_parser("play", help="Play a single round of 3 Hand Monty")
    p_play.add_argument("--hand", required=True, help="1/2/3 or left/middle/right")
    p_play.add_argument("--wager", default="0", help="Bars of latinum to stake (default 0)")
    p_play.add_argument("--seed", type=int, default=None, help="Seed the hand draw")
    p_play.set_defaults(func=_cmd_play)

    p_sess = sub.add_parser("session", help="Play rounds from stdin, one '<hand> <wager>' per line")
    p_sess.add_argument("--seed", type=int, default=None, help="Seed the hand draw")
    p_sess.set_defaults(func=_cmd_session)

    p_sim = sub.add_parser("simulate", help="Play the same pick and wager many times")
    p_sim.add_argument("--rounds", type=int, required=True, help="Number of rounds")
    p_sim.add_argument("--hand", required=True, help="1/2/3 or left/middle/right")
    p_sim.add_argument("--wager", default="0", help="Stake per round (default 0)")
    p_sim.add_argument("--seed", type=int, default=None, help="Seed the hand draw")
    p_sim.add_argument("--json", action="store_true", help="Print the summary as JSON")
    p_sim.set_defaults(func=_cmd_simulate)

    p_gate = sub.add_parser("gate", help="Request clearance at Security Gate SG1")
    p_gate.add_argument("--first", default="", help="First name")
    p_gate.add_argument("--last", default="", help="Last name")
    p_gate.add_argument("--zip", default="", help="Five-digit ZIP code")
    p_gate.set_defaults(func=_cmd_gate)

    p_serve = sub.add_parser("serve", help="Serve the web pages")
    p_serve.add_argument("--host", default=None, help="Bind address (default from config)")
    p_serve.add_argument("--port", type=int, default=None, help="Port (default from config)")
    p_serve.add_argument("--seed", type=int, default=None, help="Seed the hand draw")
    p_serve.set_defaults(func=_cmd_serve)

    return parser


def main(argv: List[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        args._config = load_config(args.config)
    except ConfigError as e:
        log.error("Config load failed: %s", e)
        print(f"failed: {e}", file=sys.stderr)
        return 2

    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
