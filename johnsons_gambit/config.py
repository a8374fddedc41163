"""Runtime configuration: defaults, optional JSON/YAML file, ``GAMBIT_*`` env overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError
from .security_gate import NAME_LIMIT_DEFAULT

log = logging.getLogger(__name__)

CURRENCY_DEFAULT = "bars of latinum"
HOST_DEFAULT = "127.0.0.1"
PORT_DEFAULT = 8000

_KNOWN_TOP = {"seed", "currency", "gate", "http"}


@dataclass
class GateConfig:
    name_limit: int = NAME_LIMIT_DEFAULT


@dataclass
class HttpConfig:
    host: str = HOST_DEFAULT
    port: int = PORT_DEFAULT


@dataclass
class GambitConfig:
    seed: Optional[int] = None
    currency: str = CURRENCY_DEFAULT
    gate: GateConfig = field(default_factory=GateConfig)
    http: HttpConfig = field(default_factory=HttpConfig)


def _as_int(value: Any, where: str, *, minimum: Optional[int] = None) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{where} must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ConfigError(f"{where} must be a whole number, got {value!r}")
    try:
        n = int(str(value).strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{where} must be an integer, got {value!r}") from None
    if minimum is not None and n < minimum:
        raise ConfigError(f"{where} must be >= {minimum}, got {n}")
    return n


def _section(data: Mapping[str, Any], key: str) -> Dict[str, Any]:
    blk = data.get(key)
    if blk is None:
        return {}
    if not isinstance(blk, dict):
        raise ConfigError(f"'{key}' must be a mapping")
    return blk


def read_config_file(path: str | Path) -> Dict[str, Any]:
    """Load a JSON or YAML config file; the root must be a mapping."""

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config {p}: {e}") from e

    try:
        if p.suffix.lower() in {".yaml", ".yml"}:
            data: Any = yaml.safe_load(text) or {}
        else:
            data = json.loads(text or "{}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"invalid config {p}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a JSON/YAML object (mapping).")
    return data


def config_from_mapping(data: Mapping[str, Any]) -> GambitConfig:
    unknown = sorted(set(data) - _KNOWN_TOP)
    if unknown:
        log.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

    cfg = GambitConfig()
    if data.get("seed") is not None:
        cfg.seed = _as_int(data["seed"], "seed")
    if data.get("currency"):
        cfg.currency = str(data["currency"])

    gate = _section(data, "gate")
    if "name_limit" in gate:
        cfg.gate.name_limit = _as_int(gate["name_limit"], "gate.name_limit", minimum=1)

    http = _section(data, "http")
    if "host" in http:
        cfg.http.host = str(http["host"])
    if "port" in http:
        cfg.http.port = _as_int(http["port"], "http.port", minimum=0)
    return cfg


def apply_env(cfg: GambitConfig, env: Mapping[str, str]) -> GambitConfig:
    seed = env.get("GAMBIT_SEED", "").strip()
    if seed:
        cfg.seed = _as_int(seed, "GAMBIT_SEED")
    limit = env.get("GAMBIT_NAME_LIMIT", "").strip()
    if limit:
        cfg.gate.name_limit = _as_int(limit, "GAMBIT_NAME_LIMIT", minimum=1)
    host = env.get("GAMBIT_HOST", "").strip()
    if host:
        cfg.http.host = host
    port = env.get("GAMBIT_PORT", "").strip()
    if port:
        cfg.http.port = _as_int(port, "GAMBIT_PORT", minimum=0)
    return cfg


def load_config(
    path: str | Path | None = None,
    env: Optional[Mapping[str, str]] = None,
) -> GambitConfig:
    """Defaults, then the file at ``path`` (if any), then environment overrides."""

    data = read_config_file(path) if path else {}
    cfg = config_from_mapping(data)
    return apply_env(cfg, os.environ if env is None else env)
