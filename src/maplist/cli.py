"""Command-line interface mapping text through a transformation plan.

Example, a partial rot13 that only touches two characters out of three::

    maplist "Too many secrets." --transform rot13 rot13 identity
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import MODES, AppConfig, build_plan, load_app_config
from .errors import MapListError
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="maplist", description=__doc__.splitlines()[0])
    parser.add_argument("text", nargs="?", default=None, help="text to map; read from stdin when omitted")
    parser.add_argument("--config", type=Path, default=None, help="YAML file describing the plan")
    parser.add_argument("--mode", choices=MODES, default=None)
    parser.add_argument("--transform", dest="transforms", nargs="+", default=None, metavar="NAME")
    parser.add_argument("--tokens", action="store_true", help="map whitespace-separated tokens, not characters")
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> AppConfig:
    cfg = load_app_config(args.config) if args.config is not None else AppConfig()
    if args.mode is not None:
        cfg.plan.mode = args.mode
    if args.transforms is not None:
        cfg.plan.transforms = list(args.transforms)
    if args.tokens:
        cfg.plan.tokens = True
    if args.log_level is not None:
        cfg.logging.level = args.log_level
    return cfg


def map_text(cfg: AppConfig, text: str) -> str:
    """Map ``text`` through the plan described by ``cfg``."""

    plan = build_plan(cfg.plan)
    if cfg.plan.tokens:
        return " ".join(str(item) for item in plan.apply(text.split()))
    return "".join(str(item) for item in plan.apply(text))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        cfg = _resolve_config(args)
    except MapListError as exc:
        setup_logging(args.log_level or "INFO")
        logger.error("%s", exc)
        return 2

    setup_logging(cfg.logging.level, cfg.logging.rich_tracebacks)
    text = args.text if args.text is not None else sys.stdin.read().rstrip("\n")
    logger.debug("plan: mode=%s transforms=%s", cfg.plan.mode, cfg.plan.transforms)

    try:
        output = map_text(cfg, text)
    except MapListError as exc:
        logger.error("%s", exc)
        return 2

    print(output)
    return 0


__all__ = ["parse_args", "map_text", "main"]


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
