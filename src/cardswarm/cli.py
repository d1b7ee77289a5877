# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse, json, sys, pathlib

from .api import circle_path, simulate
from .config.loader import DEFAULT_CONFIG_PATH, load_config
from .data.catalog import DEFAULT_CATALOG, catalog_to_dicts, load_catalog
from .logging_util import get_logger
from .utils.config import parse_assignments
from .utils.logging import configure_logging


def _dump_json(p: str, obj):
    pathlib.Path(p).parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)


def _load_cfg(args):
    overrides = parse_assignments(getattr(args, "set", None) or [])
    cfg = load_config(args.config, overrides=overrides or None)
    configure_logging(level=cfg.logging.level)
    return cfg


def _catalog(args, cfg):
    path = getattr(args, "catalog", None) or cfg.catalog_path
    return load_catalog(path) if path else list(DEFAULT_CATALOG)


def parse_pointer(spec: str, width: float, height: float):
    """``none`` | ``circle`` | ``fixed:X,Y`` -> pointer path for :func:`simulate`."""
    spec = (spec or "none").strip().lower()
    if spec == "none":
        return None
    if spec == "circle":
        return circle_path((width / 2.0, height / 2.0), min(width, height) / 3.0)
    if spec.startswith("fixed:"):
        try:
            x, y = (float(v) for v in spec[len("fixed:"):].split(","))
        except ValueError:
            raise SystemExit(f"bad --pointer {spec!r}; expected fixed:X,Y") from None
        return lambda t: (x, y)
    raise SystemExit(f"bad --pointer {spec!r}; expected none, circle or fixed:X,Y")


def cmd_run(args):
    cfg = _load_cfg(args)
    log = get_logger("cardswarm.cli", cfg)
    cards = _catalog(args, cfg)
    pointer = parse_pointer(args.pointer, args.width, args.height)
    res = simulate(
        cfg,
        cards,
        ticks=args.ticks,
        size=(args.width, args.height),
        pointer=pointer,
        seed=args.seed,
    )
    if not args.print:
        log.info("ran %d frames for %d cards", res.summary["frames"], res.summary["cards"])

    frames = [
        {"tick": f.tick, "active": f.active, "P": f.P.tolist()}
        for f in (res.engine.recorder.frames if res.engine and res.engine.recorder else [])
    ]
    _dump_json(args.out_summary, res.summary)
    if args.out_frames:
        _dump_json(args.out_frames, frames)
    if args.print:
        print(json.dumps({"summary": res.summary, "P_last": res.coords[-1].tolist() if len(res.coords) else []}, ensure_ascii=False))
    return 0


def cmd_view(args):
    cfg = _load_cfg(args)
    from .viz.view import run_interactive

    run_interactive(cfg, _catalog(args, cfg))
    return 0


def cmd_catalog(args):
    cards = load_catalog(args.catalog) if args.catalog else list(DEFAULT_CATALOG)
    print(json.dumps(catalog_to_dicts(cards), ensure_ascii=False, indent=2))
    return 0


def make_parser():
    p = argparse.ArgumentParser(prog="cardswarm")
    sub = p.add_subparsers(dest="cmd", required=True)

    def _common(sp):
        sp.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="swarm YAML config")
        sp.add_argument("--catalog", default=None, help="YAML/JSON card list (default: built-in)")
        sp.add_argument("--set", action="append", default=[], metavar="KEY=VALUE", help="dotted config override")

    pr = sub.add_parser("run", help="Run the swarm headless and write a summary")
    _common(pr)
    pr.add_argument("--ticks", type=int, default=600)
    pr.add_argument("--width", type=float, default=1200.0)
    pr.add_argument("--height", type=float, default=700.0)
    pr.add_argument("--pointer", default="circle", help="none | circle | fixed:X,Y")
    pr.add_argument("--seed", type=int, default=0)
    pr.add_argument("--out-summary", dest="out_summary", default="out/summary.json")
    pr.add_argument("--out-frames", dest="out_frames", default=None)
    pr.add_argument("--print", action="store_true", help="print JSON result to stdout")
    pr.set_defaults(func=cmd_run)

    pv = sub.add_parser("view", help="Open an interactive matplotlib window")
    _common(pv)
    pv.set_defaults(func=cmd_view)

    pc = sub.add_parser("catalog", help="Print the card catalog as JSON")
    pc.add_argument("--catalog", default=None)
    pc.set_defaults(func=cmd_catalog)

    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    parser = make_parser()
    ns = parser.parse_args(argv)
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
