from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict

from .config import get_settings

LOG = logging.getLogger("aspectguard")

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_USAGE = 2
EXIT_STOPPED = 3


def _setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, get_settings().log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def _print(payload: Dict[str, Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(payload)


def _cmd_check(ns: argparse.Namespace) -> int:
    from .screen.ratio import TARGET_RATIO, evaluate

    if ns.image:
        from PIL import Image

        try:
            with Image.open(ns.image) as im:
                width, height = im.size
        except OSError as e:
            LOG.error(f"Cannot open image {ns.image}: {e}")
            return EXIT_USAGE
    elif ns.width is not None and ns.height is not None:
        width, height = ns.width, ns.height
    else:
        print("check: pass --image or both --width and --height", file=sys.stderr)
        return EXIT_USAGE

    decision = evaluate(width, height)
    _print(
        {
            "width": width,
            "height": height,
            "accepted": decision.accepted,
            "computed_ratio": round(decision.computed_ratio, 4),
            "target_ratio": round(TARGET_RATIO, 4),
        },
        ns.json,
    )
    return EXIT_OK if decision.accepted else EXIT_REJECTED


def _cmd_run(ns: argparse.Namespace) -> int:
    from .kernel import EventBus
    from .screen.controller import ScreenController, StaticController
    from .screen.guard import install_guard
    from .tasker import EventStatus, Tasker

    if ns.image:
        try:
            controller = StaticController(ns.image)
        except OSError as e:
            LOG.error(f"Cannot open image {ns.image}: {e}")
            return EXIT_USAGE
    else:
        controller = ScreenController()
        ok, err = controller.post_screencap()
        if not ok:
            LOG.warning(f"No screenshot available, task runs unchecked: {err}")

    bus = EventBus()
    # Keep stdout parseable under --json.
    unsubscribe = install_guard(bus, warning_sink=sys.stderr if ns.json else None)
    tasker = Tasker(events=bus, controller=controller)
    try:
        result = tasker.post_task(ns.entry)
    finally:
        if unsubscribe is not None:
            unsubscribe()

    _print(
        {"task_id": result.detail.task_id, "entry": result.detail.entry, "status": result.status.value},
        ns.json,
    )
    if result.stopped:
        return EXIT_STOPPED
    return EXIT_OK if result.status == EventStatus.SUCCEEDED else EXIT_REJECTED


def _cmd_status(ns: argparse.Namespace) -> int:
    from .screen.ratio import TARGET_RATIO, TOLERANCE
    from .screen.status import get_screen_status

    _print(
        {
            "screen": get_screen_status(),
            "guard": {
                "enabled": get_settings().enabled,
                "target_ratio": round(TARGET_RATIO, 4),
                "tolerance": TOLERANCE,
            },
        },
        ns.json,
    )
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    _setup_logging()
    p = argparse.ArgumentParser(prog="aspectguard", description="16:9 screen guard for automation tasks")
    sub = p.add_subparsers(dest="cmd", required=True)

    chk = sub.add_parser("check", help="Classify dimensions or an image file")
    chk.add_argument("--width", type=int, default=None)
    chk.add_argument("--height", type=int, default=None)
    chk.add_argument("--image", default=None, help="Image file to read the size from")
    chk.add_argument("--json", action="store_true", help="Print JSON")

    run = sub.add_parser("run", help="Run a task with the guard installed")
    run.add_argument("--entry", required=True, help="Task entry name")
    run.add_argument("--image", default=None, help="Use this image instead of a live screenshot")
    run.add_argument("--json", action="store_true", help="Print JSON")

    st = sub.add_parser("status", help="Capture backend and guard status")
    st.add_argument("--json", action="store_true", help="Print JSON")

    ns = p.parse_args(sys.argv[1:] if argv is None else argv)
    if ns.cmd == "check":
        return _cmd_check(ns)
    if ns.cmd == "run":
        return _cmd_run(ns)
    if ns.cmd == "status":
        return _cmd_status(ns)
    return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
