from __future__ import annotations
import argparse
import sys
import threading
from typing import Optional, Sequence

from mdeditor.models.errors import ChannelStartError
from mdeditor.services.config_service import RENDER_STYLES, EditorConfig, load_config
from mdeditor.services.editor_session import EditorSession
from mdeditor.utils.logger import configure_logging, get_logger

LOGGER = get_logger("mdeditor")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mdeditor")
    parser.add_argument("--plugin-dir", default=None, help="directory to watch")
    parser.add_argument("--style", choices=RENDER_STYLES, default=None)
    parser.add_argument("--observer-timeout", type=float, default=None)
    parser.add_argument(
        "--once", action="store_true", help="run the pipeline and exit without watching"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def apply_overrides(config: EditorConfig, args: argparse.Namespace) -> EditorConfig:
    if args.plugin_dir:
        config.plugin_dir = args.plugin_dir
    if args.style:
        config.render_style = args.style
    if args.observer_timeout is not None and args.observer_timeout > 0:
        config.observer_timeout = args.observer_timeout
    if args.verbose:
        config.log_level = "DEBUG"
    return config


def main(argv: Optional[Sequence[str]] = None, stop_event: threading.Event | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = apply_overrides(load_config(), args)
    configure_logging(config.log_level)

    session = EditorSession(config)
    session.run_demo()
    if args.once:
        return 0

    stop_event = stop_event or threading.Event()
    try:
        session.serve(stop_event)
    except ChannelStartError as exc:
        LOGGER.error("Plugin watcher failed to start: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        stop_event.set()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
