"""Allow running FocusTimer as a module: python -m focustimer."""

from __future__ import annotations

import argparse
import logging
import sys

from .settings import load_settings
from .timer.errors import ConfigOutOfBounds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="focustimer",
        description="Pomodoro focus/break timer.",
    )
    parser.add_argument("--focus", type=int, metavar="MINUTES",
                        help="focus length, 5-60 in steps of 5")
    parser.add_argument("--break", dest="break_", type=int, metavar="MINUTES",
                        help="break length, 1-15")
    parser.add_argument("--no-sound", action="store_true",
                        help="do not play the phase bell")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings()
    config = settings.duration_config()
    try:
        if args.focus is not None:
            config.set_focus(args.focus)
        if args.break_ is not None:
            config.set_break(args.break_)
    except ConfigOutOfBounds as exc:
        build_parser().error(str(exc))
    settings.remember_durations(config)
    if args.no_sound:
        settings.sound_enabled = False

    from PyQt6.QtWidgets import QApplication

    from .app import FocusTimerApp

    app = QApplication(sys.argv[:1])
    app.setApplicationName("FocusTimer")
    app.setOrganizationName("FocusTimer")

    window = FocusTimerApp(settings)
    window.show()
    logging.getLogger(__name__).info(
        "FocusTimer ready (focus %d min, break %d min)",
        config.focus_minutes, config.break_minutes,
    )

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
