"""Stylemark CLI entry point.

Allows running via `python -m stylemark` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .version import get_version_string


def configure_logging(log_file: Optional[str], debug: bool = False) -> None:
    """Send log records to a file; the full-screen UI owns the terminal."""
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def parse_args(args: list[str]) -> dict:
    """Very small arg parsing for version, front-end, logging and sample text."""
    options = {"version": False, "textual": False, "debug": False, "log_file": None, "text": None}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--version", "-V"):
            options["version"] = True
        elif arg == "--textual":
            options["textual"] = True
        elif arg == "--debug":
            options["debug"] = True
        elif arg == "--log-file" and i + 1 < len(args):
            i += 1
            options["log_file"] = args[i]
        elif arg.startswith("--log-file="):
            options["log_file"] = arg.split("=", 1)[1]
        else:
            options["text"] = arg
        i += 1
    return options


def main() -> None:
    options = parse_args(sys.argv[1:])
    if options["version"]:
        print(get_version_string())
        return
    configure_logging(options["log_file"], options["debug"])

    # Lazy imports to avoid importing UI deps for --version
    if options["textual"]:
        from .constants import AppConstants
        from .settings_persistence import get_persistence
        from .textual_app import StylemarkApp
        settings = get_persistence().load_settings()
        text = options["text"] or settings.get("sample_text") or AppConstants.DEFAULT_SAMPLE_TEXT
        StylemarkApp(sample_text=text, max_history=settings.get("max_history")).run()
        return

    from .editor import Editor
    editor = Editor(sample_text=options["text"])
    editor.run()


if __name__ == "__main__":  # pragma: no cover
    main()
