"""Custom build hook for Hatchling to embed git build info."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO_PATH = "stylemark/_build_info.py"


class CustomBuildHook(BuildHookInterface):
    """Writes stylemark/_build_info.py so installed copies know their commit."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        commit = self._run_git(["rev-parse", "HEAD"], cwd=root)
        date = self._run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=root)
        (root / BUILD_INFO_PATH).write_text(
            "# Auto-generated at build time.\n"
            f"COMMIT = {commit!r}\n"
            f"DATE = {date!r}\n",
            encoding="utf-8",
        )
        build_data.setdefault("artifacts", []).append(BUILD_INFO_PATH)

    def _run_git(self, args: list[str], cwd: Path) -> str | None:
        try:
            out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
            return out.decode().strip() or None
        except (subprocess.CalledProcessError, FileNotFoundError, OSError):
            # No git (sdist builds, containers): leave the info unknown
            return None
