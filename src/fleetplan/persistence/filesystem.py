"""Run directories for persisted assignment plans."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from ..config import settings

logger = logging.getLogger(__name__)


class FileStorage:
    """Stores each optimization run in its own ``<data_root>/outputs/<prefix>_<utc stamp>`` folder."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.output_root = self.root / "outputs"

    def make_run_directory(self, prefix: str = "plan") -> Path:
        # microsecond stamp, one directory per run
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        path = self.output_root / f"{prefix}_{timestamp}"
        path.mkdir(parents=True, exist_ok=False)
        return path

    def save_run(self, prefix: str, artifacts: Mapping[str, Any]) -> Path:
        """Write ``artifacts`` (file name -> content) into a fresh run directory.

        ``.json`` entries are serialized; every other entry must already be text.
        """
        run_dir = self.make_run_directory(prefix)
        for name, content in artifacts.items():
            target = run_dir / name
            if target.suffix == ".json":
                self.write_json(target, content)
            else:
                self.write_text(target, content)
        logger.debug(f"Wrote {len(artifacts)} artifacts to {run_dir}")
        return run_dir

    def write_json(self, path: Path, data: Any, *, indent: int = 2) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=indent)

    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)
