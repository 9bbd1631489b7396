"""Collect what a build produced and optionally persist it as JSON."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List

__all__ = ["BuildReport", "StepResult"]


@dataclass
class StepResult:
    name: str
    output: str
    source_bytes: int
    output_bytes: int


@dataclass
class BuildReport:
    """Ordered record of the steps a single ``run()`` completed."""

    output_dir: Path
    steps: List[StepResult] = field(default_factory=list)
    copied: List[str] = field(default_factory=list)

    # Public API ---------------------------------------------------------
    def record_step(self, name: str, output: str, source: str, result: str) -> StepResult:
        step = StepResult(
            name=name,
            output=output,
            source_bytes=len(source.encode("utf-8")),
            output_bytes=len(result.encode("utf-8")),
        )
        self.steps.append(step)
        return step

    def record_copies(self, names: List[str]) -> None:
        self.copied.extend(names)

    def to_dict(self) -> dict:
        return {
            "output_dir": self.output_dir.as_posix(),
            "steps": [asdict(step) for step in self.steps],
            "copied": list(self.copied),
        }

    def write(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        return path
