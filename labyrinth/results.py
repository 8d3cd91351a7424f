"""Writes accepted loops to the output directory."""

import os
import uuid
from typing import Optional

from .logger import Logger
from .planner import LoopResult


class ResultWriter:
    """One text file per accepted loop, named <score>-<uuid>.txt"""

    def __init__(self, output_dir: str, logger: Optional[Logger] = None):
        self.output_dir = output_dir
        self.logger = logger
        self.written: list[str] = []
        os.makedirs(output_dir, exist_ok=True)

    def record(self, result: LoopResult):
        path = os.path.join(self.output_dir, f"{result.score}-{uuid.uuid4()}.txt")
        lines = result.instructions + [str(segment) for segment in result.path]
        with open(path, "w") as f:
            f.write("\n".join(lines) + "\n")
        self.written.append(path)
        if self.logger:
            self.logger.log("Wrote loop", {"score": result.score, "file": path})
