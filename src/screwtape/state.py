from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class ExecutionState:
    ip: int = 0
    output: List[str] = field(default_factory=list)
    terminated: bool = False
    step_count: int = 0

    def reset(self) -> None:
        self.ip = 0
        self.output.clear()
        self.terminated = False
        self.step_count = 0
