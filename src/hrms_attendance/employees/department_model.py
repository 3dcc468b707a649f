from __future__ import annotations

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class Department:
    """Department with its office window (only the time of day matters)."""

    dept_id: int
    dept_name: str
    open_time: time
    close_time: time
