from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    dept_id: str
    dept_name: str


@dataclass(frozen=True)
class Position:
    position_id: str
    position_name: str
