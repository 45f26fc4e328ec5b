"""Shared vital statistics for every character."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Vitals:
    """Title, hit points and alive status."""

    title: str
    hp: int
    alive: bool = True
