from __future__ import annotations

from typing import Optional


class BellmanPathsError(Exception):
    """Base class for errors raised by bellman_paths."""


class InvalidVertex(BellmanPathsError, ValueError):
    def __init__(self, vertex: int, vertex_count: int, message: Optional[str] = None):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(message or f"vertex {vertex} out of range [0, {vertex_count})")


class CorruptState(BellmanPathsError, RuntimeError):
    """Predecessor chain did not terminate at the start vertex within V steps."""

    def __init__(self, target: int, steps: int, message: Optional[str] = None):
        self.target = target
        self.steps = steps
        super().__init__(message or f"predecessor chain for vertex {target} did not terminate after {steps} steps")
