"""
Handlers - engine callback logic.
"""

from .run_controller import RunController, RunPhase

__all__ = [
    "RunController",
    "RunPhase",
]
