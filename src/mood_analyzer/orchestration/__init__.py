"""
Orchestration layer.

Wires the interaction core together and owns the timer choreography.
"""
from .interaction_orchestrator import (
    InteractionOrchestrator,
    CALM_DOWN_TASK,
    ANALYSIS_TASK,
    DISCLOSURE_TASK,
)

__all__ = [
    "InteractionOrchestrator",
    "CALM_DOWN_TASK",
    "ANALYSIS_TASK",
    "DISCLOSURE_TASK",
]
