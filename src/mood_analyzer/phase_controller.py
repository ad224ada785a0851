"""
Phase Controller - owns the interaction phase state machine.

Upload -> Refused -> Cheering -> Analyzing -> Results, plus
Refused -> Upload (cancel) and reset from any phase back to Upload.

The controller only validates and records transitions. Timing and
side effects belong to the orchestrator.
"""
import logging
from typing import Dict, FrozenSet, Optional
from .interaction.interaction_types import Phase

logger = logging.getLogger(__name__)


_TRANSITIONS: Dict[Phase, FrozenSet[Phase]] = {
    Phase.UPLOAD: frozenset({Phase.REFUSED}),
    Phase.REFUSED: frozenset({Phase.CHEERING, Phase.UPLOAD}),
    Phase.CHEERING: frozenset({Phase.ANALYZING}),
    Phase.ANALYZING: frozenset({Phase.RESULTS}),
    Phase.RESULTS: frozenset(),
}


class PhaseController:
    """
    Finite-state machine for the interaction phase.
    
    Exactly one phase is active. Illegal transitions are refused with a
    False return value, never an exception: out-of-order UI events are
    expected and simply ignored.
    """
    
    def __init__(self, initial: Phase = Phase.UPLOAD):
        self._phase = initial
        self._previous: Optional[Phase] = None
    
    @property
    def phase(self) -> Phase:
        """Currently active phase."""
        return self._phase
    
    @property
    def previous_phase(self) -> Optional[Phase]:
        """Phase active before the last transition (None after reset)."""
        return self._previous
    
    def is_in(self, *phases: Phase) -> bool:
        return self._phase in phases
    
    def can_transition(self, target: Phase) -> bool:
        """Check whether target is reachable from the current phase."""
        return target in _TRANSITIONS[self._phase]
    
    def transition_to(self, target: Phase) -> bool:
        """
        Move to target if the transition table allows it.
        
        :param target: Phase to enter
        :return: True if the phase changed, False if the transition was refused
        """
        if not self.can_transition(target):
            logger.debug(f"Transition refused: {self._phase.value} -> {target.value}")
            return False
        
        self._previous = self._phase
        self._phase = target
        logger.info(f"Phase transition: {self._previous.value} -> {target.value}")
        return True
    
    def reset(self) -> None:
        """Return to Upload from any phase."""
        if self._phase is not Phase.UPLOAD:
            logger.info(f"Phase reset: {self._phase.value} -> {Phase.UPLOAD.value}")
        self._phase = Phase.UPLOAD
        self._previous = None
    
    def accepts_mood_input(self) -> bool:
        """Mood-changing commands are only honoured while cheering."""
        return self._phase is Phase.CHEERING
    
    def is_locked(self) -> bool:
        """Analyzing is the busy window: no user input is accepted."""
        return self._phase is Phase.ANALYZING
