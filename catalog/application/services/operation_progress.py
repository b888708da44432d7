"""
Progress tracking for admin catalog mutations.
"""
import logging
from typing import List

from catalog.application.dto.product_dto import OperationState

logger = logging.getLogger(__name__)

_TERMINAL = (OperationState.SUCCEEDED, OperationState.FAILED)


class OperationProgress:
    """
    Records the stages one mutation has passed through.

    Stages only move forward and a finished operation cannot move again.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.history: List[OperationState] = [OperationState.PENDING]

    @property
    def state(self) -> OperationState:
        return self.history[-1]

    @property
    def last_active_state(self) -> OperationState:
        """The stage the operation was in before it finished."""
        for state in reversed(self.history):
            if state not in _TERMINAL:
                return state
        return OperationState.PENDING

    def advance(self, state: OperationState) -> None:
        """
        Move to ``state``.

        Raises:
            RuntimeError: If the operation has already finished
        """
        if self.state in _TERMINAL:
            raise RuntimeError(f"{self.operation} already {self.state}")
        self.history.append(state)
        logger.debug("%s -> %s", self.operation, state)
