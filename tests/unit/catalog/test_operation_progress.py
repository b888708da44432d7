"""
Unit tests for OperationProgress.
"""
import pytest

from catalog.application.dto.product_dto import OperationState
from catalog.application.services.operation_progress import OperationProgress


def test_starts_pending():
    progress = OperationProgress("create")
    assert progress.state is OperationState.PENDING


def test_records_history():
    progress = OperationProgress("delete")
    progress.advance(OperationState.AUTHORIZING)
    progress.advance(OperationState.PERSISTING)
    progress.advance(OperationState.SUCCEEDED)

    assert progress.history == [
        OperationState.PENDING,
        OperationState.AUTHORIZING,
        OperationState.PERSISTING,
        OperationState.SUCCEEDED,
    ]
    assert progress.last_active_state is OperationState.PERSISTING


def test_finished_operation_cannot_advance():
    progress = OperationProgress("update")
    progress.advance(OperationState.FAILED)

    with pytest.raises(RuntimeError):
        progress.advance(OperationState.PERSISTING)
