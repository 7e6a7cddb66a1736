"""Unit tests for PointerCapture."""

from unittest.mock import Mock

import pytest

from board.controllers.pointer_capture import PointerCapture


class TestPointerCapture:
    def test_dispatch_without_owner(self, capture):
        assert capture.dispatch_move((1, 1)) is False
        assert capture.dispatch_up((1, 1)) is False
        assert capture.dispatch_cancel() is False

    def test_dispatch_to_owner(self, capture):
        owner = Mock()
        capture.acquire(owner)

        assert capture.dispatch_move((1, 2))
        assert capture.dispatch_up((3, 4))
        owner.on_pointer_move.assert_called_once_with((1, 2))
        owner.on_pointer_up.assert_called_once_with((3, 4))

    def test_second_owner_rejected(self, capture):
        capture.acquire(Mock())

        with pytest.raises(RuntimeError):
            capture.acquire(Mock())

    def test_reacquire_by_same_owner(self, capture):
        owner = Mock()
        capture.acquire(owner)
        capture.acquire(owner)

        assert capture.owner is owner

    def test_release_only_by_owner(self):
        capture = PointerCapture()
        owner = Mock()
        capture.acquire(owner)

        assert capture.release(Mock()) is False
        assert capture.active
        assert capture.release(owner) is True
        assert not capture.active
