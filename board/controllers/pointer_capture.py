"""
Pitch Board - Pointer Capture

While a gesture is in progress, every pointer move/release/cancel in the
window goes to the gesture's owner, no matter which zone the pointer is
over. The owner acquires the capture when the gesture starts and must
release it on every exit path.
"""

from typing import Optional, Protocol


class PointerListener(Protocol):
    """Receives pointer events for the length of one gesture."""

    def on_pointer_move(self, pos: tuple[int, int]) -> None: ...

    def on_pointer_up(self, pos: tuple[int, int]) -> None: ...

    def on_pointer_cancel(self) -> None: ...


class PointerCapture:
    """Window-wide routing slot for a single active gesture."""

    def __init__(self):
        self.owner: Optional[PointerListener] = None

    @property
    def active(self) -> bool:
        return self.owner is not None

    def acquire(self, owner: PointerListener):
        """Start routing pointer events to owner."""
        if self.owner is not None and self.owner is not owner:
            raise RuntimeError("Pointer already captured by another gesture")
        self.owner = owner

    def release(self, owner: PointerListener) -> bool:
        """Stop routing to owner. Releasing a capture you don't hold is a no-op."""
        if self.owner is owner:
            self.owner = None
            return True
        return False

    def dispatch_move(self, pos: tuple[int, int]) -> bool:
        if self.owner is None:
            return False
        self.owner.on_pointer_move(pos)
        return True

    def dispatch_up(self, pos: tuple[int, int]) -> bool:
        if self.owner is None:
            return False
        self.owner.on_pointer_up(pos)
        return True

    def dispatch_cancel(self) -> bool:
        if self.owner is None:
            return False
        self.owner.on_pointer_cancel()
        return True
