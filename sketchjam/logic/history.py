"""
History Manager for Undo/Redo

Implements the Command Pattern:
- Each entry stores a 'before' and 'after' snapshot of the canvas elements
- Undo applies the 'before' side, redo applies the 'after' side
- Maintains undo and redo stacks
- Limits history to prevent memory overflow

"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Optional, Tuple

from sketchjam.config import MAX_HISTORY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One undoable action. Snapshots are tuples of element copies."""
    label: str
    before: Tuple
    after: Tuple


class HistoryManager:
    """Manages undo/redo history using the Command Pattern"""

    def __init__(self, limit: int = MAX_HISTORY):
        """
        Initialize history manager

        Args:
            limit: Maximum number of entries across both stacks (default 20)
                Older entries are automatically removed to save memory
        """
        if limit < 1:
            raise ValueError(f"history limit must be at least 1, got {limit}")
        self.limit = limit
        self.undo_stack = deque(maxlen=limit)  # Full deque drops from the left (oldest)
        self.redo_stack = deque(maxlen=limit)

    def record(self, entry: HistoryEntry):
        self.undo_stack.append(entry)
        self.redo_stack.clear()  # New action = can't redo old futures!
        logger.debug("History saved: %s (stack size %d)", entry.label, len(self.undo_stack))

    def undo(self, canvas) -> Optional[HistoryEntry]:
        """
        Undo last action

        Args:
            canvas: Anything with apply_inverse(entry)

        Returns:
            HistoryEntry: The reverted entry, or None if nothing to undo
        """
        if not self.undo_stack:
            logger.info("Nothing to undo.")
            return None

        entry = self.undo_stack.pop()
        canvas.apply_inverse(entry)
        self.redo_stack.append(entry)
        logger.debug("Undid: %s", entry.label)
        return entry

    def redo(self, canvas) -> Optional[HistoryEntry]:
        """
        Redo last undone action

        Args:
            canvas: Anything with apply_forward(entry)

        Returns:
            HistoryEntry: The re-applied entry, or None if nothing to redo
        """
        if not self.redo_stack:
            logger.info("Nothing to redo.")
            return None

        entry = self.redo_stack.pop()
        canvas.apply_forward(entry)
        self.undo_stack.append(entry)
        logger.debug("Redid: %s", entry.label)
        return entry

    def clear(self):
        self.undo_stack.clear()
        self.redo_stack.clear()

    def can_undo(self) -> bool:
        """Check if undo is available"""
        return len(self.undo_stack) > 0

    def can_redo(self) -> bool:
        """Check if redo is available"""
        return len(self.redo_stack) > 0

    def get_stats(self) -> dict:
        """
        Get statistics about history usage

        Returns:
            dict: Undo/redo counts and whether the undo stack is full
        """
        return {
            'undo_count': len(self.undo_stack),
            'redo_count': len(self.redo_stack),
            'limit': self.limit,
            'undo_full': len(self.undo_stack) >= self.limit
        }
