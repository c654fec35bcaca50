from collections import deque
from dataclasses import dataclass

from seashell.config import HISTORY_LENGTH


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded command: its id and the raw line as typed (newline included)."""

    command_id: int
    text: str


class CommandHistory:
    """
    Bounded, most-recent-first ledger of entered commands.

    Ids come from a running counter that only ever grows, so an id keeps
    pointing at the same command until that command falls off the end.
    """

    def __init__(self, capacity=HISTORY_LENGTH):
        self._entries = deque(maxlen=capacity)
        self._count = 0

    @property
    def capacity(self):
        return self._entries.maxlen

    @property
    def count(self):
        """Total number of commands ever recorded."""
        return self._count

    def __len__(self):
        return len(self._entries)

    def record(self, text):
        """
        Add a command to the front of the ledger, dropping the oldest one if full.
        Returns: the id assigned to the command
        """
        self._count += 1
        self._entries.appendleft(HistoryEntry(self._count, text))
        return self._count

    def show(self):
        """Held entries, most recent first"""
        return list(self._entries)

    def lookup(self, command_id):
        """Return the entry with this id, or None if it is unknown or evicted"""
        for entry in self._entries:
            if entry.command_id == command_id:
                return entry
        return None
