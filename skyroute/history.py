"""Append-only action history viewed newest first.

Records a short description of each completed query so a front end can show
what happened during the session. Entries are never edited or removed one at a
time; the only destructive operation is ``clear()``.
"""

from typing import Iterator, List


class ActionHistory:
    """Session-scoped log of completed queries.

    Growth is unbounded; entries are short and live only as long as the session.
    Not thread safe: a concurrent front end must guard calls with a lock.
    """

    def __init__(self) -> None:
        self._entries: List[str] = []

    def append(self, text: str) -> None:
        self._entries.append(text)

    def list_newest_first(self) -> Iterator[str]:
        """Yield entries in reverse insertion order without consuming them.

        Each call returns a fresh iterator, so the view can be walked any number
        of times.
        """
        return reversed(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
