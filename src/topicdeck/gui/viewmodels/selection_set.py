"""Set of topic names ticked in the list, independent of the rendered page."""

from __future__ import annotations

from typing import Iterator, Tuple

from topicdeck.gui.viewmodels.signal import Signal


class SelectionSet:
    """Names of the rows ticked in the list.

    Membership is by name only and survives list refreshes: a selected
    topic that drops off the current page stays selected until cleared.
    """

    def __init__(self) -> None:
        # dict keeps insertion order for stable snapshots
        self._names: dict[str, None] = {}
        self.changed = Signal()  # emits (names: tuple)

    def toggle(self, name: str) -> bool:
        """Flip membership of *name*; returns whether it is now selected."""
        if name in self._names:
            del self._names[name]
            selected = False
        else:
            self._names[name] = None
            selected = True
        self.changed.emit(self.snapshot())
        return selected

    def clear(self) -> None:
        had_names = bool(self._names)
        self._names.clear()
        if had_names:
            self.changed.emit(())

    def has(self, name: str) -> bool:
        return name in self._names

    def size(self) -> int:
        return len(self._names)

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())
