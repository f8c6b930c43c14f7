"""Live collection of pills.

The store owns id assignment. Ids come from a counter that only ever moves
forward, so a split retires the parent's id for good and every piece gets a
fresh one. The counter restarts only when reset() begins a new editing session.
"""

import dataclasses
from collections.abc import Iterable, Iterator
from typing import Any

from pillsplitter.config import GeometryConfig
from pillsplitter.domain import Pill, PillDraft
from pillsplitter.exceptions import PillNotFoundError, PillPatchError

PATCHABLE_FIELDS = frozenset({"x", "y", "width", "height", "color", "corner_radii"})


class PillStore:
    """Ordered pill collection with store-owned id minting.

    Order only matters for stacking when rendering: later pills are drawn on top.
    """

    def __init__(self, config: GeometryConfig | None = None, first_id: int = 1) -> None:
        self.config = config or GeometryConfig()
        self._first_id = first_id
        self._next_id = first_id
        self._pills: list[Pill] = []

    @property
    def pills(self) -> tuple[Pill, ...]:
        """Read-only snapshot of the pills in stacking order."""
        return tuple(self._pills)

    @property
    def next_id(self) -> int:
        """Id the next minted pill will receive."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._pills)

    def __iter__(self) -> Iterator[Pill]:
        return iter(self.pills)

    def __contains__(self, pill_id: object) -> bool:
        return any(p.id == pill_id for p in self._pills)

    def _mint(self, draft: PillDraft) -> Pill:
        pill = Pill.from_draft(self._next_id, draft)
        self._next_id += 1
        return pill

    def _index_of(self, pill_id: int) -> int:
        for i, pill in enumerate(self._pills):
            if pill.id == pill_id:
                return i
        raise PillNotFoundError(pill_id)

    def get(self, pill_id: int) -> Pill | None:
        """Look up a pill by id, None if it is not in the store."""
        for pill in self._pills:
            if pill.id == pill_id:
                return pill
        return None

    def create(self, draft: PillDraft) -> Pill | None:
        """Add a drawn pill if it is large enough.

        Args:
            draft: Box produced by a draw gesture

        Returns:
            The new pill, or None if either side is below min_pill
        """
        if draft.width < self.config.min_pill or draft.height < self.config.min_pill:
            return None
        return self.add(draft)

    def add(self, draft: PillDraft) -> Pill:
        """Add a pill without the drawing size gate.

        Used to seed a canvas from a script or a test fixture.
        """
        pill = self._mint(draft)
        self._pills.append(pill)
        return pill

    def replace(self, old_id: int, drafts: Iterable[PillDraft]) -> list[Pill]:
        """Swap one pill for new pills.

        The old pill is removed and the new ones are appended in the given
        order, each with a freshly minted id. Untouched pills keep their
        relative order.

        Args:
            old_id: Id of the pill to retire
            drafts: Replacement pieces

        Returns:
            The new pills

        Raises:
            PillNotFoundError: If old_id is not in the store
        """
        index = self._index_of(old_id)
        new_pills = [self._mint(d) for d in drafts]
        del self._pills[index]
        self._pills.extend(new_pills)
        return new_pills

    def mutate(self, pill_id: int, patch: dict[str, Any]) -> Pill:
        """Update a pill in place, keeping its id and stacking position.

        Args:
            pill_id: Id of the pill to update
            patch: Field values to change

        Returns:
            The updated pill

        Raises:
            PillNotFoundError: If pill_id is not in the store
            PillPatchError: If the patch names a field that cannot change
        """
        bad = [name for name in patch if name not in PATCHABLE_FIELDS]
        if bad:
            raise PillPatchError(pill_id, bad)
        index = self._index_of(pill_id)
        updated = dataclasses.replace(self._pills[index], **patch)
        self._pills[index] = updated
        return updated

    def remove(self, pill_id: int) -> Pill:
        """Remove a pill; its id is not reused."""
        index = self._index_of(pill_id)
        return self._pills.pop(index)

    def reset(self) -> None:
        """Start a new editing session: drop all pills and restart ids."""
        self._pills.clear()
        self._next_id = self._first_id
