"""Domain entity — a named state a piece can be in."""

from dataclasses import dataclass, field
from uuid import uuid4

FINALIZED_MARKER = "final"


def is_finalized_status_name(name: str | None, marker: str = FINALIZED_MARKER) -> bool:
    """Return True when *name* marks a terminal state.

    There is no stored flag: a status counts as finalized when its name
    contains *marker*, compared case-insensitively ("Finalizado", "pre-final"
    and "FINAL" all qualify).
    """
    if not name or not marker:
        return False
    return marker.casefold() in name.casefold()


@dataclass
class Status:
    """Core domain entity for a piece status. Statuses are append-only."""

    name: str
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def is_finalized(self) -> bool:
        return is_finalized_status_name(self.name)
