"""Domain entity — a person pieces can be assigned to."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class User:
    """Core domain entity for an assignable user."""

    display_name: str
    login_name: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))

    def update(
        self,
        display_name: str | None = None,
        login_name: str | None = None,
    ) -> None:
        """Apply a partial update; ``None`` leaves the field untouched."""
        if display_name is not None:
            self.display_name = display_name
        if login_name is not None:
            self.login_name = login_name
