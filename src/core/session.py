"""In-memory state of one REPL run.

Mutations happen only through the methods below, and only with fully decoded
responses, so a failed request never leaves a half-updated session.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.domain.models import CreatureRecord, LocationAreaPage


@dataclass
class Session:
    """Pagination cursors plus the caught-creature collection."""

    next_url: str | None = None
    previous_url: str | None = None
    caught: dict[str, CreatureRecord] = field(default_factory=dict)

    def apply_page(self, page: LocationAreaPage) -> None:
        # Empty strings mean "no page in that direction", same as null.
        self.next_url = page.next or None
        self.previous_url = page.previous or None

    def record_catch(self, record: CreatureRecord) -> None:
        self.caught[record.name] = record

    def lookup(self, name: str) -> CreatureRecord | None:
        return self.caught.get(name)

    def caught_names(self) -> list[str]:
        return list(self.caught)
