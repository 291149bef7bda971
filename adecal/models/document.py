"""Calendar document model: header, event blocks and footer."""

from pydantic import BaseModel


class CalendarDocument(BaseModel):
    """A calendar document split into its three textual parts.

    Events are kept as the literal text of each VEVENT block (markers
    included) so that the document can be reassembled byte for byte.
    """

    header: str = ""
    events: list[str] = []
    footer: str = ""

    @property
    def event_count(self) -> int:
        return len(self.events)

    def render(self) -> str:
        """Reassemble header, events and footer into document text."""
        return self.header + "\n".join(self.events) + self.footer
