"""Top-level application state owned by the main window."""

from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import LinkNotFoundError
from .link import Link
from .registry import LinkRegistry


@dataclass
class AppState:
    """Represents everything the window shows and persists."""

    link_input: str = ""
    label_input: str = ""
    registry: LinkRegistry = field(default_factory=LinkRegistry)

    @property
    def selected(self) -> Optional[str]:
        return self.registry.selected

    def submit_link(self) -> Link:
        """Add the pending URL text as a new link.

        The URL buffer is cleared only when the link was added; a rejected
        attempt keeps the text so it can be corrected.
        """
        link = self.registry.add_link(self.link_input)
        self.link_input = ""
        return link

    def submit_label(self) -> Link:
        """Add the pending label text to the selected link."""
        if self.registry.selected is None:
            raise LinkNotFoundError(None)
        link = self.registry.add_label(self.registry.selected, self.label_input)
        self.label_input = ""
        return link

    def delete_selected(self) -> Link:
        """Delete the selected link and clear the selection."""
        if self.registry.selected is None:
            raise LinkNotFoundError(None)
        return self.registry.delete_link(self.registry.selected)

    def to_snapshot(self) -> dict:
        """Convert the whole state to a JSON-serializable dict."""
        return {
            "link_input": self.link_input,
            "label_input": self.label_input,
            "links": self.registry.to_dict(),
            "selected": self.registry.selected,
        }

    @classmethod
    def from_snapshot(cls, data: Any) -> "AppState":
        """Create an AppState from a snapshot dict.

        Unknown fields are ignored and missing ones get their defaults, so
        snapshots written by older or newer versions still load.
        """
        if not isinstance(data, dict):
            return cls()

        links = data.get("links")
        selected = data.get("selected")
        link_input = data.get("link_input")
        label_input = data.get("label_input")
        return cls(
            link_input=link_input if isinstance(link_input, str) else "",
            label_input=label_input if isinstance(label_input, str) else "",
            registry=LinkRegistry.from_dict(
                links if isinstance(links, dict) else None,
                selected=selected if isinstance(selected, str) else None,
            ),
        )
