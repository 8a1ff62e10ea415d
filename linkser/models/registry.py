"""In-memory registry of links keyed by URL."""

import logging
from typing import Dict, Iterator, List, Optional

from .errors import (
    DuplicateLabelError,
    EmptyInputError,
    LinkExistsError,
    LinkNotFoundError,
)
from .link import Link

logger = logging.getLogger(__name__)


class LinkRegistry:
    """Holds all links and the currently selected URL.

    Every mutating method either applies fully or raises a LinkError
    before touching any state.
    """

    def __init__(self):
        self.links: Dict[str, Link] = {}
        self.selected: Optional[str] = None

    def __len__(self) -> int:
        return len(self.links)

    def __contains__(self, url: str) -> bool:
        return url in self.links

    def __iter__(self) -> Iterator[Link]:
        return iter(list(self.links.values()))

    def __eq__(self, other) -> bool:
        if not isinstance(other, LinkRegistry):
            return NotImplemented
        return self.links == other.links and self.selected == other.selected

    def add_link(self, raw: str) -> Link:
        """Add a new link with no labels.

        Args:
            raw: URL text as typed, surrounding whitespace is stripped

        Returns:
            The newly created Link

        Raises:
            EmptyInputError: if the trimmed URL is empty
            LinkExistsError: if the URL is already registered
        """
        url = raw.strip()
        if not url:
            raise EmptyInputError("Link")
        if url in self.links:
            raise LinkExistsError(url)

        link = Link(url=url)
        self.links[url] = link
        logger.debug(f"Added link {url}")
        return link

    def add_label(self, url: str, raw: str) -> Link:
        """Append a label to an existing link.

        Raises:
            LinkNotFoundError: if url is not registered
            EmptyInputError: if the trimmed label is empty
            DuplicateLabelError: if the link already has the label
        """
        link = self.links.get(url)
        if link is None:
            raise LinkNotFoundError(url)

        label = raw.strip()
        if not label:
            raise EmptyInputError("Label")
        if link.has_label(label):
            raise DuplicateLabelError(url, label)

        link.labels.append(label)
        logger.debug(f"Added label '{label}' to {url}")
        return link

    def delete_link(self, url: str) -> Link:
        """Remove a link, clearing the selection if it pointed at it."""
        if url not in self.links:
            raise LinkNotFoundError(url)

        link = self.links.pop(url)
        if self.selected == url:
            self.selected = None
        logger.debug(f"Deleted link {url}")
        return link

    def select(self, url: Optional[str]) -> None:
        """Set the selection, or clear it with None."""
        if url is not None and url not in self.links:
            raise LinkNotFoundError(url)
        self.selected = url

    def get(self, url: str) -> Optional[Link]:
        """Look up a link by URL."""
        return self.links.get(url)

    def selected_link(self) -> Optional[Link]:
        """Get the currently selected link, if any."""
        if self.selected is None:
            return None
        return self.links.get(self.selected)

    def urls(self) -> List[str]:
        """Get all registered URLs in display order."""
        return list(self.links.keys())

    def to_dict(self) -> Dict[str, dict]:
        """Convert the links to a map of url -> link dict."""
        return {url: link.to_dict() for url, link in self.links.items()}

    @classmethod
    def from_dict(
        cls, data: Optional[dict], selected: Optional[str] = None
    ) -> "LinkRegistry":
        """Rebuild a registry from a map of url -> link dict.

        Entries with a blank key are skipped and each link is keyed by its
        map key. A selection naming a missing key is dropped.
        """
        registry = cls()

        for key, value in (data or {}).items():
            url = str(key).strip()
            if not url:
                logger.warning("Skipping stored link with empty URL")
                continue
            link = Link.from_dict(value if isinstance(value, dict) else {})
            link.url = url
            # Stored label lists may predate de-duplication
            link.labels = list(dict.fromkeys(
                label.strip() for label in link.labels if label.strip()
            ))
            registry.links[url] = link

        if selected is not None and selected in registry.links:
            registry.selected = selected
        elif selected is not None:
            logger.warning(f"Dropping selection of missing link {selected}")

        return registry
