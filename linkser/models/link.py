"""Link model for a bookmarked URL and its labels."""

import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)


@dataclass
class Link:
    """Represents a bookmarked URL."""

    url: str = ""
    labels: List[str] = field(default_factory=list)  # Insertion order, no duplicates

    def has_label(self, label: str) -> bool:
        """Check if the link already carries a label."""
        return label in self.labels

    def to_dict(self) -> dict:
        """Convert the link to a JSON-serializable dict."""
        return {"url": self.url, "labels": list(self.labels)}

    @classmethod
    def from_dict(cls, data: dict) -> "Link":
        """Create a Link from a snapshot dict.

        Missing or mistyped fields fall back to their defaults, non-string
        labels are dropped and unknown keys are ignored.
        """
        url = data.get("url")
        labels = data.get("labels")
        if labels is None:
            labels = []
        elif not isinstance(labels, list):
            logger.warning(f"Ignoring labels of type {type(labels).__name__} for {url}")
            labels = []

        kept = [label for label in labels if isinstance(label, str)]
        if len(kept) != len(labels):
            logger.warning(f"Dropped {len(labels) - len(kept)} non-text labels for {url}")

        return cls(
            url=url if isinstance(url, str) else "",
            labels=kept,
        )
