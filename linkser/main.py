"""Console entry point that prints the saved links."""

from .models.storage import get_storage
from .services.state_service import StateService


def truncate_string(s: str, max_len: int) -> str:
    """Truncate a string to max length, adding ... if needed."""
    if not s:
        return ""
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def format_link_line(url: str, labels, selected: bool, width: int = 60) -> str:
    """Format one link as a single summary line.

    Args:
        url: The link URL
        labels: Labels attached to the link
        selected: Whether this is the selected link
        width: Maximum width of the URL column

    Returns:
        Line like "* https://a.com  [news, tech]"
    """
    marker = "*" if selected else " "
    line = f"{marker} {truncate_string(url, width):<{width}}"
    if labels:
        line += f"  [{', '.join(labels)}]"
    return line.rstrip()


def main():
    """Print every saved link with its labels."""
    storage = get_storage()
    state = StateService(storage).load_state()

    print("=" * 60)
    print("Linkser - Saved Links")
    print("=" * 60)
    print(f"\nDatabase location: {storage.db_path}")

    if len(state.registry) == 0:
        print("\nNo links saved yet.")
        return 0

    print(f"\nLinks ({len(state.registry)}):\n")
    for link in state.registry:
        print(format_link_line(link.url, link.labels, link.url == state.selected))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
