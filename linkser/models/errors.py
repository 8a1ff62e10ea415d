"""Errors raised by the link registry."""

from typing import Optional


class LinkError(Exception):
    """Base class for rejected registry operations."""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class EmptyInputError(LinkError):
    """The trimmed input has zero length."""

    def __init__(self, what: str = "Input"):
        super().__init__(f"{what} cannot be empty", value="")


class LinkExistsError(LinkError):
    """A link with the same URL is already in the registry."""

    def __init__(self, url: str):
        super().__init__(f"Link already in list: {url}", value=url)


class DuplicateLabelError(LinkError):
    """The label is already attached to the link."""

    def __init__(self, url: str, label: str):
        super().__init__(f"Label '{label}' already on {url}", value=label)
        self.url = url


class LinkNotFoundError(LinkError):
    """The referenced URL is not in the registry."""

    def __init__(self, url: Optional[str]):
        if url is None:
            message = "No link selected"
        else:
            message = f"Link not found: {url}"
        super().__init__(message, value=url)
