"""Error types raised while parsing or constructing tags

Every error keeps the offending raw string on ``.tag`` so callers can branch
on the error class instead of matching message text.
"""

from typing import Optional


TAG_FORMAT = '"<kind>-<id>"'


class TagError(ValueError):
    """Base exception for tag errors"""

    def __init__(self, tag: str, message: str):
        self.tag = tag
        super().__init__(message)


class TagFormatError(TagError):
    """Tag string is not in the <kind>-<id> shape (no separator or empty kind)"""

    def __init__(self, tag: str):
        super().__init__(tag, f"tags must be in the {TAG_FORMAT} format, got {_quote(tag)}")


class UnsupportedKindError(TagError):
    """Tag string is well formed but names a kind outside the registry"""

    def __init__(self, kind: str, tag: str = ""):
        self.kind = kind
        message = f"unsupported tag kind {_quote(kind)}"
        if tag:
            message = f"{_quote(tag)} is not a valid tag: {message}"
        super().__init__(tag, message)


class InvalidTagError(TagError):
    """Kind is known but the id does not satisfy that kind's grammar

    ``cause`` holds the grammar-specific failure (e.g. a malformed UUID)
    when there is one.
    """

    def __init__(self, tag: str, kind: str = "", cause: Optional[Exception] = None):
        self.kind = kind
        self.cause = cause
        if kind:
            message = f"{_quote(tag)} is not a valid {kind} tag"
        else:
            message = f"{_quote(tag)} is not a valid tag"
        if cause is not None:
            message += f": {cause}"
        super().__init__(tag, message)


def _quote(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'
