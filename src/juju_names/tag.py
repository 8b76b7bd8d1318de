"""Tag base class and the canonical <kind>-<id> encoding

A Tag uniquely identifies a resource. ``id`` is the human-readable form;
``str(tag)`` is the machine-friendly form used on the wire and in file
paths. Use ``parse_tag`` to go from the wire form back to a Tag.
"""

from typing import ClassVar, Optional, Tuple

from .errors import InvalidTagError, TagFormatError
from .registry import check_kind


SEPARATOR = "-"


def split_tag(tag: str) -> Tuple[str, str]:
    """Split a tag string into (kind, suffix) at the first separator

    The suffix may itself contain separators; only the kind is unambiguous.
    """
    i = tag.find(SEPARATOR)
    if i <= 0:
        raise TagFormatError(tag)
    return tag[:i], tag[i + 1:]


class Tag:
    """A validated, immutable (kind, id) pair

    Subclasses set ``kind`` and supply ``is_valid``; kinds whose wire suffix
    differs from the id also override ``suffix_to_id``/``id_to_suffix``.
    Construction always validates, so no Tag can hold an invalid id.
    """

    __slots__ = ("_id",)

    kind: ClassVar[str] = ""

    def __init__(self, id: str):
        object.__setattr__(self, "_id", self._validate(id))

    @staticmethod
    def is_valid(id: str) -> bool:
        raise NotImplementedError

    @staticmethod
    def suffix_to_id(suffix: str) -> str:
        """Rewrite a wire suffix into an id (identity unless overridden)"""
        return suffix

    @staticmethod
    def id_to_suffix(id: str) -> str:
        """Rewrite an id into its wire suffix (identity unless overridden)"""
        return id

    @classmethod
    def _validate(cls, id: str) -> str:
        """Return the id to store, or raise InvalidTagError"""
        if not cls.is_valid(id):
            raise InvalidTagError(id, cls.kind)
        return id

    @classmethod
    def from_suffix(cls, tag: str, suffix: str) -> 'Tag':
        """Build a tag of this kind from the suffix of the raw string ``tag``

        Errors are reported against the raw string, not the rewritten id.
        """
        try:
            return cls(cls.suffix_to_id(suffix))
        except InvalidTagError as err:
            raise InvalidTagError(tag, cls.kind, err.cause) from err.cause

    @classmethod
    def from_string(cls, tag: str) -> 'Tag':
        """Parse a tag string that must be of exactly this kind"""
        kind, suffix = split_tag(tag)
        if kind != cls.kind:
            check_kind(kind, tag)
            raise InvalidTagError(tag, cls.kind)
        return cls.from_suffix(tag, suffix)

    @property
    def id(self) -> str:
        return self._id

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # Copies and unpickled tags are rebuilt through the validating constructor.
        return (type(self), (self._id,))

    def __str__(self) -> str:
        return self.kind + SEPARATOR + self.id_to_suffix(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((self.kind, self._id))


def tag_string(tag: Tag) -> str:
    """Canonical string form of a tag; round-trips with parse_tag"""
    return str(tag)


def readable_string(tag: Optional[Tag]) -> str:
    """Human-readable "<kind> <id>" form, or "" for no tag"""
    if tag is None:
        return ""
    return tag.kind + " " + tag.id
