"""Dispatch from the wire form <kind>-<id> to a typed Tag"""

import logging

from .errors import TagError
from .kinds import TAG_TYPES
from .registry import check_kind
from .tag import Tag, split_tag

logger = logging.getLogger(__name__)


def tag_kind(tag: str) -> str:
    """Return the kind of a tag string without validating its id

    Raises TagFormatError or UnsupportedKindError.
    """
    try:
        kind, _ = split_tag(tag)
        check_kind(kind, tag)
    except TagError as e:
        logger.debug("Cannot classify tag %r: %s", tag, e)
        raise
    return kind


def parse_tag(tag: str) -> Tag:
    """Parse a tag string into the Tag subclass for its kind

    Errors, checked in this order:
    - TagFormatError: no "-" separator, or an empty kind
    - UnsupportedKindError: kind is not one of the registered kinds
    - InvalidTagError: the id does not satisfy the kind's grammar
    """
    try:
        kind, suffix = split_tag(tag)
        check_kind(kind, tag)
        return TAG_TYPES[kind].from_suffix(tag, suffix)
    except TagError as e:
        logger.debug("Rejected tag %r: %s", tag, e)
        raise
