"""Closed set of tag kinds

Kinds are fixed at import time; there is no runtime registration.
"""

from typing import FrozenSet

from .errors import UnsupportedKindError


UNIT_TAG_KIND = "unit"
MACHINE_TAG_KIND = "machine"
SERVICE_TAG_KIND = "service"
USER_TAG_KIND = "user"
MODEL_TAG_KIND = "model"
ENVIRON_TAG_KIND = "environment"
RELATION_TAG_KIND = "relation"
NETWORK_TAG_KIND = "network"
ACTION_TAG_KIND = "action"
VOLUME_TAG_KIND = "volume"
CHARM_TAG_KIND = "charm"
STORAGE_TAG_KIND = "storage"
FILESYSTEM_TAG_KIND = "filesystem"
IPADDRESS_TAG_KIND = "ipaddress"
SUBNET_TAG_KIND = "subnet"
SPACE_TAG_KIND = "space"
PAYLOAD_TAG_KIND = "payload"

# No kind name may contain "-": the first hyphen is always the kind/id boundary.
KINDS: FrozenSet[str] = frozenset({
    UNIT_TAG_KIND,
    MACHINE_TAG_KIND,
    SERVICE_TAG_KIND,
    USER_TAG_KIND,
    MODEL_TAG_KIND,
    ENVIRON_TAG_KIND,
    RELATION_TAG_KIND,
    NETWORK_TAG_KIND,
    ACTION_TAG_KIND,
    VOLUME_TAG_KIND,
    CHARM_TAG_KIND,
    STORAGE_TAG_KIND,
    FILESYSTEM_TAG_KIND,
    IPADDRESS_TAG_KIND,
    SUBNET_TAG_KIND,
    SPACE_TAG_KIND,
    PAYLOAD_TAG_KIND,
})


def check_kind(kind: str, tag: str = "") -> None:
    """Raise UnsupportedKindError unless kind is one of KINDS

    ``tag`` is the raw string the kind came from, if any; it is carried on
    the error for reporting.
    """
    if kind not in KINDS:
        raise UnsupportedKindError(kind, tag)
