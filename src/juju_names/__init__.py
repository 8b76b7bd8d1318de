"""juju-names - Canonical tags for named resources

Each resource kind (machine, unit, user, ...) has a tag with a
human-readable id and a machine-friendly ``<kind>-<id>`` string form.
"""

import logging

from .errors import (
    TagError,
    TagFormatError,
    UnsupportedKindError,
    InvalidTagError,
)
from .registry import (
    KINDS,
    check_kind,
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
)
from .tag import Tag, split_tag, tag_string, readable_string
from .kinds import (
    TAG_TYPES,
    LOCAL_USER_DOMAIN,
    UnitTag,
    MachineTag,
    ServiceTag,
    UserTag,
    ModelTag,
    EnvironTag,
    RelationTag,
    NetworkTag,
    ActionTag,
    VolumeTag,
    CharmTag,
    StorageTag,
    FilesystemTag,
    IPAddressTag,
    SubnetTag,
    SpaceTag,
    PayloadTag,
    is_valid_unit,
    is_valid_machine,
    is_container_machine,
    is_valid_service,
    is_valid_user,
    is_valid_user_name,
    is_valid_model,
    is_valid_environment,
    is_valid_relation,
    is_valid_network,
    is_valid_action,
    is_valid_volume,
    is_valid_filesystem,
    is_valid_charm,
    is_valid_storage,
    is_valid_subnet,
    is_valid_space,
    is_valid_payload,
    unit_service,
    storage_name,
    new_local_user_tag,
)
from .parse import parse_tag, tag_kind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "TagError",
    "TagFormatError",
    "UnsupportedKindError",
    "InvalidTagError",
    "KINDS",
    "check_kind",
    "UNIT_TAG_KIND",
    "MACHINE_TAG_KIND",
    "SERVICE_TAG_KIND",
    "USER_TAG_KIND",
    "MODEL_TAG_KIND",
    "ENVIRON_TAG_KIND",
    "RELATION_TAG_KIND",
    "NETWORK_TAG_KIND",
    "ACTION_TAG_KIND",
    "VOLUME_TAG_KIND",
    "CHARM_TAG_KIND",
    "STORAGE_TAG_KIND",
    "FILESYSTEM_TAG_KIND",
    "IPADDRESS_TAG_KIND",
    "SUBNET_TAG_KIND",
    "SPACE_TAG_KIND",
    "PAYLOAD_TAG_KIND",
    "Tag",
    "split_tag",
    "tag_string",
    "readable_string",
    "parse_tag",
    "tag_kind",
    "TAG_TYPES",
    "LOCAL_USER_DOMAIN",
    "UnitTag",
    "MachineTag",
    "ServiceTag",
    "UserTag",
    "ModelTag",
    "EnvironTag",
    "RelationTag",
    "NetworkTag",
    "ActionTag",
    "VolumeTag",
    "CharmTag",
    "StorageTag",
    "FilesystemTag",
    "IPAddressTag",
    "SubnetTag",
    "SpaceTag",
    "PayloadTag",
    "is_valid_unit",
    "is_valid_machine",
    "is_container_machine",
    "is_valid_service",
    "is_valid_user",
    "is_valid_user_name",
    "is_valid_model",
    "is_valid_environment",
    "is_valid_relation",
    "is_valid_network",
    "is_valid_action",
    "is_valid_volume",
    "is_valid_filesystem",
    "is_valid_charm",
    "is_valid_storage",
    "is_valid_subnet",
    "is_valid_space",
    "is_valid_payload",
    "unit_service",
    "storage_name",
    "new_local_user_tag",
]
