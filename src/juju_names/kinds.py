"""Concrete tag kinds

One Tag subclass per kind, each carrying its own id grammar and, where the
wire suffix differs from the id, its suffix rewrite. ``TAG_TYPES`` maps
every kind string to its class.
"""

import ipaddress
import re
import uuid
from types import MappingProxyType
from typing import List, Mapping, Optional, Type

from .errors import InvalidTagError
from .registry import (
    ACTION_TAG_KIND,
    CHARM_TAG_KIND,
    ENVIRON_TAG_KIND,
    FILESYSTEM_TAG_KIND,
    IPADDRESS_TAG_KIND,
    MACHINE_TAG_KIND,
    MODEL_TAG_KIND,
    NETWORK_TAG_KIND,
    PAYLOAD_TAG_KIND,
    RELATION_TAG_KIND,
    SERVICE_TAG_KIND,
    SPACE_TAG_KIND,
    STORAGE_TAG_KIND,
    SUBNET_TAG_KIND,
    UNIT_TAG_KIND,
    USER_TAG_KIND,
    VOLUME_TAG_KIND,
)
from .tag import Tag


NUMBER_SNIPPET = r"(?:0|[1-9][0-9]*)"
SERVICE_SNIPPET = r"(?:[a-z][a-z0-9]*(?:-[a-z0-9]*[a-z][a-z0-9]*)*)"
CONTAINER_TYPE_SNIPPET = r"[a-z]+"
CONTAINER_SNIPPET = "/" + CONTAINER_TYPE_SNIPPET + "/" + NUMBER_SNIPPET
MACHINE_SNIPPET = NUMBER_SNIPPET + "(?:" + CONTAINER_SNIPPET + ")*"
UNIT_SNIPPET = SERVICE_SNIPPET + "/" + NUMBER_SNIPPET
RELATION_SNIPPET = r"[a-z][a-z0-9]*(?:[_-][a-z0-9]+)*"
ENDPOINT_SNIPPET = SERVICE_SNIPPET + ":" + RELATION_SNIPPET
NETWORK_SNIPPET = r"[a-zA-Z0-9_-]+"
SPACE_SNIPPET = r"[a-z0-9]+(?:-[a-z0-9]+)*"
STORAGE_NAME_SNIPPET = SERVICE_SNIPPET
USER_PART_SNIPPET = r"[a-zA-Z0-9][a-zA-Z0-9.+-]*[a-zA-Z0-9]"
UUID_SNIPPET = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"

SERIES_SNIPPET = r"[a-z]+(?:[a-z0-9]+)?"
CHARM_NAME_SNIPPET = r"[a-z][a-z0-9]*(?:-[a-z0-9]*[a-z][a-z0-9]*)*"
_CHARM_REVISION = r"(?:-1|0|[1-9][0-9]*)"
_CHARM_USER = r"~" + USER_PART_SNIPPET + "/"

LOCAL_USER_DOMAIN = "local"

_valid_machine = re.compile("^" + MACHINE_SNIPPET + "$")
_valid_container = re.compile("^" + MACHINE_SNIPPET + CONTAINER_SNIPPET + "$")
_valid_service = re.compile("^" + SERVICE_SNIPPET + "$")
_valid_unit = re.compile("^(" + SERVICE_SNIPPET + ")/(" + NUMBER_SNIPPET + ")$")
_valid_relation = re.compile("^" + ENDPOINT_SNIPPET + "(?: " + ENDPOINT_SNIPPET + ")?$")
_valid_network = re.compile("^" + NETWORK_SNIPPET + "$")
_valid_space = re.compile("^" + SPACE_SNIPPET + "$")
_valid_storage = re.compile("^(" + STORAGE_NAME_SNIPPET + ")/" + NUMBER_SNIPPET + "$")
_valid_volume = re.compile("^(?:(" + MACHINE_SNIPPET + ")/)?" + NUMBER_SNIPPET + "$")
_valid_user = re.compile(
    "^(?P<name>" + USER_PART_SNIPPET + ")(?:@(?P<domain>" + USER_PART_SNIPPET + "))?$"
)
_valid_user_name = re.compile("^" + USER_PART_SNIPPET + "$")
_valid_uuid = re.compile("^" + UUID_SNIPPET + "$")

# Old-style charm store URLs: [schema:][~user/][series/]name[-revision]
_valid_v1_charm = re.compile(
    "^(?:local:|cs:(?:" + _CHARM_USER + ")?)?"
    "(?:" + SERIES_SNIPPET + "/)?"
    + CHARM_NAME_SNIPPET
    + "(?:-" + _CHARM_REVISION + ")?$"
)
# New-style: [schema:][~user/]name[/series][/revision]
_valid_v3_charm = re.compile(
    "^(?:local:|(?:cs:)?(?:" + _CHARM_USER + ")?)"
    + CHARM_NAME_SNIPPET
    + "(?:/" + SERIES_SNIPPET + ")?"
    + "(?:/" + _CHARM_REVISION + ")?$"
)


def is_valid_uuid_string(s: str) -> bool:
    """Whether s is a UUID in canonical lowercase hyphenated form"""
    return bool(_valid_uuid.match(s))


def uuid_from_string(s: str) -> uuid.UUID:
    """Parse a UUID string in canonical lowercase hyphenated form

    Raises ValueError for anything else, including the braced, urn: and
    unhyphenated forms that uuid.UUID would otherwise accept.
    """
    if not is_valid_uuid_string(s):
        raise ValueError(f"invalid UUID: {s!r}")
    return uuid.UUID(s)


def _last_separator_to_slash(s: str) -> str:
    i = s.rfind("-")
    if i <= 0:
        return s
    return s[:i] + "/" + s[i + 1:]


def _separators_to_slash(s: str) -> str:
    return s.replace("-", "/")


def _slashes_to_separator(s: str) -> str:
    return s.replace("/", "-")


class _UUIDTag(Tag):
    """Tag whose id is a canonical lowercase UUID"""

    __slots__ = ()

    @staticmethod
    def is_valid(id: str) -> bool:
        return is_valid_uuid_string(id)

    @classmethod
    def _validate(cls, id: str) -> str:
        try:
            return str(uuid_from_string(id))
        except ValueError as err:
            raise InvalidTagError(id, cls.kind, err) from err


class MachineTag(Tag):
    """Machine ids are "0", "1/lxc/0", ...; slashes become hyphens on the wire"""

    __slots__ = ()
    kind = MACHINE_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_machine.match(id))

    suffix_to_id = staticmethod(_separators_to_slash)
    id_to_suffix = staticmethod(_slashes_to_separator)

    def child_id(self) -> str:
        """Last number in the id: the machine's index within its parent"""
        return self.id.rsplit("/", 1)[-1]

    def container_type(self) -> str:
        """Container type ("lxc", "kvm", ...) or "" for a top-level machine"""
        parts = self.id.split("/")
        if len(parts) < 3:
            return ""
        return parts[-2]

    def parent_tag(self) -> Optional['MachineTag']:
        parts = self.id.split("/")
        if len(parts) < 3:
            return None
        return MachineTag("/".join(parts[:-2]))


class UnitTag(Tag):
    __slots__ = ()
    kind = UNIT_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_unit.match(id))

    suffix_to_id = staticmethod(_last_separator_to_slash)
    id_to_suffix = staticmethod(_slashes_to_separator)

    def service_name(self) -> str:
        return self.id.rsplit("/", 1)[0]

    def number(self) -> int:
        return int(self.id.rsplit("/", 1)[1])

    def service_tag(self) -> 'ServiceTag':
        return ServiceTag(self.service_name())


class ServiceTag(Tag):
    __slots__ = ()
    kind = SERVICE_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_service.match(id))


class UserTag(Tag):
    """User ids are "name" or "name@domain"

    A missing domain and the "local" domain both denote a local user.
    """

    __slots__ = ()
    kind = USER_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_user.match(id))

    def name(self) -> str:
        return _valid_user.match(self.id).group("name")

    def domain(self) -> str:
        return _valid_user.match(self.id).group("domain") or ""

    def is_local(self) -> bool:
        return self.domain() in ("", LOCAL_USER_DOMAIN)

    def canonical(self) -> str:
        """Id with the domain made explicit, e.g. "bob@local" """
        return self.name() + "@" + (self.domain() or LOCAL_USER_DOMAIN)

    def with_domain(self, domain: str) -> 'UserTag':
        if not domain:
            return UserTag(self.name())
        return UserTag(self.name() + "@" + domain)


class ModelTag(Tag):
    # Stored exactly as given; only the canonical lowercase form is valid.
    __slots__ = ()
    kind = MODEL_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return is_valid_uuid_string(id)


class EnvironTag(ModelTag):
    """Legacy name for a model tag, kept so old "environment-" strings parse"""

    __slots__ = ()
    kind = ENVIRON_TAG_KIND


class RelationTag(Tag):
    """Relation ids are one or two "service:relation" endpoints

    On the wire ":" is written as "." and the space between endpoints as "#".
    """

    __slots__ = ()
    kind = RELATION_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_relation.match(id))

    @staticmethod
    def suffix_to_id(suffix: str) -> str:
        return suffix.replace(".", ":").replace("#", " ")

    @staticmethod
    def id_to_suffix(id: str) -> str:
        return id.replace(":", ".").replace(" ", "#")

    def endpoints(self) -> List[str]:
        return self.id.split(" ")

    def is_peer(self) -> bool:
        return len(self.endpoints()) == 1


class NetworkTag(Tag):
    __slots__ = ()
    kind = NETWORK_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_network.match(id))


class ActionTag(_UUIDTag):
    __slots__ = ()
    kind = ACTION_TAG_KIND


class VolumeTag(Tag):
    """Volume ids are "<n>" or machine-scoped "<machine>/<n>" """

    __slots__ = ()
    kind = VOLUME_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_volume.match(id))

    suffix_to_id = staticmethod(_separators_to_slash)
    id_to_suffix = staticmethod(_slashes_to_separator)

    def machine_tag(self) -> Optional[MachineTag]:
        machine = _valid_volume.match(self.id).group(1)
        if machine is None:
            return None
        return MachineTag(machine)


class FilesystemTag(VolumeTag):
    __slots__ = ()
    kind = FILESYSTEM_TAG_KIND


class CharmTag(Tag):
    __slots__ = ()
    kind = CHARM_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_v1_charm.match(id) or _valid_v3_charm.match(id))


class StorageTag(Tag):
    __slots__ = ()
    kind = STORAGE_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_storage.match(id))

    suffix_to_id = staticmethod(_last_separator_to_slash)
    id_to_suffix = staticmethod(_slashes_to_separator)

    def storage_name(self) -> str:
        return self.id.rsplit("/", 1)[0]


class IPAddressTag(_UUIDTag):
    __slots__ = ()
    kind = IPADDRESS_TAG_KIND


class SubnetTag(Tag):
    """Subnet ids are CIDRs in their canonical form (host bits zero)"""

    __slots__ = ()
    kind = SUBNET_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        if "/" not in id:
            return False
        try:
            network = ipaddress.ip_network(id, strict=True)
        except ValueError:
            return False
        return str(network) == id


class SpaceTag(Tag):
    __slots__ = ()
    kind = SPACE_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return bool(_valid_space.match(id))


class PayloadTag(Tag):
    __slots__ = ()
    kind = PAYLOAD_TAG_KIND

    @staticmethod
    def is_valid(id: str) -> bool:
        return is_valid_uuid_string(id)


TAG_TYPES: Mapping[str, Type[Tag]] = MappingProxyType({
    cls.kind: cls
    for cls in (
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
    )
})


def is_valid_machine(id: str) -> bool:
    return MachineTag.is_valid(id)


def is_container_machine(id: str) -> bool:
    return bool(_valid_container.match(id))


def is_valid_unit(id: str) -> bool:
    return UnitTag.is_valid(id)


def is_valid_service(id: str) -> bool:
    return ServiceTag.is_valid(id)


def is_valid_user(id: str) -> bool:
    return UserTag.is_valid(id)


def is_valid_user_name(name: str) -> bool:
    """Whether name is a valid user name with no domain part"""
    return bool(_valid_user_name.match(name))


def is_valid_model(id: str) -> bool:
    return ModelTag.is_valid(id)


def is_valid_environment(id: str) -> bool:
    return EnvironTag.is_valid(id)


def is_valid_relation(id: str) -> bool:
    return RelationTag.is_valid(id)


def is_valid_network(id: str) -> bool:
    return NetworkTag.is_valid(id)


def is_valid_action(id: str) -> bool:
    return ActionTag.is_valid(id)


def is_valid_volume(id: str) -> bool:
    return VolumeTag.is_valid(id)


def is_valid_filesystem(id: str) -> bool:
    return FilesystemTag.is_valid(id)


def is_valid_charm(id: str) -> bool:
    return CharmTag.is_valid(id)


def is_valid_storage(id: str) -> bool:
    return StorageTag.is_valid(id)


def is_valid_subnet(id: str) -> bool:
    return SubnetTag.is_valid(id)


def is_valid_space(id: str) -> bool:
    return SpaceTag.is_valid(id)


def is_valid_payload(id: str) -> bool:
    return PayloadTag.is_valid(id)


def unit_service(unit_name: str) -> str:
    """Service part of a unit name ("mysql/0" -> "mysql")"""
    return UnitTag(unit_name).service_name()


def storage_name(storage_id: str) -> str:
    """Storage name part of a storage id ("data/0" -> "data")"""
    return StorageTag(storage_id).storage_name()


def new_local_user_tag(name: str) -> UserTag:
    """User tag for a local user, with the "local" domain made explicit"""
    if not is_valid_user_name(name):
        raise InvalidTagError(name, USER_TAG_KIND)
    return UserTag(name + "@" + LOCAL_USER_DOMAIN)
