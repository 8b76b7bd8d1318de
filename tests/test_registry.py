import pytest
from juju_names import (
    KINDS,
    TAG_TYPES,
    check_kind,
    UnsupportedKindError,
    MACHINE_TAG_KIND,
    IPADDRESS_TAG_KIND,
    MachineTag,
)


def test_every_kind_has_a_tag_type():
    assert set(TAG_TYPES) == KINDS
    for kind, cls in TAG_TYPES.items():
        assert cls.kind == kind


def test_kind_names_have_no_separator():
    assert all(kind and "-" not in kind for kind in KINDS)


def test_known_kinds():
    assert MACHINE_TAG_KIND == "machine"
    assert IPADDRESS_TAG_KIND == "ipaddress"
    assert {"unit", "machine", "service", "user", "model", "relation", "network",
            "action", "volume", "charm", "storage", "filesystem", "ipaddress",
            "subnet", "space", "payload"} <= KINDS


def test_check_kind():
    for kind in KINDS:
        check_kind(kind)

    with pytest.raises(UnsupportedKindError) as exc_info:
        check_kind("frobnicate")
    assert exc_info.value.kind == "frobnicate"
    assert exc_info.value.tag == ""
    assert str(exc_info.value) == 'unsupported tag kind "frobnicate"'


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        TAG_TYPES["frobnicate"] = MachineTag
    with pytest.raises(AttributeError):
        KINDS.add("frobnicate")
