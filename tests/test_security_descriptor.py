import io

import pytest

from adsecdesc.commons.exceptions import DeclaredSizeMismatchError, InsufficientDataError, UnrecognizedVariantError
from adsecdesc.wintypes.constants import SE_CONTROL
from adsecdesc.wintypes.security_descriptor import SECURITY_DESCRIPTOR, SECURITY_DESCRIPTOR_HEADER


HEADER = bytes([1, 0, 4, 140, 120, 9, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 20, 0, 0, 0])


def test_header() -> None:
    hdr, rest = SECURITY_DESCRIPTOR_HEADER.parse(HEADER + b"\x04\x00")

    assert rest == b"\x04\x00"
    assert hdr.Revision == 1
    assert hdr.Sbz1 == 0
    assert hdr.Control == 0x8C04
    assert hdr.Control & SE_CONTROL.SE_DACL_PRESENT
    assert hdr.Control & SE_CONTROL.SE_SELF_RELATIVE
    assert not hdr.Control & SE_CONTROL.SE_SACL_PRESENT
    assert hdr.OffsetOwner == 2424
    assert hdr.OffsetGroup == 0
    assert hdr.OffsetSacl == 0
    assert hdr.OffsetDacl == 20


def test_header_does_not_follow_offsets() -> None:
    # the owner offset points far outside the 20 bytes, the header alone still decodes
    hdr = SECURITY_DESCRIPTOR_HEADER.from_bytes(HEADER)

    assert hdr.OffsetOwner == 2424


@pytest.mark.parametrize("size", [0, 1, 19])
def test_header_truncated(size: int) -> None:
    with pytest.raises(InsufficientDataError):
        SECURITY_DESCRIPTOR_HEADER.from_bytes(HEADER[:size])


def test_security_descriptor(security_descriptor: bytes) -> None:
    sd = SECURITY_DESCRIPTOR.from_bytes(security_descriptor, strict=True)

    assert sd.Header.Control == SE_CONTROL.SE_DACL_PRESENT | SE_CONTROL.SE_SELF_RELATIVE
    assert str(sd.Owner) == "S-1-5-32-544"
    assert str(sd.Group) == "S-1-5-18"
    assert sd.Sacl is None
    assert sd.Dacl is not None
    assert len(sd.Dacl.aces) == 2
    assert sd.Dacl.aces[0].get_mask() == 0x000F01BD


def test_security_descriptor_from_buffer(security_descriptor: bytes) -> None:
    sd = SECURITY_DESCRIPTOR.from_buffer(io.BytesIO(security_descriptor))

    assert str(sd.Group) == "S-1-5-18"


def test_security_descriptor_offset_out_of_range() -> None:
    with pytest.raises(InsufficientDataError):
        SECURITY_DESCRIPTOR.from_bytes(HEADER)


def test_security_descriptor_only_header() -> None:
    sd = SECURITY_DESCRIPTOR.from_bytes(bytes([1, 0, 0, 0x80]) + b"\x00" * 16)

    assert sd.Owner is None
    assert sd.Group is None
    assert sd.Sacl is None
    assert sd.Dacl is None


def test_security_descriptor_strict_dacl(build_acl, ace_allowed: bytes, sid_administrators: bytes) -> None:
    dacl = build_acl([ace_allowed], acl_size=0x100)
    data = (
        bytes([1, 0, 4, 0x80])
        + (20 + len(dacl)).to_bytes(4, "little")
        + (0).to_bytes(4, "little")
        + (0).to_bytes(4, "little")
        + (20).to_bytes(4, "little")
        + dacl
        + sid_administrators
    )

    sd = SECURITY_DESCRIPTOR.from_bytes(data)
    assert sd.Dacl.AclSize == 0x100
    assert str(sd.Owner) == "S-1-5-32-544"

    with pytest.raises(DeclaredSizeMismatchError):
        SECURITY_DESCRIPTOR.from_bytes(data, strict=True)


def test_security_descriptor_str(security_descriptor: bytes) -> None:
    t = str(SECURITY_DESCRIPTOR.from_bytes(security_descriptor))

    assert "Owner : S-1-5-32-544" in t
    assert "Group : S-1-5-18" in t
    assert "Sacl : None" in t
    assert "=== ACL ===" in t


def test_security_descriptor_audit_sacl_is_fatal(build_acl, ace_allowed: bytes, sid_administrators: bytes) -> None:
    sacl = build_acl([bytes.fromhex("02401800" "00000100") + sid_administrators])
    dacl = build_acl([ace_allowed])
    data = (
        bytes([1, 0, 0x14, 0x80])
        + (0).to_bytes(4, "little")
        + (0).to_bytes(4, "little")
        + (20).to_bytes(4, "little")
        + (20 + len(sacl)).to_bytes(4, "little")
        + sacl
        + dacl
    )

    with pytest.raises(UnrecognizedVariantError) as excinfo:
        SECURITY_DESCRIPTOR.from_bytes(data)

    assert excinfo.value.ace_type == 0x02
