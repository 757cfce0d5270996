import pytest

# S-1-5-32-544
SID_ADMINISTRATORS = bytes.fromhex("01020000000000052000000020020000")
# S-1-5-32-554
SID_PRE_WIN2K = bytes.fromhex("0102000000000005200000002a020000")
# S-1-5-18
SID_LOCAL_SYSTEM = bytes.fromhex("010100000000000512000000")

# bf967aba-0de6-11d0-a285-00aa003049e2 (user class)
GUID_USER = bytes.fromhex("ba7a96bfe60dd011a28500aa003049e2")
# 4c164200-20c0-11d0-a768-00aa006e0529 (User-Account-Restrictions property set)
GUID_ACCOUNT_RESTRICTIONS = bytes.fromhex("0042164cc020d011a76800aa006e0529")

ACE_ALLOWED = bytes.fromhex("00121800" "bd010f00") + SID_ADMINISTRATORS
ACE_OBJECT_INHERITED = bytes.fromhex("05122c00" "94000200" "02000000") + GUID_USER + SID_PRE_WIN2K
ACE_OBJECT_BOTH = (
    bytes.fromhex("05123c00" "10000000" "03000000")
    + GUID_ACCOUNT_RESTRICTIONS
    + GUID_USER
    + SID_PRE_WIN2K
)


def acl_bytes(aces, acl_size=None):
    body = b"".join(aces)
    if acl_size is None:
        acl_size = 8 + len(body)
    return (
        b"\x04\x00"
        + acl_size.to_bytes(2, "little")
        + len(aces).to_bytes(2, "little")
        + b"\x00\x00"
        + body
    )


@pytest.fixture
def sid_administrators() -> bytes:
    return SID_ADMINISTRATORS


@pytest.fixture
def ace_allowed() -> bytes:
    return ACE_ALLOWED


@pytest.fixture
def ace_object_inherited() -> bytes:
    return ACE_OBJECT_INHERITED


@pytest.fixture
def ace_object_both() -> bytes:
    return ACE_OBJECT_BOTH


@pytest.fixture
def dacl() -> bytes:
    return acl_bytes([ACE_ALLOWED, ACE_OBJECT_INHERITED])


@pytest.fixture
def dacl_bad_size() -> bytes:
    return acl_bytes([ACE_ALLOWED, ACE_OBJECT_INHERITED], acl_size=0x400)


@pytest.fixture
def security_descriptor(dacl) -> bytes:
    # header | DACL @ 20 | owner @ 20+len(dacl) | group right after the owner
    owner_offset = 20 + len(dacl)
    group_offset = owner_offset + len(SID_ADMINISTRATORS)
    header = (
        b"\x01\x00"
        + (0x8004).to_bytes(2, "little")
        + owner_offset.to_bytes(4, "little")
        + group_offset.to_bytes(4, "little")
        + (0).to_bytes(4, "little")
        + (20).to_bytes(4, "little")
    )
    return header + dacl + SID_ADMINISTRATORS + SID_LOCAL_SYSTEM


@pytest.fixture
def build_acl():
    return acl_bytes
