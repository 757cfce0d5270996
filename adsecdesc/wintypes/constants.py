#!/usr/bin/env python3
#
# Author:
#  Tamas Jos (@skelsec)
#

import enum

# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/628ebb1d-c509-4ea0-a10f-77ef97ca4586
class ACEType(enum.IntEnum):
	ACCESS_ALLOWED_ACE_TYPE = 0x00
	ACCESS_DENIED_ACE_TYPE = 0x01
	SYSTEM_AUDIT_ACE_TYPE = 0x02
	SYSTEM_ALARM_ACE_TYPE = 0x03
	ACCESS_ALLOWED_COMPOUND_ACE_TYPE = 0x04
	ACCESS_ALLOWED_OBJECT_ACE_TYPE = 0x05
	ACCESS_DENIED_OBJECT_ACE_TYPE = 0x06
	SYSTEM_AUDIT_OBJECT_ACE_TYPE = 0x07
	SYSTEM_ALARM_OBJECT_ACE_TYPE = 0x08
	ACCESS_ALLOWED_CALLBACK_ACE_TYPE = 0x09
	ACCESS_DENIED_CALLBACK_ACE_TYPE = 0x0A
	ACCESS_ALLOWED_CALLBACK_OBJECT_ACE_TYPE = 0x0B
	ACCESS_DENIED_CALLBACK_OBJECT_ACE_TYPE = 0x0C
	SYSTEM_AUDIT_CALLBACK_ACE_TYPE = 0x0D
	SYSTEM_ALARM_CALLBACK_ACE_TYPE = 0x0E
	SYSTEM_AUDIT_CALLBACK_OBJECT_ACE_TYPE = 0x0F
	SYSTEM_ALARM_CALLBACK_OBJECT_ACE_TYPE = 0x10
	SYSTEM_MANDATORY_LABEL_ACE_TYPE = 0x11
	SYSTEM_RESOURCE_ATTRIBUTE_ACE_TYPE = 0x12
	SYSTEM_SCOPED_POLICY_ID_ACE_TYPE = 0x13

# ACE types sharing the ACCESS_ALLOWED_ACE layout (mask + sid)
ALLOWED_ACE_TYPES = (
	ACEType.ACCESS_ALLOWED_ACE_TYPE,
	ACEType.ACCESS_DENIED_ACE_TYPE,
)

# ACE types sharing the ACCESS_ALLOWED_OBJECT_ACE layout
OBJECT_ACE_TYPES = (
	ACEType.ACCESS_ALLOWED_OBJECT_ACE_TYPE,
	ACEType.ACCESS_DENIED_OBJECT_ACE_TYPE,
)

class AceFlags(enum.IntFlag):
	OBJECT_INHERIT_ACE = 0x01
	CONTAINER_INHERIT_ACE = 0x02
	NO_PROPAGATE_INHERIT_ACE = 0x04
	INHERIT_ONLY_ACE = 0x08
	INHERITED_ACE = 0x10
	SUCCESSFUL_ACCESS_ACE_FLAG = 0x40
	FAILED_ACCESS_ACE_FLAG = 0x80

#https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/c79a383c-2b3f-4655-abe7-dcbb7ce0cfbe
class ACE_OBJECT_FLAGS(enum.IntFlag):
	ACE_OBJECT_TYPE_PRESENT = 0x00000001 #ObjectType is valid.
	ACE_INHERITED_OBJECT_TYPE_PRESENT = 0x00000002 #InheritedObjectType is valid. If this value is not specified, all types of child objects can inherit the ACE.

#https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/7d4dac05-9cef-4563-a058-f108abecce1d
class SE_CONTROL(enum.IntFlag):
	SE_OWNER_DEFAULTED = 0x0001
	SE_GROUP_DEFAULTED = 0x0002
	SE_DACL_PRESENT = 0x0004
	SE_DACL_DEFAULTED = 0x0008
	SE_SACL_PRESENT = 0x0010
	SE_SACL_DEFAULTED = 0x0020
	SE_DACL_TRUSTED = 0x0040
	SE_SERVER_SECURITY = 0x0080
	SE_DACL_AUTO_INHERIT_REQ = 0x0100
	SE_SACL_AUTO_INHERIT_REQ = 0x0200
	SE_DACL_AUTO_INHERITED = 0x0400
	SE_SACL_AUTO_INHERITED = 0x0800
	SE_DACL_PROTECTED = 0x1000
	SE_SACL_PROTECTED = 0x2000
	SE_RM_CONTROL_VALID = 0x4000
	SE_SELF_RELATIVE = 0x8000
