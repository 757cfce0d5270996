#!/usr/bin/env python3
#
# Author:
#  Tamas Jos (@skelsec)
#

from .constants import ACEType, AceFlags, ACE_OBJECT_FLAGS, SE_CONTROL
from .sid import SID, SID_IDENTIFIER_AUTHORITY
from .guid import GUID
from .ace import ACE, ACEHeader, ACCESS_ALLOWED_ACE, ACCESS_ALLOWED_OBJECT_ACE
from .acl import ACL
from .security_descriptor import SECURITY_DESCRIPTOR, SECURITY_DESCRIPTOR_HEADER


__all__ = [
	'ACEType',
	'AceFlags',
	'ACE_OBJECT_FLAGS',
	'SE_CONTROL',
	'SID',
	'SID_IDENTIFIER_AUTHORITY',
	'GUID',
	'ACE',
	'ACEHeader',
	'ACCESS_ALLOWED_ACE',
	'ACCESS_ALLOWED_OBJECT_ACE',
	'ACL',
	'SECURITY_DESCRIPTOR',
	'SECURITY_DESCRIPTOR_HEADER',
]
