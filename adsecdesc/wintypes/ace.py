#!/usr/bin/env python3
#
# Author:
#  Tamas Jos (@skelsec)
#

import io

from adsecdesc import logger
from adsecdesc.commons.exceptions import UnrecognizedVariantError, DeclaredSizeMismatchError
from adsecdesc.commons.utils import read_uint
from adsecdesc.wintypes.constants import ACEType, AceFlags, ACE_OBJECT_FLAGS, ALLOWED_ACE_TYPES, OBJECT_ACE_TYPES
from adsecdesc.wintypes.sid import SID
from adsecdesc.wintypes.guid import GUID


#https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/72e7c7ea-bc02-4c74-a619-818a16bf6adb
class ACCESS_ALLOWED_ACE:
	"""
	Payload of ACCESS_ALLOWED_ACE and ACCESS_DENIED_ACE, both share this layout.
	"""
	def __init__(self):
		self.Mask = None
		self.Sid = None

	@staticmethod
	def from_buffer(buff):
		ace = ACCESS_ALLOWED_ACE()
		ace.Mask = read_uint(buff, 4, 'ACE Mask')
		ace.Sid = SID.from_buffer(buff)
		return ace

	def get_mask(self):
		return self.Mask

	def get_sid(self):
		return self.Sid

	def get_flags(self):
		return None

	def get_object_type(self):
		return None

	def get_inherited_object_type(self):
		return None

	def __str__(self):
		t = 'Sid: %s\r\n' % self.Sid
		t += 'Mask: 0x%08x\r\n' % self.Mask
		return t

#https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/c79a383c-2b3f-4655-abe7-dcbb7ce0cfbe
class ACCESS_ALLOWED_OBJECT_ACE:
	"""
	Payload of ACCESS_ALLOWED_OBJECT_ACE and ACCESS_DENIED_OBJECT_ACE.
	ObjectType and InheritedObjectType are only on the wire when the
	matching bit is set in Flags, in that order.
	"""
	def __init__(self):
		self.Mask = None
		self.Flags = None
		self.ObjectType = None
		self.InheritedObjectType = None
		self.Sid = None

	@staticmethod
	def from_buffer(buff):
		ace = ACCESS_ALLOWED_OBJECT_ACE()
		ace.Mask = read_uint(buff, 4, 'ACE Mask')
		ace.Flags = ACE_OBJECT_FLAGS(read_uint(buff, 4, 'ACE object flags'))
		if ace.Flags & ACE_OBJECT_FLAGS.ACE_OBJECT_TYPE_PRESENT:
			ace.ObjectType = GUID.from_buffer(buff)
		if ace.Flags & ACE_OBJECT_FLAGS.ACE_INHERITED_OBJECT_TYPE_PRESENT:
			ace.InheritedObjectType = GUID.from_buffer(buff)
		ace.Sid = SID.from_buffer(buff)
		return ace

	def get_mask(self):
		return self.Mask

	def get_sid(self):
		return self.Sid

	def get_flags(self):
		return self.Flags

	def get_object_type(self):
		return self.ObjectType

	def get_inherited_object_type(self):
		return self.InheritedObjectType

	def __str__(self):
		t = 'Sid: %s\r\n' % self.Sid
		t += 'Mask: 0x%08x\r\n' % self.Mask
		t += 'ObjectFlags: 0x%08x\r\n' % self.Flags
		t += 'ObjectType: %s\r\n' % self.ObjectType
		t += 'InheritedObjectType: %s\r\n' % self.InheritedObjectType
		return t

acetype2payload = {}
for acetype in ALLOWED_ACE_TYPES:
	acetype2payload[acetype] = ACCESS_ALLOWED_ACE
for acetype in OBJECT_ACE_TYPES:
	acetype2payload[acetype] = ACCESS_ALLOWED_OBJECT_ACE


# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/628ebb1d-c509-4ea0-a10f-77ef97ca4586
class ACEHeader:
	def __init__(self):
		self.AceType = None
		self.AceFlags = None
		self.AceSize = None

	@staticmethod
	def from_bytes(data):
		return ACEHeader.from_buffer(io.BytesIO(data))

	@staticmethod
	def from_buffer(buff):
		hdr = ACEHeader()
		hdr.AceType = read_uint(buff, 1, 'ACE type')
		hdr.AceFlags = AceFlags(read_uint(buff, 1, 'ACE flags'))
		hdr.AceSize = read_uint(buff, 2, 'ACE size')
		return hdr


class ACE:
	def __init__(self):
		self.Header = None
		self.Payload = None

	@staticmethod
	def from_bytes(data, strict = False):
		return ACE.from_buffer(io.BytesIO(data), strict = strict)

	@staticmethod
	def parse(data, strict = False):
		buff = io.BytesIO(data)
		ace = ACE.from_buffer(buff, strict = strict)
		return ace, data[buff.tell():]

	@staticmethod
	def from_buffer(buff, strict = False):
		start = buff.tell()
		ace = ACE()
		ace.Header = ACEHeader.from_buffer(buff)
		payload_cls = acetype2payload.get(ace.Header.AceType)
		if payload_cls is None:
			logger.debug('Unsupported ACE type 0x%02x at offset %s' % (ace.Header.AceType, start))
			raise UnrecognizedVariantError(ace.Header.AceType)
		ace.Header.AceType = ACEType(ace.Header.AceType)
		ace.Payload = payload_cls.from_buffer(buff)

		if strict is True:
			consumed = buff.tell() - start
			if consumed != ace.Header.AceSize:
				raise DeclaredSizeMismatchError(ace.Header.AceType.name, ace.Header.AceSize, consumed)
		return ace

	def get_mask(self):
		return self.Payload.get_mask()

	def get_sid(self):
		return self.Payload.get_sid()

	def get_flags(self):
		return self.Payload.get_flags()

	def get_object_type(self):
		return self.Payload.get_object_type()

	def get_inherited_object_type(self):
		return self.Payload.get_inherited_object_type()

	def __str__(self):
		t = '%s\r\n' % self.Header.AceType.name
		t += 'AceFlags: 0x%02x\r\n' % self.Header.AceFlags
		t += str(self.Payload)
		return t
