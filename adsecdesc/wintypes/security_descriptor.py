#!/usr/bin/env python3
#
# Author:
#  Tamas Jos (@skelsec)
#

import io

from adsecdesc import logger
from adsecdesc.commons.exceptions import InsufficientDataError
from adsecdesc.commons.utils import read_uint
from adsecdesc.wintypes.constants import SE_CONTROL
from adsecdesc.wintypes.sid import SID
from adsecdesc.wintypes.acl import ACL

#https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/7d4dac05-9cef-4563-a058-f108abecce1d
class SECURITY_DESCRIPTOR_HEADER:
	"""
	Fixed 20 byte self-relative header. The offsets are relative to the
	first byte of the header and are not followed here.
	"""
	def __init__(self):
		self.Revision = None
		self.Sbz1 = None
		self.Control = None
		self.OffsetOwner = None
		self.OffsetGroup = None
		self.OffsetSacl = None
		self.OffsetDacl = None

	@staticmethod
	def from_bytes(data):
		return SECURITY_DESCRIPTOR_HEADER.from_buffer(io.BytesIO(data))

	@staticmethod
	def parse(data):
		buff = io.BytesIO(data)
		hdr = SECURITY_DESCRIPTOR_HEADER.from_buffer(buff)
		return hdr, data[buff.tell():]

	@staticmethod
	def from_buffer(buff):
		hdr = SECURITY_DESCRIPTOR_HEADER()
		hdr.Revision = read_uint(buff, 1, 'SECURITY_DESCRIPTOR Revision')
		hdr.Sbz1 = read_uint(buff, 1, 'SECURITY_DESCRIPTOR Sbz1')
		hdr.Control = SE_CONTROL(read_uint(buff, 2, 'SECURITY_DESCRIPTOR Control'))
		hdr.OffsetOwner = read_uint(buff, 4, 'SECURITY_DESCRIPTOR OffsetOwner')
		hdr.OffsetGroup = read_uint(buff, 4, 'SECURITY_DESCRIPTOR OffsetGroup')
		hdr.OffsetSacl = read_uint(buff, 4, 'SECURITY_DESCRIPTOR OffsetSacl')
		hdr.OffsetDacl = read_uint(buff, 4, 'SECURITY_DESCRIPTOR OffsetDacl')
		return hdr

	def __str__(self):
		t = 'Revision : %s\r\n' % self.Revision
		t += 'Control : 0x%04x\r\n' % self.Control
		t += 'OffsetOwner : %s\r\n' % self.OffsetOwner
		t += 'OffsetGroup : %s\r\n' % self.OffsetGroup
		t += 'OffsetSacl : %s\r\n' % self.OffsetSacl
		t += 'OffsetDacl : %s\r\n' % self.OffsetDacl
		return t


#https://docs.microsoft.com/en-us/windows/desktop/api/winnt/ns-winnt-_security_descriptor
class SECURITY_DESCRIPTOR:
	def __init__(self):
		self.Header = None
		self.Owner = None
		self.Group = None
		self.Sacl = None
		self.Dacl = None

	@staticmethod
	def from_buffer(buff, strict = False):
		return SECURITY_DESCRIPTOR.from_bytes(buff.read(), strict = strict)

	@staticmethod
	def from_bytes(data, strict = False):
		"""
		Decodes the header and follows its non-zero offsets inside data.
		Only ACCESS_ALLOWED/DENIED and their OBJECT variants are decoded, a SACL
		holding audit ACEs raises UnrecognizedVariantError for the whole descriptor.
		"""
		sd = SECURITY_DESCRIPTOR()
		sd.Header = SECURITY_DESCRIPTOR_HEADER.from_bytes(data)

		if sd.Header.OffsetOwner > 0:
			sd.Owner = SID.from_bytes(SECURITY_DESCRIPTOR._slice(data, sd.Header.OffsetOwner, 'Owner'))

		if sd.Header.OffsetGroup > 0:
			sd.Group = SID.from_bytes(SECURITY_DESCRIPTOR._slice(data, sd.Header.OffsetGroup, 'Group'))

		if sd.Header.OffsetSacl > 0:
			sd.Sacl = ACL.from_bytes(SECURITY_DESCRIPTOR._slice(data, sd.Header.OffsetSacl, 'Sacl'), strict = strict)

		if sd.Header.OffsetDacl > 0:
			sd.Dacl = ACL.from_bytes(SECURITY_DESCRIPTOR._slice(data, sd.Header.OffsetDacl, 'Dacl'), strict = strict)

		return sd

	@staticmethod
	def _slice(data, offset, what):
		if offset >= len(data):
			raise InsufficientDataError(offset + 1, len(data), 'SECURITY_DESCRIPTOR %s' % what)
		logger.debug('Following %s offset %s' % (what, offset))
		return data[offset:]

	def __str__(self):
		t = '=== SECURITY_DESCRIPTOR ==\r\n'
		t += 'Revision : %s\r\n' % self.Header.Revision
		t += 'Control : 0x%04x\r\n' % self.Header.Control
		t += 'Owner : %s\r\n' % self.Owner
		t += 'Group : %s\r\n' % self.Group
		t += 'Sacl : %s\r\n' % self.Sacl
		t += 'Dacl : %s\r\n' % self.Dacl
		return t
