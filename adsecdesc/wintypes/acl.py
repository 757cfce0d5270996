#!/usr/bin/env python3
#
# Author:
#  Tamas Jos (@skelsec)
#

import io

from adsecdesc import logger
from adsecdesc.commons.exceptions import DeclaredSizeMismatchError
from adsecdesc.commons.utils import read_uint
from adsecdesc.wintypes.ace import ACE

# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/20233ed8-a6c6-4097-aafa-dd545ed24428
class ACL:
	def __init__(self):
		self.AclRevision = None
		self.Sbz1 = None
		self.AclSize = None
		self.AceCount = None
		self.Sbz2 = None

		self.aces = []

	@staticmethod
	def from_bytes(data, strict = False):
		return ACL.from_buffer(io.BytesIO(data), strict = strict)

	@staticmethod
	def parse(data, strict = False):
		buff = io.BytesIO(data)
		acl = ACL.from_buffer(buff, strict = strict)
		return acl, data[buff.tell():]

	@staticmethod
	def from_buffer(buff, strict = False):
		"""
		Decodes exactly AceCount ACEs. AclSize is only checked when strict is set,
		otherwise it is informational.
		"""
		start = buff.tell()
		acl = ACL()
		acl.AclRevision = read_uint(buff, 1, 'ACL AclRevision')
		acl.Sbz1 = read_uint(buff, 1, 'ACL Sbz1')
		acl.AclSize = read_uint(buff, 2, 'ACL AclSize')
		acl.AceCount = read_uint(buff, 2, 'ACL AceCount')
		acl.Sbz2 = read_uint(buff, 2, 'ACL Sbz2')
		logger.debug('ACL revision %s declares %s ACEs in %s bytes' % (acl.AclRevision, acl.AceCount, acl.AclSize))
		for _ in range(acl.AceCount):
			acl.aces.append(ACE.from_buffer(buff, strict = strict))

		if strict is True:
			consumed = buff.tell() - start
			if consumed != acl.AclSize:
				raise DeclaredSizeMismatchError('ACL', acl.AclSize, consumed)
		return acl

	def __str__(self):
		t = '=== ACL ===\r\n'
		for ace in self.aces:
			t += '%s\r\n' % str(ace)
		return t
