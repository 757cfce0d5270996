#!/usr/bin/env python3
#
# Author:
#  Tamas Jos (@skelsec)
#

import io

from adsecdesc.commons.utils import read_exact, read_uint

# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/c6ce4275-3d90-4890-ab3a-514745e4637e
class SID_IDENTIFIER_AUTHORITY:
	def __init__(self):
		self.Value = None #6 bytes, big-endian on the wire

	@staticmethod
	def from_bytes(data):
		return SID_IDENTIFIER_AUTHORITY.from_buffer(io.BytesIO(data))

	@staticmethod
	def from_buffer(buff):
		auth = SID_IDENTIFIER_AUTHORITY()
		auth.Value = read_exact(buff, 6, 'SID_IDENTIFIER_AUTHORITY')
		return auth

	def to_int(self):
		return int.from_bytes(self.Value, 'big', signed = False)

	def __eq__(self, other):
		if not isinstance(other, SID_IDENTIFIER_AUTHORITY):
			return NotImplemented
		return self.Value == other.Value

	def __hash__(self):
		return hash(self.Value)

	def __str__(self):
		value = self.to_int()
		if value >= 2**32:
			return '0x%012X' % value
		return str(value)

# https://docs.microsoft.com/en-us/openspecs/windows_protocols/ms-dtyp/f992ad60-0fe4-4b87-9fed-beb478836861
class SID:
	def __init__(self):
		self.Revision = None
		self.SubAuthorityCount = None
		self.IdentifierAuthority = None
		self.SubAuthority = []

	@staticmethod
	def from_bytes(data):
		return SID.from_buffer(io.BytesIO(data))

	@staticmethod
	def parse(data):
		buff = io.BytesIO(data)
		sid = SID.from_buffer(buff)
		return sid, data[buff.tell():]

	@staticmethod
	def from_buffer(buff):
		sid = SID()
		sid.Revision = read_uint(buff, 1, 'SID Revision')
		sid.SubAuthorityCount = read_uint(buff, 1, 'SID SubAuthorityCount')
		sid.IdentifierAuthority = SID_IDENTIFIER_AUTHORITY.from_buffer(buff)
		sid.SubAuthority = [read_uint(buff, 4, 'SID SubAuthority') for _ in range(sid.SubAuthorityCount)]
		return sid

	def __eq__(self, other):
		if not isinstance(other, SID):
			return NotImplemented
		return self.Revision == other.Revision \
			and self.IdentifierAuthority == other.IdentifierAuthority \
			and self.SubAuthority == other.SubAuthority

	def __hash__(self):
		return hash(str(self))

	def __str__(self):
		t = 'S-%d-%s' % (self.Revision, self.IdentifierAuthority)
		for subauth in self.SubAuthority:
			t += '-%d' % subauth
		return t

	def __repr__(self):
		return '<SID %s>' % self
