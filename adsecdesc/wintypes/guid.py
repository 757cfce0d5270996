#!/usr/bin/env python3
#
# Author:
#  Tamas Jos (@skelsec)
#

import io

from adsecdesc.commons.utils import read_exact

# https://docs.microsoft.com/en-us/previous-versions/aa373931(v%3Dvs.80)
# Data1-3 are little-endian on the wire, Data4 is a plain byte array
class GUID:
	def __init__(self):
		self.Data1 = None
		self.Data2 = None
		self.Data3 = None
		self.Data4 = None

	@staticmethod
	def from_bytes(data):
		return GUID.from_buffer(io.BytesIO(data))

	@staticmethod
	def from_buffer(buff):
		raw = read_exact(buff, 16, 'GUID')
		guid = GUID()
		guid.Data1 = raw[0:4][::-1]
		guid.Data2 = raw[4:6][::-1]
		guid.Data3 = raw[6:8][::-1]
		guid.Data4 = raw[8:16]
		return guid

	def to_bytes(self):
		return self.Data1[::-1] + self.Data2[::-1] + self.Data3[::-1] + self.Data4

	def __eq__(self, other):
		if not isinstance(other, GUID):
			return NotImplemented
		return self.to_bytes() == other.to_bytes()

	def __hash__(self):
		return hash(self.to_bytes())

	def __str__(self):
		return '-'.join([self.Data1.hex(), self.Data2.hex(),self.Data3.hex(),self.Data4[:2].hex(),self.Data4[2:].hex()])

	def __repr__(self):
		return '<GUID %s>' % self
