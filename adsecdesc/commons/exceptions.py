#!/usr/bin/env python3
#
# Author:
#  Tamas Jos (@skelsec)
#

class SecurityDescriptorDecodeError(Exception):
	def __init__(self, message):
		self.message = message
		super().__init__(self.message)

class InsufficientDataError(SecurityDescriptorDecodeError):
	def __init__(self, needed, available, what = None):
		self.needed = needed
		self.available = available
		self.what = what
		message = 'Not enough data! Needed %s bytes, only %s available' % (self.needed, self.available)
		if self.what is not None:
			message += ' while reading %s' % self.what
		super().__init__(message)

class UnrecognizedVariantError(SecurityDescriptorDecodeError):
	def __init__(self, ace_type):
		self.ace_type = ace_type
		message = 'ACE type 0x%02x is not supported!' % self.ace_type
		super().__init__(message)

class DeclaredSizeMismatchError(SecurityDescriptorDecodeError):
	def __init__(self, structure, declared, consumed):
		self.structure = structure
		self.declared = declared
		self.consumed = consumed
		message = '%s declares %s bytes but %s bytes were decoded' % (self.structure, self.declared, self.consumed)
		super().__init__(message)
