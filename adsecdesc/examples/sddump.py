#!/usr/bin/env python3
#
# Author:
#  Tamas Jos (@skelsec)
#

import sys
import base64
import binascii
import logging

from tqdm import tqdm

from adsecdesc import logger
from adsecdesc.commons.exceptions import SecurityDescriptorDecodeError
from adsecdesc.wintypes.security_descriptor import SECURITY_DESCRIPTOR


def decode_line(line, fmt = 'auto'):
	"""
	Turns one text line (hex or base64 encoded nTSecurityDescriptor value) into bytes.
	Raises ValueError if the line is not valid in the requested format.
	"""
	line = line.strip()
	if fmt in ['auto', 'hex']:
		try:
			return bytes.fromhex(line.replace(' ', ''))
		except ValueError:
			if fmt == 'hex':
				raise
	try:
		return base64.b64decode(line, validate = True)
	except binascii.Error as e:
		raise ValueError('Line is neither hex nor base64 encoded! %s' % e)

def read_lines(infile):
	if infile == '-':
		lines = sys.stdin.readlines()
	else:
		with open(infile, 'r', encoding = 'utf8') as f:
			lines = f.readlines()
	return [line for line in lines if line.strip() != '' and line.strip().startswith('#') is False]

def dump(lines, out, fmt = 'auto', strict = False, pbar = None):
	"""
	Decodes every line and writes the descriptor dump to out.
	Returns the number of lines that failed to decode.
	"""
	failed = 0
	for i, line in enumerate(lines):
		try:
			sd = SECURITY_DESCRIPTOR.from_bytes(decode_line(line, fmt), strict = strict)
		except (ValueError, SecurityDescriptorDecodeError) as e:
			logger.error('Record %s failed to decode! Reason: %s' % (i, e))
			failed += 1
		else:
			out.write('# record %s\r\n' % i)
			out.write(str(sd))
			out.write('\r\n')
		if pbar is not None:
			pbar.update()
	return failed

def main(args = None):
	import argparse
	parser = argparse.ArgumentParser(description='Decodes nTSecurityDescriptor attribute values', epilog='Only allow/deny ACEs (plain and object) are supported. Records with other ACE types, such as SACL audit entries, fail to decode.')
	parser.add_argument('-v', '--verbose', action='count', default=0, help='Verbosity, can be stacked')
	parser.add_argument('--strict', action='store_true', help='Fail records whose declared ACL/ACE sizes do not match the decoded data')
	parser.add_argument('--format', choices=['auto', 'hex', 'base64'], default='auto', help='Encoding of the input lines')
	parser.add_argument('-o', '--outfile', help='Output file. Defaults to stdout')
	parser.add_argument('infile', help='File with one encoded security descriptor per line, - for stdin')

	args = parser.parse_args(args)

	###### VERBOSITY
	if args.verbose == 0:
		logging.basicConfig(level=logging.WARNING)
	elif args.verbose == 1:
		logging.basicConfig(level=logging.INFO)
	else:
		logger.setLevel(logging.DEBUG)
		logging.basicConfig(level=logging.DEBUG)

	lines = read_lines(args.infile)
	logger.info('Decoding %s records' % len(lines))

	if args.outfile is None:
		failed = dump(lines, sys.stdout, args.format, args.strict)
	else:
		with tqdm(desc = 'Writing descriptors to file %s' % args.outfile, total = len(lines)) as pbar:
			with open(args.outfile, 'w', newline='', encoding = 'utf8') as f:
				failed = dump(lines, f, args.format, args.strict, pbar)
		print('Descriptor dump was written to %s' % args.outfile)

	if failed > 0:
		logger.warning('%s out of %s records failed to decode' % (failed, len(lines)))
		return 1
	return 0

if __name__ == '__main__':
	sys.exit(main())
