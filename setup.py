from setuptools import setup, find_packages
import re

VERSIONFILE="adsecdesc/_version.py"
verstrline = open(VERSIONFILE, "rt").read()
VSRE = r"^__version__ = ['\"]([^'\"]*)['\"]"
mo = re.search(VSRE, verstrline, re.M)
if mo:
    verstr = mo.group(1)
else:
    raise RuntimeError("Unable to find version string in %s." % (VERSIONFILE,))


setup(
	# Application name:
	name="adsecdesc",

	# Version number (initial):
	version=verstr,

	# Application author details:
	author="Tamas Jos",
	author_email="info@skelsecprojects.com",

	# Packages
	packages=find_packages(exclude=["tests"]),

	# Include additional files into the package
	include_package_data=True,

	zip_safe = False,
	#
	# license="LICENSE.txt",
	description="Decoder for Windows security descriptors found in AD attributes",
	long_description="Decoder for Windows security descriptors found in AD attributes",

	# long_description=open("README.txt").read(),
	python_requires='>=3.7',
	classifiers=(
		"Programming Language :: Python :: 3.7",
		"Programming Language :: Python :: 3.8",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
	),
	install_requires=[
		'tqdm',
	],
	extras_require={
		'test': [
			'pytest',
			'winacl>=0.1.1',
		],
	},
	entry_points={
		'console_scripts': [
			'sddump = adsecdesc.examples.sddump:main',
		],
	}
)
