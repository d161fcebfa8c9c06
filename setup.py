#!/usr/bin/env python

from setuptools import setup

setup(name='cryomrc',
	version='0.1',
	description='Streaming MRC/IMOD volume reader for cryo-EM data',
	author='The cryomrc developers',
	packages=['cryomrc','cryomrc.data','cryomrc.io','cryomrc.utils'],
	package_dir={'cryomrc': 'cryomrc'},
	install_requires=['numpy>=1.20.0','numba'],
	extras_require={'test': ['pytest']},
	entry_points={'console_scripts': ['cryomrc=cryomrc.__main__:main']},
	python_requires='>=3.8',
	zip_safe=False,
)
