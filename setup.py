#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
from setuptools import setup


here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, 'zxtape/__init__.py')) as f:
    s, = [s for s in f.readlines() if '__version__' in s]
    s, eq, v = s.split()
    assert s == '__version__' and eq == '='
    assert v[0] == '\'' and v[-1] == '\''
    v = v[1:-1].split('.')
    ZXTAPE_MAJOR_VERSION = int(v[0])
    ZXTAPE_MINOR_VERSION = int(v[1])
    ZXTAPE_PATCH_VERSION = int(v[2])
    version = (f'{ZXTAPE_MAJOR_VERSION}.{ZXTAPE_MINOR_VERSION}.'
               f'{ZXTAPE_PATCH_VERSION}')

with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()


setup(name='zxtape',
      version=version,
      description='ZX Spectrum TAP and TZX tape codec',
      long_description=long_description,
      long_description_content_type='text/markdown',
      author='Ivan Kosarev',
      author_email='mail@ivankosarev.com',
      url='https://github.com/kosarev/zx/',
      packages=['zxtape'],
      python_requires='>=3.10',
      install_requires=[
          'numpy',
      ],
      extras_require={
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': [
              'zxtape = zxtape:main',
          ],
      },
      classifiers=[
          'Development Status :: 2 - Pre-Alpha',
          'Intended Audience :: Developers',
          'Operating System :: OS Independent',
          'Programming Language :: Python :: 3',
          'Programming Language :: Python :: Implementation :: CPython',
          'Topic :: Software Development :: Libraries',
          'Topic :: System :: Archiving',
          'Topic :: System :: Emulators',
      ],
      license='MIT',
      )
