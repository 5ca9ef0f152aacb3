#!/usr/bin/env python

from setuptools import setup, find_packages

import twowaymap

setup(name='twowaymap',
      version=twowaymap.__version__,
      url=twowaymap.__url__,
      license='BSD',
      description='Bidirectional map keeping a one-to-one pairing',
      long_description=open('README.rst').read(),
      long_description_content_type='text/x-rst',
      classifiers=[
          'Development Status :: 5 - Production/Stable',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3.12',
          'Programming Language :: Python :: 3.13',
          'Topic :: Software Development :: Libraries :: Python Modules',
      ],
      packages=find_packages(exclude=['tests']),
      keywords=['bidict', 'bimap', 'bijection', 'mapping'],
      zip_safe=True,
      include_package_data=True,
      extras_require={'test': ['pytest']},
      )
