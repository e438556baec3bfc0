#!/usr/bin/env python
from setuptools import setup, find_packages
import os, re

PKG='txoauth1'
VERSIONFILE = os.path.join('txoauth1', '_version.py')
verstr = "unknown"
try:
    verstrline = open(VERSIONFILE, "rt").read()
except EnvironmentError:
    pass # Okay, there is no version file.
else:
    MVSRE = r"^manual_verstr *= *['\"]([^'\"]*)['\"]"
    mo = re.search(MVSRE, verstrline, re.M)
    if mo:
        mverstr = mo.group(1)
    else:
        print("unable to find version in %s" % (VERSIONFILE,))
        raise RuntimeError("if %s.py exists, it must be well-formed" % (VERSIONFILE,))
    AVSRE = r"^auto_build_num *= *['\"]([^'\"]*)['\"]"
    mo = re.search(AVSRE, verstrline, re.M)
    if mo:
        averstr = mo.group(1)
    else:
        averstr = ''
    verstr = '.'.join([mverstr, averstr])

tests_require = ['mock']

# Run the tests with "trial txoauth1". For code coverage:
# rm -rf ./.coverage* htmlcov ; coverage run --branch --include=txoauth1/* -m twisted.trial txoauth1 ; coverage html

setup(name=PKG,
      version=verstr,
      description="OAuth 1.0a HMAC-SHA1 request signing for Twisted",
      long_description=open('README.rst').read(),
      url="http://github.com/txoauth1/txoauth1",
      packages = find_packages(),
      include_package_data=True,
      license = "MIT License",
      install_requires=['pyutil >= 1.7.9', 'Twisted', 'zope.interface'],
      extras_require={'test': tests_require},
      keywords="oauth oauth1 twisted",
      zip_safe=False, # actually it is zip safe, but zipping packages doesn't help with anything and can cause some problems (http://bugs.python.org/setuptools/issue33 )
      test_suite='txoauth1.test')
