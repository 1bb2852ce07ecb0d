"""magiccrypt setup script"""
#=========================================================
#init script env - ensure cwd = root of source dir
#=========================================================
import os
root_dir = os.path.abspath(os.path.join(__file__,".."))
os.chdir(root_dir)

#=========================================================
#imports
#=========================================================
import re

from setuptools import setup

#=========================================================
#version string
#=========================================================
with open(os.path.join(root_dir, "magiccrypt", "__init__.py")) as vh:
    VERSION = re.search(r'^__version__\s*=\s*"(.*?)"\s*$', vh.read(), re.M).group(1)

#=========================================================
#static text
#=========================================================
SUMMARY = "crypt(3)-style dispatch of password digests by magic salt prefix"

DESCRIPTION = """\
magiccrypt reproduces the algorithm selection performed by the unix ``crypt(3)``
family: the leading characters of a salt (``$1$``, ``$5$``, ``$6$``, ...) select
a digest algorithm, the password is hashed with it, and the result is returned
either as a tagged raw digest or as ``salt + "$" + digest``.

The digest is a single unsalted round of MD5 / SHA-256 / SHA-512 from ``hashlib``.
The output is *not* compatible with the host's ``crypt(3)``.
"""

KEYWORDS = "password crypt magic prefix md5 sha256 sha512 digest dispatch"

#=========================================================
#config setup
#=========================================================
config = dict(
    #package info
    packages = [
        "magiccrypt",
            "magiccrypt.tests",
        ],
    zip_safe=True,
    python_requires = ">=3.10",

    #metadata
    name = "magiccrypt",
    version = VERSION,
    license = "BSD",

    description = SUMMARY,
    long_description = DESCRIPTION,
    keywords = KEYWORDS,
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries",
    ],

    extras_require = {
        "test": ["pytest >= 7.0"],
    },
)

#=========================================================
#build
#=========================================================
setup(**config)

#=========================================================
#EOF
#=========================================================
