"""magiccrypt.utils -- helpers shared by the magiccrypt modules"""
#=========================================================
#imports
#=========================================================
#core
import re
#site
#pkg
from magiccrypt.exc import ExpectedStringError
#local
__all__ = [
    "Undef",
    "to_bytes",
    "decode_text",
    "splitcomma",
    "norm_name",
    "validate_name",
]

#=========================================================
#constants
#=========================================================
class _UndefType(object):
    "sentinel used to detect unset default params"
    def __repr__(self):
        return "Undef"

    def __bool__(self):
        return False

Undef = _UndefType()

#: master regexp for detecting valid algorithm names
_name_re = re.compile("^[a-z][_a-z0-9]{2,}$")

#: names which aren't allowed, since they conflict with dispatcher options
_forbidden_names = frozenset(["schemes", "match", "formats", "default", "all", "none"])

#=========================================================
#string helpers
#=========================================================
def to_bytes(source, encoding="utf-8", errname="value"):
    """helper to encode unicode -> bytes

    this function takes in a ``source`` string.
    if unicode, encodes it using the specified ``encoding``.
    if bytes, returns it unchanged.

    :arg source: source bytes/unicode to process
    :arg encoding: target character encoding
    :param errname: optional name of variable/noun to reference when raising errors

    :raises TypeError: if source is not unicode or bytes.

    :returns: bytes object
    """
    if isinstance(source, bytes):
        return source
    elif isinstance(source, str):
        return source.encode(encoding)
    else:
        raise ExpectedStringError(source, errname)

def decode_text(source, encoding="utf-8"):
    """decode bytes for text matching, returning ``None`` if they aren't valid text.

    unicode input is returned unchanged.
    """
    if isinstance(source, str):
        return source
    try:
        return source.decode(encoding)
    except UnicodeDecodeError:
        return None

def splitcomma(source, sep=","):
    "split comma-separated string into list of elements, stripping whitespace and empty elements"
    return [
        elem.strip()
        for elem in source.split(sep)
        if elem.strip()
    ]

#=========================================================
#name helpers
#=========================================================
def norm_name(name):
    "normalize algorithm name to lower-case with underscores"
    return name.replace("-", "_").lower()

def validate_name(name):
    """check algorithm name is well formed.

    :raises ValueError: if the name is malformed or reserved.
    :returns: the name, unchanged.
    """
    if not name:
        raise ValueError("name is null: %r" % (name,))
    if name.lower() != name:
        raise ValueError("name must be lower-case: %r" % (name,))
    if not _name_re.match(name):
        raise ValueError("invalid characters in name (must be 3+ characters, begin with a-z, and contain only underscore, a-z, 0-9): %r" % (name,))
    if '__' in name:
        raise ValueError("name may not contain double-underscores: %r" % (name,))
    if name in _forbidden_names:
        raise ValueError("that name is not allowed: %r" % (name,))
    return name

#=========================================================
#eof
#=========================================================
