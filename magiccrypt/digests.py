"""magiccrypt.digests - digest primitives, tagged digest results, and output encoding

this module wraps the external hash functions (from :mod:`hashlib`)
behind a narrow "hash bytes, return raw digest" interface,
and defines the value returned by :meth:`CryptDispatcher.crypt`.

.. note::

    the output of :func:`encode` is ``salt + "$" + raw digest``.
    no rounds, salt mixing, or hash64 encoding is performed,
    so the result is *not* compatible with the host's :func:`!crypt(3)`,
    even though it shares the same magic prefixes.
"""
#=========================================================
#imports
#=========================================================
#core
from collections import namedtuple
from functools import partial
import hashlib
#site
#pkg
from magiccrypt.exc import ExpectedTypeError
from magiccrypt.utils import to_bytes
#local
__all__ = [
    "DIGEST_SIZES",
    "SEPARATOR",
    "DigestResult",
    "DigestPrimitive",
    "create_digest_primitive",
    "wrap_digest_function",
    "is_digest_primitive",
    "encode",
    "md5",
    "sha256",
    "sha512",
]

#=========================================================
#constants
#=========================================================

#: fixed size (in bytes) of the raw digest produced by each builtin algorithm
DIGEST_SIZES = dict(
    md5=16,
    sha256=32,
    sha512=64,
)

#: separator placed between salt and digest by encode()
SEPARATOR = b"$"

#=========================================================
#digest result
#=========================================================
class DigestResult(namedtuple("DigestResult", "algorithm digest")):
    """raw digest tagged with the name of the algorithm which produced it.

    :arg algorithm: name of algorithm (e.g. ``"md5"``)
    :arg digest: raw digest bytes

    for the builtin algorithms, the digest must be exactly
    the size listed in :data:`DIGEST_SIZES`, or :exc:`ValueError` is raised.
    ``bytes(result)`` returns the raw digest.
    """
    __slots__ = ()

    def __new__(cls, algorithm, digest):
        if not isinstance(digest, bytes):
            raise ExpectedTypeError(digest, "bytes", "digest")
        if not digest:
            raise ValueError("%s digest must not be empty" % (algorithm,))
        size = DIGEST_SIZES.get(algorithm)
        if size is not None and len(digest) != size:
            raise ValueError("%s digest must be %d bytes, not %d" %
                             (algorithm, size, len(digest)))
        return super(DigestResult, cls).__new__(cls, algorithm, digest)

    @property
    def size(self):
        "size of digest in bytes"
        return len(self.digest)

    def __bytes__(self):
        return self.digest

    def hexdigest(self):
        return self.digest.hex()

    def __repr__(self):
        return "DigestResult(%r, %s)" % (self.algorithm, self.hexdigest())

#=========================================================
#digest primitives
#=========================================================
class DigestPrimitive(namedtuple("DigestPrimitive", "name digest_func digest_size")):
    """names a ``bytes -> raw digest`` function, along with the size of its output.

    instances are callable: ``primitive(secret)`` returns the raw digest of *secret*.
    the secret is hashed exactly once, with no keying, salting, or rounds.
    """
    __slots__ = ()

    def __call__(self, secret):
        return self.digest_func(secret)

def _hashlib_digest(hash, secret):
    return hash(secret).digest()

def create_digest_primitive(hash, name):
    """create :class:`DigestPrimitive` from a hashlib-compatible constructor.

    :arg hash: callable returning an object with ``digest()`` and ``digest_size``
    :arg name: name the primitive will be registered under
    """
    #NOTE: could use hash().name for cpython, but it uses different spellings for some digests.
    h = hash()
    return DigestPrimitive(name, partial(_hashlib_digest, hash), h.digest_size)

def wrap_digest_function(name, func, digest_size=None):
    """create :class:`DigestPrimitive` from a plain ``bytes -> raw digest`` function.

    :arg name: name the primitive will be registered under
    :arg func: function returning the raw digest of its argument
    :param digest_size:
        size of the digest in bytes.
        if omitted, it's measured by hashing an empty string.

    :raises TypeError: if *func* isn't callable, or doesn't return bytes.
    :raises ValueError: if the digest size isn't a positive integer.
    """
    if not callable(func):
        raise ExpectedTypeError(func, "callable", "func")
    if digest_size is None:
        sample = func(b"")
        if not isinstance(sample, bytes):
            raise ExpectedTypeError(sample, "bytes", "digest")
        digest_size = len(sample)
    if not isinstance(digest_size, int) or digest_size < 1:
        raise ValueError("digest_size must be a positive integer: %r" % (digest_size,))
    return DigestPrimitive(name, func, digest_size)

def is_digest_primitive(obj):
    "check if object follows the digest primitive interface"
    return all(hasattr(obj, attr) for attr in ("name", "digest_size")) and callable(obj)

#=========================================================
#output encoding
#=========================================================
def encode(salt, digest):
    """combine salt and digest into the final output.

    :arg salt: salt as originally provided (unicode strings are encoded as utf-8)
    :arg digest: :class:`DigestResult` or raw digest bytes

    :returns: ``salt + b"$" + raw_digest``
    """
    salt = to_bytes(salt, errname="salt")
    if isinstance(digest, DigestResult):
        digest = digest.digest
    elif not isinstance(digest, bytes):
        raise ExpectedTypeError(digest, "DigestResult or bytes", "digest")
    return salt + SEPARATOR + digest

#=========================================================
#builtin primitives
#=========================================================
md5     = create_digest_primitive(hashlib.md5,      "md5")
sha256  = create_digest_primitive(hashlib.sha256,   "sha256")
sha512  = create_digest_primitive(hashlib.sha512,   "sha512")

#=========================================================
#eof
#=========================================================
