"""magiccrypt.registry - magic prefix table & registry for digest primitives"""
#=========================================================
#imports
#=========================================================
#core
from collections import namedtuple
import logging; log = logging.getLogger(__name__)
from warnings import warn
#site
#pkg
from magiccrypt import digests
from magiccrypt.digests import is_digest_primitive, wrap_digest_function
from magiccrypt.exc import MagicCryptConfigWarning, ExpectedTypeError
from magiccrypt.utils import Undef, norm_name, validate_name
#local
__all__ = [
    "AlgorithmEntry",
    "FORMATS",
    "MATCH_MODES",
    "validate_formats",
    "get_algorithm",
    "list_algorithms",

    "register_digest_primitive",
    "get_digest_primitive",
    "list_digest_primitives",
    "has_digest_primitive",
]

#=========================================================
#algorithm table
#=========================================================

#: ways a magic marker may be matched against a salt
MATCH_MODES = ("prefix", "contains")

class AlgorithmEntry(namedtuple("AlgorithmEntry", "name magic")):
    """immutable ``(name, magic)`` pair identifying an algorithm by its salt marker.

    an entry with an empty marker is a catch-all, and matches any salt.
    """
    __slots__ = ()

    @property
    def is_catch_all(self):
        return not self.magic

    def matches(self, text, match="prefix"):
        """check if marker is present in decoded salt *text*.

        :param match:
            ``"prefix"`` requires the salt to start with the marker,
            ``"contains"`` accepts the marker anywhere in the salt.
        """
        if match == "contains":
            return self.magic in text
        return text.startswith(self.magic)

#: the known algorithms, in resolution order.
#: NOTE: the catch-all "des" entry must remain last,
#:       or it would claim every salt.
FORMATS = (
    AlgorithmEntry("md5",       "$1$"),
    AlgorithmEntry("blowfish",  "$2"),
    AlgorithmEntry("nt_hash",   "$3$"),
    AlgorithmEntry("sha256",    "$5$"),
    AlgorithmEntry("sha512",    "$6$"),
    AlgorithmEntry("des",       ""),
)

def validate_formats(formats):
    """check a sequence of algorithm entries, returning them as a tuple.

    plain ``(name, magic)`` pairs are converted to :class:`AlgorithmEntry`.

    :raises TypeError: if an element isn't a pair, or the marker isn't a string.
    :raises ValueError:
        if a name is malformed or repeated, if a marker contains a comma
        or leading/trailing whitespace,
        or if a catch-all entry is followed by any other entry.
    """
    result = []
    seen = set()
    for entry in formats:
        if not isinstance(entry, AlgorithmEntry):
            if not isinstance(entry, (tuple, list)) or len(entry) != 2:
                raise ExpectedTypeError(entry, "AlgorithmEntry or (name, magic) pair", "entry")
            entry = AlgorithmEntry(*entry)
        if not isinstance(entry.magic, str):
            raise ExpectedTypeError(entry.magic, "str", "magic")
        #NOTE: markers must survive the comma-separated "name:magic" config format
        if entry.magic != entry.magic.strip() or ',' in entry.magic:
            raise ValueError("magic may not contain commas, or leading/trailing whitespace: %r" %
                             (entry.magic,))
        validate_name(entry.name)
        if entry.name in seen:
            raise ValueError("algorithm listed more than once: %r" % (entry.name,))
        if result and result[-1].is_catch_all:
            raise ValueError("catch-all entry %r must be last, but is followed by %r" %
                             (result[-1].name, entry.name))
        seen.add(entry.name)
        result.append(entry)
    return tuple(result)

def _norm_lookup_name(name):
    "normalize name for lookup, warning if caller used a non-canonical spelling"
    alt = norm_name(name)
    if alt != name:
        warn("algorithm names should be lower-case, and use underscores instead of hyphens: %r => %r" % (name, alt),
             MagicCryptConfigWarning, stacklevel=3)
    return alt

def get_algorithm(name, default=Undef):
    """return :class:`AlgorithmEntry` for specified algorithm name.

    :arg name: name of algorithm
    :param default: optional value to return if no algorithm has that name

    :raises KeyError: if no algorithm matches the name, and no default specified.
    """
    name = _norm_lookup_name(name)
    for entry in FORMATS:
        if entry.name == name:
            return entry
    if default is Undef:
        raise KeyError("unknown algorithm: %r" % (name,))
    return default

def list_algorithms():
    "return names of all known algorithms, in resolution order"
    return [entry.name for entry in FORMATS]

#=========================================================
#digest primitive registry
#=========================================================

#: dict mapping name -> primitive, filled in at import.
#: NOTE: only register_digest_primitive() writes to this, and it should
#:       only be called while the application is being configured.
#:       resolution & dispatch only ever read from it.
_primitives = dict(
    (primitive.name, primitive)
    for primitive in (digests.md5, digests.sha256, digests.sha512)
)

def register_digest_primitive(name, func, force=False, digest_size=None):
    """register digest primitive for an algorithm name.

    this is a configuration-time call: the registry is shared by every
    dispatcher, so it should not be modified while hashes are being computed.

    :arg name: name of algorithm (e.g. ``"sha384"``)
    :arg func:
        either a plain function mapping password bytes to raw digest bytes,
        or a :class:`~magiccrypt.digests.DigestPrimitive` with the same name.
    :param force: force override of existing primitive (defaults to False)
    :param digest_size:
        size of the digest produced by a plain function;
        measured by hashing an empty string if omitted.

    usage example::

        >>> import hashlib
        >>> from magiccrypt.registry import register_digest_primitive
        >>> register_digest_primitive("sha384", lambda data: hashlib.sha384(data).digest())

    :raises TypeError:
        if *func* is not callable, or doesn't return bytes.

    :raises ValueError:
        if the name is malformed, or doesn't match the primitive's own name.

    :raises KeyError:
        if a (different) primitive was already registered with
        the same name, and ``force=True`` was not specified.

    :returns: the registered :class:`~magiccrypt.digests.DigestPrimitive`
    """
    validate_name(name)
    if is_digest_primitive(func):
        primitive = func
        if primitive.name != name:
            raise ValueError("primitives must be stored only under their own name")
        if digest_size is not None and digest_size != primitive.digest_size:
            raise ValueError("digest_size doesn't match primitive: %r" % (digest_size,))
    else:
        primitive = wrap_digest_function(name, func, digest_size)

    other = _primitives.get(name)
    if other:
        if other is primitive:
            return primitive #already registered
        if force:
            log.warning("overriding previous primitive registered to name %r: %r", name, other)
        else:
            raise KeyError("a primitive has already been registered for the name %r: %r (use force=True to override)" % (name, other))

    _primitives[name] = primitive
    log.info("registered digest primitive %r: %r", name, primitive)
    return primitive

def get_digest_primitive(name, default=Undef):
    """return digest primitive for specified algorithm.

    :arg name: name of algorithm
    :param default: optional default value to return if no primitive is found.

    :raises KeyError: if no primitive matching that name is found, and no default specified.

    :returns: primitive attached to name, or default value (if specified).
    """
    primitive = _primitives.get(name)
    if primitive:
        return primitive

    alt = _norm_lookup_name(name)
    if alt != name:
        primitive = _primitives.get(alt)
        if primitive:
            return primitive

    if default is Undef:
        raise KeyError("no digest primitive found for algorithm: %r" % (alt,))
    return default

def list_digest_primitives():
    "return sorted list of all algorithm names which have a digest primitive"
    return sorted(_primitives)

def has_digest_primitive(name):
    "check if a digest primitive is registered for the name"
    return name in _primitives

def _unload_primitive_name(name):
    """unloads a primitive from the registry.

    .. warning::

        this is an internal function,
        used only by the unittests.

    missing names are a noop.
    """
    _primitives.pop(name, None)

#=========================================================
# eof
#=========================================================
