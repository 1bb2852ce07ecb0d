"""magiccrypt.context - CryptDispatcher implementation"""
#=========================================================
#imports
#=========================================================
#core
from configparser import ConfigParser
from io import StringIO
import logging; log = logging.getLogger(__name__)
from warnings import warn
#site
#pkg
from magiccrypt.digests import DigestResult, encode
from magiccrypt.exc import NoAlgorithmFound, UnsupportedAlgorithm, \
    MagicCryptConfigWarning, ExpectedStringError
from magiccrypt.registry import FORMATS, MATCH_MODES, AlgorithmEntry, \
    validate_formats, get_digest_primitive
from magiccrypt.utils import decode_text, norm_name, splitcomma, to_bytes
#local
__all__ = [
    'CryptDispatcher',
    'default_dispatcher',
]

#=========================================================
# support
#=========================================================

#: default INI section used by from_string() / from_path()
DEFAULT_SECTION = "magiccrypt"

#: keys recognized in configuration sources
_config_keys = frozenset(["schemes", "match", "formats"])

def _parse_formats(source):
    "parse 'name:magic, name:magic' string into list of (name, magic) pairs"
    result = []
    for elem in splitcomma(source):
        if ':' not in elem:
            raise ValueError("format must be specified as name:magic, not %r" % (elem,))
        name, magic = elem.split(":", 1)
        result.append((name.strip(), magic.strip()))
    return result

def _render_formats(formats):
    return ", ".join("%s:%s" % (entry.name, entry.magic) for entry in formats)

#=========================================================
# crypt dispatcher
#=========================================================
class CryptDispatcher(object):
    """resolves salts to algorithms by magic prefix, and dispatches to digest primitives.

    :param schemes:
        optional list (or comma-separated string) of algorithm names to recognize.
        resolution order is always the order of *formats*,
        not the order the names are listed in.
        defaults to all algorithms in *formats*.

    :param match:
        ``"prefix"`` (the default) only accepts markers at the start of the salt;
        ``"contains"`` accepts them anywhere, which is how some older
        implementations behave.

    :param formats:
        ordered sequence of :class:`~magiccrypt.registry.AlgorithmEntry`
        (or ``(name, magic)`` pairs) to resolve against.
        defaults to :data:`~magiccrypt.registry.FORMATS`.

    instances are immutable, and safe to share between threads.
    use :meth:`copy` to derive a dispatcher with different options.

    usage example::

        >>> from magiccrypt.context import CryptDispatcher
        >>> dispatcher = CryptDispatcher(["md5", "sha256"])
        >>> dispatcher.identify(b"$5$saltsalt")
        'sha256'
        >>> dispatcher.crypt(b"password", b"$1$")
        DigestResult('md5', 5f4dcc3b5aa765d61d8327deb882cf99)
    """
    #===================================================================
    # secondary constructors
    #===================================================================
    @classmethod
    def from_string(cls, source, section=DEFAULT_SECTION, encoding="utf-8"):
        """create new CryptDispatcher instance from an INI-formatted string.

        :arg source:
            bytes/unicode string containing INI-formatted content.

        :param section:
            name of section to read from, defaults to ``"magiccrypt"``.

        :arg encoding:
            encoding used when source is bytes, defaults to ``"utf-8"``.

        usage example::

            >>> dispatcher = CryptDispatcher.from_string('''
            ... [magiccrypt]
            ... schemes = md5, sha512
            ... match = prefix
            ... ''')
        """
        if isinstance(source, bytes):
            source = source.decode(encoding)
        elif not isinstance(source, str):
            raise ExpectedStringError(source, "source")
        return cls._from_stream(StringIO(source), section, "<string>")

    @classmethod
    def from_path(cls, path, section=DEFAULT_SECTION, encoding="utf-8"):
        """create new CryptDispatcher instance from an INI-formatted file.

        this functions exactly the same as :meth:`from_string`,
        except that it loads from a local file.
        """
        with open(path, "rt", encoding=encoding) as stream:
            return cls._from_stream(stream, section, path)

    @classmethod
    def _from_stream(cls, stream, section, filename):
        p = ConfigParser(interpolation=None)
        p.read_file(stream, filename)
        return cls._from_dict(dict(p.items(section)))

    @classmethod
    def _from_dict(cls, source):
        "build dispatcher from dict of string config values"
        unknown = set(source) - _config_keys
        if unknown:
            raise KeyError("unknown configuration key: %r" % (sorted(unknown)[0],))
        kwds = {}
        if "schemes" in source:
            kwds['schemes'] = splitcomma(source['schemes'])
        if "match" in source:
            kwds['match'] = source['match'].strip()
        if "formats" in source:
            kwds['formats'] = _parse_formats(source['formats'])
        return cls(**kwds)

    def copy(self, **kwds):
        """return copy of existing CryptDispatcher instance.

        any keywords passed in take precedence over the original settings::

            >>> from magiccrypt.context import default_dispatcher
            >>> legacy = default_dispatcher.copy(match="contains")
        """
        config = self.to_dict()
        config.update(kwds)
        return CryptDispatcher(**config)

    #===================================================================
    #init
    #===================================================================
    def __init__(self, schemes=None, match="prefix", formats=None):
        if match not in MATCH_MODES:
            raise ValueError("match must be one of %r, not %r" % (MATCH_MODES, match))
        custom = formats is not None
        formats = validate_formats(FORMATS if formats is None else formats)
        if schemes is not None:
            formats = self._select_schemes(formats, schemes)
        self._formats = formats
        self._match = match
        self._custom = custom

    @staticmethod
    def _select_schemes(formats, schemes):
        "restrict formats to named schemes, preserving format order"
        if isinstance(schemes, str):
            schemes = splitcomma(schemes)
        wanted = []
        for name in schemes:
            if not isinstance(name, str):
                raise ExpectedStringError(name, "scheme name")
            alt = norm_name(name)
            if alt != name:
                warn("scheme names should be lower-case, and use underscores instead of hyphens: %r => %r" % (name, alt),
                     MagicCryptConfigWarning)
            if alt in wanted:
                warn("scheme listed more than once: %r" % (alt,),
                     MagicCryptConfigWarning)
                continue
            wanted.append(alt)
        known = set(entry.name for entry in formats)
        for name in wanted:
            if name not in known:
                raise KeyError("unknown algorithm: %r" % (name,))
        return tuple(entry for entry in formats if entry.name in wanted)

    def __repr__(self):
        return "<CryptDispatcher schemes=%r match=%r>" % (self.schemes(), self._match)

    #===================================================================
    # introspection
    #===================================================================
    @property
    def match(self):
        "matching mode used by resolve()"
        return self._match

    def schemes(self):
        "return names of recognized algorithms, in resolution order"
        return [entry.name for entry in self._formats]

    def entries(self):
        "return tuple of recognized :class:`AlgorithmEntry` instances, in resolution order"
        return self._formats

    def to_dict(self):
        """return dict of keywords which would recreate this dispatcher.

        ``formats`` is only included if a custom table was provided.
        """
        config = dict(schemes=self.schemes(), match=self._match)
        if self._custom:
            config['formats'] = list(self._formats)
        return config

    def to_string(self, section=DEFAULT_SECTION):
        """serialize to INI format, suitable for :meth:`from_string`"""
        p = ConfigParser(interpolation=None)
        p.add_section(section)
        p.set(section, "schemes", ", ".join(self.schemes()))
        p.set(section, "match", self._match)
        if self._custom:
            p.set(section, "formats", _render_formats(self._formats))
        buf = StringIO()
        p.write(buf)
        return buf.getvalue()

    #===================================================================
    # resolution
    #===================================================================
    def resolve(self, salt, required=False):
        """find the algorithm entry whose magic marker matches the salt.

        entries are checked in order, and the first match wins.
        salts which aren't valid utf-8 never match anything.

        :arg salt: salt bytes (or unicode string)
        :param required:
            if ``True``, raise :exc:`~magiccrypt.exc.NoAlgorithmFound`
            instead of returning ``None`` when nothing matches.

        :returns: :class:`AlgorithmEntry` or ``None``
        """
        salt = to_bytes(salt, errname="salt")
        text = decode_text(salt)
        entry = None
        if text is None:
            log.debug("salt is not valid utf-8, can't match magic: %r", salt)
        else:
            for candidate in self._formats:
                if candidate.matches(text, self._match):
                    entry = candidate
                    break
            else:
                log.debug("salt matched no algorithm: %r", salt)
        if entry is None and required:
            raise NoAlgorithmFound(salt)
        return entry

    def identify(self, salt, required=False):
        """return name of the algorithm the salt selects, or ``None``.

        see :meth:`resolve` for details.
        """
        entry = self.resolve(salt, required)
        if entry is None:
            return None
        return entry.name

    #===================================================================
    # digest api
    #===================================================================
    def dispatch(self, name, password):
        """hash password using the primitive for the named algorithm.

        the password is hashed once, unsalted; the salt only selects the algorithm.

        :arg name:
            name of algorithm, as returned by :meth:`identify`.
            it's normalized to lower-case w/ underscores, and the
            normalized name is used to tag the result.
        :arg password: password bytes (or unicode string, encoded as utf-8)

        :raises ~magiccrypt.exc.UnsupportedAlgorithm:
            if no digest primitive is available for the algorithm.

        :raises ValueError:
            if the primitive returned a digest of the wrong size.

        :returns: :class:`~magiccrypt.digests.DigestResult`
        """
        if isinstance(name, AlgorithmEntry):
            name = name.name
        elif not isinstance(name, str):
            raise ExpectedStringError(name, "name")
        name = norm_name(name)
        password = to_bytes(password, errname="password")
        primitive = get_digest_primitive(name, None)
        if primitive is None:
            raise UnsupportedAlgorithm(name)
        digest = primitive(password)
        if len(digest) != primitive.digest_size:
            raise ValueError("%s primitive returned %d byte digest, expected %d" %
                             (name, len(digest), primitive.digest_size))
        return DigestResult(name, digest)

    def crypt(self, password, salt):
        """hash password with the algorithm selected by the salt.

        :raises ~magiccrypt.exc.NoAlgorithmFound: if the salt selects no algorithm.
        :raises ~magiccrypt.exc.UnsupportedAlgorithm: if the algorithm has no primitive.

        :returns: :class:`~magiccrypt.digests.DigestResult`
        """
        entry = self.resolve(salt, required=True)
        return self.dispatch(entry.name, password)

    def encrypt(self, password, salt):
        """hash password with the algorithm selected by the salt,
        returning ``salt + b"$" + raw_digest``.

        raises the same errors as :meth:`crypt`.
        """
        return encode(salt, self.crypt(password, salt))

    #===================================================================
    # eoc
    #===================================================================

#=========================================================
# default instance
#=========================================================

#: dispatcher recognizing every known algorithm, using prefix matching
default_dispatcher = CryptDispatcher()

#=========================================================
# eof
#=========================================================
