"""magiccrypt - crypt(3)-style algorithm dispatch by magic salt prefix"""

__version__ = "0.1"

#=========================================================
#quickstart interface
#=========================================================
from magiccrypt.context import default_dispatcher

def identify(salt):
    """Identify the algorithm selected by a salt's magic prefix.

    :arg salt:
        The salt (bytes or unicode) to identify.

    The following prefixes are currently recognized:

        =============== ================================================
        Prefix          Name
        --------------- ------------------------------------------------
        ``$1$``         ``"md5"``
        ``$2``          ``"blowfish"`` (recognized, no digest available)
        ``$3$``         ``"nt_hash"`` (recognized, no digest available)
        ``$5$``         ``"sha256"``
        ``$6$``         ``"sha512"``
        (anything else) ``"des"`` (recognized, no digest available)
        =============== ================================================

    :returns:
        The name of the algorithm, or ``None`` if the salt could not be identified.

    .. note::
        This is a convenience wrapper for ``default_dispatcher.identify(salt)``.
    """
    return default_dispatcher.identify(salt)

def resolve(salt):
    """Return the :class:`~magiccrypt.registry.AlgorithmEntry` selected by a salt,
    or ``None``. Wrapper for ``default_dispatcher.resolve(salt)``.
    """
    return default_dispatcher.resolve(salt)

def crypt(password, salt):
    """Hash password using the algorithm named by the salt's magic prefix.

    :type password: bytes
    :arg password:
        The secret to hash. Unicode strings are encoded as utf-8.

    :type salt: bytes
    :arg salt:
        The salt. Only its magic prefix is used; it is not mixed into the digest.

    :raises magiccrypt.exc.NoAlgorithmFound:
        if the salt selects no known algorithm.

    :raises magiccrypt.exc.UnsupportedAlgorithm:
        if the salt selects an algorithm with no digest primitive.

    :returns:
        :class:`~magiccrypt.digests.DigestResult` holding the raw digest.
    """
    return default_dispatcher.crypt(password, salt)

def encrypt(password, salt):
    """Like :func:`crypt`, but returns ``salt + b"$" + raw_digest``.

    .. warning::
        This is not the encoding used by the system :func:`!crypt(3)`,
        and the two outputs are not interchangeable.
    """
    return default_dispatcher.encrypt(password, salt)

#=========================================================
#eof
#=========================================================
