"""magiccrypt.exc -- exceptions & warnings raised by magiccrypt"""
#==========================================================================
# exceptions
#==========================================================================
class MagicCryptError(ValueError):
    """base class for errors raised while dispatching a salt to an algorithm.

    :exc:`!MagicCryptError` derives from :exc:`ValueError`,
    since it always indicates a problem with the salt provided by the caller.
    """

class NoAlgorithmFound(MagicCryptError):
    """Error raised when a salt matches none of the known magic prefixes.

    The offending salt is available as the :attr:`salt` attribute.
    """
    def __init__(self, salt=None):
        self.salt = salt
        MagicCryptError.__init__(self, "salt does not match any known algorithm")

class UnsupportedAlgorithm(MagicCryptError):
    """Error raised when a salt was identified as belonging to
    a known algorithm, but no digest primitive is available for it.

    This is distinct from :exc:`NoAlgorithmFound`, allowing callers to tell
    an unknown format from a known-but-unimplemented one.
    The algorithm name is available as the :attr:`name` attribute.
    """
    def __init__(self, name):
        self.name = name
        MagicCryptError.__init__(self, "algorithm not supported: %r" % (name,))

#==========================================================================
# warnings
#==========================================================================
class MagicCryptWarning(UserWarning):
    """base class for magiccrypt's user warnings"""

class MagicCryptConfigWarning(MagicCryptWarning):
    """Warning issued when a non-fatal issue is found in the configuration
    of a :class:`~magiccrypt.context.CryptDispatcher`, or in the name
    used to look up an algorithm.

    This occurs primarily when a hyphenated algorithm name is normalized,
    or when a scheme is listed more than once.
    """

#==========================================================================
# error constructors
#==========================================================================
def type_name(value):
    "return pretty-printed string containing name of value's type"
    cls = value.__class__
    if cls.__module__ and cls.__module__ != "builtins":
        return "%s.%s" % (cls.__module__, cls.__name__)
    elif value is None:
        return 'None'
    else:
        return cls.__name__

def ExpectedTypeError(value, expected, param):
    "error message when param was supposed to be one type, but found another"
    # NOTE: value is never displayed, since it may sometimes be a password.
    name = type_name(value)
    return TypeError("%s must be %s, not %s" % (param, expected, name))

def ExpectedStringError(value, param):
    "error message when param was supposed to be unicode or bytes"
    return ExpectedTypeError(value, "unicode or bytes", param)

#==========================================================================
# eof
#==========================================================================
