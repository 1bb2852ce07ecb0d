"""helpers for magiccrypt unittests"""
#=========================================================
#imports
#=========================================================
#core
import logging; log = logging.getLogger(__name__)
import unittest
import warnings
#site
#pkg
#local
__all__ = [
    'TestCase',
    'catch_warnings',
]

#=========================================================
#misc utility funcs
#=========================================================
def catch_warnings(record=True):
    "return context manager which captures all warnings (overriding filters)"
    ctx = warnings.catch_warnings(record=record)
    return _AlwaysWarn(ctx)

class _AlwaysWarn(object):
    "wraps catch_warnings() so every warning is recorded, even repeats"

    def __init__(self, ctx):
        self._ctx = ctx

    def __enter__(self):
        wlist = self._ctx.__enter__()
        warnings.simplefilter("always")
        return wlist

    def __exit__(self, *exc_info):
        return self._ctx.__exit__(*exc_info)

#=========================================================
#custom test base
#=========================================================
class TestCase(unittest.TestCase):
    """magiccrypt-specific test case class

    this class adds a number of features to the standard TestCase...
    * common prefix for all test descriptions
    * resets warnings filter for every test
    * suite of methods for matching against warnings
    """
    #----------------------------------------------------------------
    # make it easy for test cases to add common prefix to shortDescription
    #----------------------------------------------------------------

    # string prepended to all tests in TestCase
    descriptionPrefix = None

    def shortDescription(self):
        "wrap shortDescription() method to prepend descriptionPrefix"
        desc = super(TestCase, self).shortDescription()
        prefix = self.descriptionPrefix
        if prefix:
            desc = "%s: %s" % (prefix, desc or str(self))
        return desc

    #----------------------------------------------------------------
    # reset warning filters before each test
    #----------------------------------------------------------------
    resetWarningState = True

    def setUp(self):
        super(TestCase, self).setUp()
        if self.resetWarningState:
            ctx = warnings.catch_warnings()
            ctx.__enter__()
            self.addCleanup(ctx.__exit__, None, None, None)
            warnings.resetwarnings()

    #============================================================
    # custom methods for matching warnings
    #============================================================
    def assertWarning(self, warning, message_re=None, category=None, msg=None):
        "check if WarningMessage instance (as returned by catch_warnings) matches parameters"
        if hasattr(warning, "category"):
            warning = warning.message
        if message_re:
            self.assertRegex(str(warning), message_re, msg)
        if category:
            self.assertIsInstance(warning, category, msg)

    def assertWarningList(self, wlist, desc=None, msg=None):
        """check that warning list (e.g. from catch_warnings) matches pattern"""
        if not isinstance(desc, (list, tuple)):
            desc = [] if desc is None else [desc]
        self.assertEqual(len(wlist), len(desc),
                         "expected %d warnings, found %d: wlist=%r desc=%r" %
                         (len(desc), len(wlist),
                          [str(w.message) for w in wlist], desc))
        for data, entry in zip(wlist, desc):
            if isinstance(entry, str):
                entry = dict(message_re=entry)
            elif isinstance(entry, type) and issubclass(entry, Warning):
                entry = dict(category=entry)
            elif not isinstance(entry, dict):
                raise TypeError("entry must be str, warning, or dict")
            self.assertWarning(data, msg=msg, **entry)

    def consumeWarningList(self, wlist, *args, **kwds):
        """assertWarningList() variant that clears list afterwards"""
        self.assertWarningList(wlist, *args, **kwds)
        del wlist[:]

    #============================================================
    #eoc
    #============================================================

#=========================================================
#EOF
#=========================================================
