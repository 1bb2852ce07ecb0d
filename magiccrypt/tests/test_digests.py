"""tests for magiccrypt.digests"""
#=========================================================
#imports
#=========================================================
#core
import hashlib
from logging import getLogger
#site
#pkg
from magiccrypt.digests import DIGEST_SIZES, DigestResult, DigestPrimitive, \
    create_digest_primitive, wrap_digest_function, is_digest_primitive, \
    encode, md5, sha256, sha512
from magiccrypt.tests.utils import TestCase
#module
log = getLogger(__name__)

#=========================================================
#digest result
#=========================================================
class DigestResultTest(TestCase):

    descriptionPrefix = "DigestResult"

    def test_sizes(self):
        "test digest size is enforced for builtin algorithms"
        self.assertEqual(DIGEST_SIZES, dict(md5=16, sha256=32, sha512=64))
        for name, size in DIGEST_SIZES.items():
            result = DigestResult(name, b"x" * size)
            self.assertEqual(result.size, size)
            self.assertEqual(bytes(result), b"x" * size)
            self.assertRaises(ValueError, DigestResult, name, b"x" * (size - 1))
            self.assertRaises(ValueError, DigestResult, name, b"x" * (size + 1))

    def test_bad_digest(self):
        "test invalid digest values"
        self.assertRaises(ValueError, DigestResult, "md5", b"")
        self.assertRaises(ValueError, DigestResult, "custom", b"")
        self.assertRaises(TypeError, DigestResult, "md5", "x" * 16)
        self.assertRaises(TypeError, DigestResult, "md5", None)

    def test_custom_algorithm(self):
        "test algorithms without a fixed size accept any non-empty digest"
        result = DigestResult("sha1", hashlib.sha1(b"abc").digest())
        self.assertEqual(result.size, 20)

    def test_equality(self):
        "test results compare by tag and payload"
        digest = hashlib.md5(b"test").digest()
        self.assertEqual(DigestResult("md5", digest), DigestResult("md5", digest))
        self.assertNotEqual(DigestResult("md5", digest), DigestResult("md5", b"\x00" * 16))
        self.assertNotEqual(DigestResult("md5", digest), DigestResult("other", digest))
        algorithm, raw = DigestResult("md5", digest)
        self.assertEqual(algorithm, "md5")
        self.assertIs(raw, digest)

    def test_repr(self):
        "test repr shows hex digest"
        result = DigestResult("md5", hashlib.md5(b"password").digest())
        self.assertEqual(repr(result), "DigestResult('md5', 5f4dcc3b5aa765d61d8327deb882cf99)")
        self.assertEqual(result.hexdigest(), "5f4dcc3b5aa765d61d8327deb882cf99")

#=========================================================
#primitives
#=========================================================
class DigestPrimitiveTest(TestCase):

    descriptionPrefix = "digest primitives"

    def test_builtins(self):
        "test builtin primitives match hashlib"
        for primitive, factory in [(md5, hashlib.md5), (sha256, hashlib.sha256),
                                   (sha512, hashlib.sha512)]:
            self.assertTrue(is_digest_primitive(primitive))
            self.assertEqual(primitive.digest_size, DIGEST_SIZES[primitive.name])
            for secret in [b"", b"abcdefghijklmnop", b"\x00\xff" * 100]:
                self.assertEqual(primitive(secret), factory(secret).digest())

    def test_create(self):
        "test create_digest_primitive()"
        primitive = create_digest_primitive(hashlib.sha1, "sha1")
        self.assertIsInstance(primitive, DigestPrimitive)
        self.assertEqual(primitive.name, "sha1")
        self.assertEqual(primitive.digest_size, 20)
        self.assertEqual(primitive(b"abc"), hashlib.sha1(b"abc").digest())

    def test_wrap_function(self):
        "test wrap_digest_function()"
        func = lambda data: hashlib.sha224(data).digest()
        self.assertEqual(wrap_digest_function("sha224", func),
                         DigestPrimitive("sha224", func, 28))
        self.assertEqual(wrap_digest_function("sha224", func, 28).digest_size, 28)
        self.assertEqual(wrap_digest_function("sha224", func)(b"abc"),
                         hashlib.sha224(b"abc").digest())

        self.assertRaises(TypeError, wrap_digest_function, "sha224", None)
        self.assertRaises(TypeError, wrap_digest_function, "sha224", lambda data: None)
        self.assertRaises(ValueError, wrap_digest_function, "sha224", lambda data: b"")
        self.assertRaises(ValueError, wrap_digest_function, "sha224", func, -1)
        self.assertRaises(ValueError, wrap_digest_function, "sha224", func, "28")

    def test_is_digest_primitive(self):
        "test is_digest_primitive()"
        self.assertFalse(is_digest_primitive(hashlib.md5))
        self.assertFalse(is_digest_primitive(None))
        self.assertFalse(is_digest_primitive(("md5", 16)))

#=========================================================
#encoding
#=========================================================
class EncodeTest(TestCase):

    descriptionPrefix = "encode()"

    def test_encode(self):
        "test salt + '$' + digest layout"
        digest = hashlib.md5(b"pw").digest()
        result = DigestResult("md5", digest)
        self.assertEqual(encode(b"$1$salt", result), b"$1$salt$" + digest)
        self.assertEqual(encode(b"$1$salt", digest), b"$1$salt$" + digest)
        self.assertEqual(encode(u"$1$salt", result), b"$1$salt$" + digest)
        self.assertEqual(encode(b"", result), b"$" + digest)

    def test_bad_types(self):
        "test encode() rejects bad types"
        digest = hashlib.md5(b"pw").digest()
        self.assertRaises(TypeError, encode, None, digest)
        self.assertRaises(TypeError, encode, b"$1$", None)
        self.assertRaises(TypeError, encode, b"$1$", digest.hex())

#=========================================================
#EOF
#=========================================================
