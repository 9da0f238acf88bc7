from types import SimpleNamespace

from ..utils.hasher import PasswordHasher
from ..utils.sanitizer import Sanitizer


def test_sanitizer_escapes_script():
    cleaned = Sanitizer().clean("<script>alert(1)</script>")
    assert cleaned == "&lt;script&gt;alert(1)&lt;/script&gt;"


def test_sanitizer_keeps_plain_text():
    assert Sanitizer().clean("hey there") == "hey there"


def test_sanitizer_keeps_allowed_tags_without_attributes():
    s = Sanitizer()
    assert s.clean("<b>bold</b>") == "<b>bold</b>"
    assert s.clean('<b onclick="steal()">bold</b>') == "<b>bold</b>"


def test_sanitizer_none_and_empty():
    s = Sanitizer()
    assert s.clean(None) == ""
    assert s.clean("") == ""


def test_sanitizer_init_app_overrides_tags():
    s = Sanitizer()
    s.init_app(SimpleNamespace(config={"SANITIZER_ALLOWED_TAGS": ()}))
    assert s.clean("<b>bold</b>") == "&lt;b&gt;bold&lt;/b&gt;"


def test_hasher_roundtrip():
    h = PasswordHasher(method="pbkdf2:sha256:1000")
    hashed = h.hash("aI8&hfakeuh")
    assert hashed != "aI8&hfakeuh"
    assert hashed.startswith("pbkdf2:sha256:1000")
    assert h.verify("aI8&hfakeuh", hashed)
    assert not h.verify("aI8&hfakeuh!", hashed)


def test_hasher_salts_each_hash():
    h = PasswordHasher(method="pbkdf2:sha256:1000")
    assert h.hash("aI8&hfakeuh") != h.hash("aI8&hfakeuh")


def test_hasher_init_app_reads_method():
    h = PasswordHasher()
    h.init_app(SimpleNamespace(config={"PASSWORD_HASH_METHOD": "pbkdf2:sha256:2000"}))
    assert h.method == "pbkdf2:sha256:2000"
    assert h.hash("x").startswith("pbkdf2:sha256:2000")


def test_hasher_verify_empty_hash():
    assert not PasswordHasher().verify("x", "")


def test_sanitizer_leaves_ampersands_alone():
    s = Sanitizer()
    assert s.clean("Tom & Jerry") == "Tom & Jerry"
    assert s.clean("R&D") == "R&D"
    assert s.clean("a &lt; b") == "a &lt; b"
    assert s.clean("it's \"quoted\"") == "it's \"quoted\""


def test_sanitizer_escapes_markup_around_ampersand():
    assert Sanitizer().clean("<script>a&b</script>") == "&lt;script&gt;a&b&lt;/script&gt;"
