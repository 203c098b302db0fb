from gameframe.text import ascii_to_unicode, to_upper


def test_to_upper_ascii():
    assert to_upper("chatLevel") == "CHATLEVEL"


def test_to_upper_matches_str_upper_for_ascii():
    sample = "abc XYZ 123 _-"
    assert to_upper(sample) == sample.upper()


def test_to_upper_leaves_non_ascii():
    assert to_upper("é") == "é"
    assert len(to_upper("straße")) == len("straße")


def test_to_upper_is_idempotent():
    once = to_upper("MixedCase")
    assert to_upper(once) == once


def test_ascii_to_unicode_round_trip():
    assert ascii_to_unicode(b"ChatServer") == "ChatServer"
    assert ascii_to_unicode(b"") == ""