from eventhub.services.utils import parse_id, missing_fields


def test_parse_id():
    assert parse_id("7") == 7
    assert parse_id(" 12 ") == 12
    assert parse_id(3) == 3
    assert parse_id("abc") is None
    assert parse_id("1.5") is None
    assert parse_id(True) is None
    assert parse_id(str(2**70)) is None


def test_missing_fields():
    assert missing_fields({"name": "a", "email": "b"}, ("name", "email")) == []
    assert missing_fields({"name": "", "email": None}, ("name", "email")) == ["name", "email"]
    assert missing_fields({}, ("name",)) == ["name"]


def test_parse_id_rejects_python_only_spellings():
    assert parse_id("1_0") is None
    assert parse_id("١") is None
    assert parse_id("0x1") is None
    assert parse_id("+5") == 5
    assert parse_id("-2") == -2
