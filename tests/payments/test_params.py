from infrastructure.external.payments.wechat import Params


def test_setters_chain_and_mutate_in_place():
    p = Params()
    same = p.set_string("body", "test").set_int("total_fee", 100)
    assert same is p
    assert p == {"body": "test", "total_fee": "100"}


def test_get_string_defaults_to_empty():
    p = Params({"a": "1"})
    assert p.get_string("a") == "1"
    assert p.get_string("missing") == ""


def test_get_int_is_zero_when_absent_or_malformed():
    p = Params({"n": "42", "neg": "-7", "plus": "+3", "bad": "4x", "blank": "", "spaced": " 5", "float": "1.5"})
    assert p.get_int("n") == 42
    assert p.get_int("neg") == -7
    assert p.get_int("plus") == 3
    assert p.get_int("bad") == 0
    assert p.get_int("blank") == 0
    assert p.get_int("spaced") == 0
    assert p.get_int("float") == 0
    assert p.get_int("missing") == 0


def test_contains_key_is_case_sensitive():
    p = Params().set_string("appid", "wx1")
    assert p.contains_key("appid")
    assert not p.contains_key("AppId")
