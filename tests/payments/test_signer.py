import hashlib
import hmac

import pytest

from infrastructure.external.payments.wechat import SignType, sign, verify
from infrastructure.external.payments.wechat.signer import signing_string


FIELDS = {"body": "test", "out_trade_no": "ORDER1", "total_fee": "100", "appid": "wx123"}


def test_signing_string_sorted_skips_sign_and_empty_values():
    params = {"b": "2", "a": "1", "sign": "OLD", "empty": ""}
    assert signing_string(params, "k") == "a=1&b=2&key=k"


def test_signing_string_with_no_fields_is_only_key():
    assert signing_string({}, "k") == "key=k"


def test_md5_matches_manual_digest():
    expected = hashlib.md5(
        b"appid=wx123&body=test&out_trade_no=ORDER1&total_fee=100&key=secretkey"
    ).hexdigest().upper()
    assert sign(FIELDS, "secretkey", SignType.MD5) == expected


def test_hmac_sha256_keyed_with_api_key():
    payload = b"appid=wx123&body=test&out_trade_no=ORDER1&total_fee=100&key=secretkey"
    expected = hmac.new(b"secretkey", payload, hashlib.sha256).hexdigest().upper()
    assert sign(FIELDS, "secretkey", SignType.HMAC_SHA256) == expected
    assert sign(FIELDS, "secretkey", "HMAC-SHA256") == expected


@pytest.mark.parametrize("sign_type,length", [(SignType.MD5, 32), (SignType.HMAC_SHA256, 64)])
def test_digest_is_uppercase_hex(sign_type, length):
    value = sign(FIELDS, "secretkey", sign_type)
    assert len(value) == length
    assert value == value.upper()
    int(value, 16)


def test_insertion_order_does_not_matter():
    reordered = dict(reversed(list(FIELDS.items())))
    assert sign(FIELDS, "k") == sign(reordered, "k")


def test_empty_values_are_excluded():
    assert sign({"a": "1", "b": ""}, "k") == sign({"a": "1"}, "k")


def test_existing_sign_field_is_ignored():
    assert sign({"a": "1", "sign": "ABC"}, "k") == sign({"a": "1"}, "k")


def test_unknown_sign_type_rejected():
    with pytest.raises(ValueError):
        sign(FIELDS, "k", "SHA1")


def test_verify_accepts_own_signature_and_rejects_tampering():
    signed = dict(FIELDS, sign=sign(FIELDS, "k"))
    assert verify(signed, "k")
    assert not verify(dict(signed, total_fee="1"), "k")
    assert not verify(signed, "other")
    assert not verify(FIELDS, "k")
