import pytest
from pydantic import ValidationError

from core.settings import PaymentSettings, PaymentTimeouts, WechatEndpoints, WechatSettings
from domain.common.exceptions import DomainValidationException
from infrastructure.external.payments import get_payment_gateway
from infrastructure.external.payments.wechat import SignType, WechatPayClient


def _settings(**wechat):
    base = {"app_id": "wx123", "mch_id": "10000", "api_key": "secretkey"}
    base.update(wechat)
    return PaymentSettings(wechat=WechatSettings(**base), timeouts=PaymentTimeouts(connect_ms=3000, read_ms=1500))


def test_factory_builds_wechat_client(tmp_path):
    cert = tmp_path / "apiclient_cert.p12"
    cert.write_bytes(b"cert-bytes")
    gw = get_payment_gateway(
        "wechat",
        settings=_settings(sandbox=True, sign_type="HMAC-SHA256", cert_path=str(cert)),
    )
    try:
        assert isinstance(gw, WechatPayClient)
        assert gw.account.sandbox is True
        assert gw.account.cert_data == b"cert-bytes"
        assert gw.sign_type is SignType.HMAC_SHA256
        assert gw.timeouts.connect == 3.0
        assert gw.timeouts.read == 1.5
    finally:
        gw.close()


def test_factory_applies_endpoint_overrides():
    settings = _settings(endpoints=WechatEndpoints(order_query="http://gateway.test/orderquery"))
    gw = get_payment_gateway("wx", settings=settings)
    try:
        assert gw.endpoints.order_query == "http://gateway.test/orderquery"
        assert gw.endpoints.unified_order == "https://api.mch.weixin.qq.com/pay/unifiedorder"
    finally:
        gw.close()


def test_factory_rejects_incomplete_config():
    with pytest.raises(DomainValidationException) as ei:
        get_payment_gateway("wechat", settings=_settings(api_key=None))
    assert ei.value.field == "wechat.api_key"


def test_factory_rejects_unknown_provider():
    with pytest.raises(ValueError):
        get_payment_gateway("stripe", settings=_settings())


def test_sign_type_is_validated():
    with pytest.raises(ValidationError):
        WechatSettings(sign_type="SHA1")


def test_settings_read_nested_env(monkeypatch):
    monkeypatch.setenv("PAYMENT__WECHAT__APP_ID", "wx999")
    monkeypatch.setenv("PAYMENT__WECHAT__SANDBOX", "true")
    monkeypatch.setenv("PAYMENT__TIMEOUTS__CONNECT_MS", "2500")
    cfg = PaymentSettings()
    assert cfg.wechat.app_id == "wx999"
    assert cfg.wechat.sandbox is True
    assert cfg.timeouts.connect_ms == 2500
    assert cfg.timeouts.read_ms == 1000
