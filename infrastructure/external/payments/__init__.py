"""
Factory for payment gateway clients.
"""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

from core.settings import PaymentSettings, payment_settings
from application.ports.payment_gateway import PaymentGateway
from domain.common.exceptions import DomainValidationException


def _wechat_from_settings(cfg: PaymentSettings) -> PaymentGateway:
    from .wechat import DEFAULT_ENDPOINTS, Account, WechatPayClient

    wx = cfg.wechat
    for name in ("app_id", "mch_id", "api_key"):
        if not getattr(wx, name):
            raise DomainValidationException(
                f"WECHAT configuration incomplete: {name} is not set",
                field=f"wechat.{name}",
            )
    cert_data = None
    if wx.cert_path:
        cert_file = Path(wx.cert_path)
        cert_data = cert_file.read_bytes() if cert_file.exists() else None
    account = Account(
        app_id=wx.app_id,
        mch_id=wx.mch_id,
        api_key=wx.api_key,
        sandbox=wx.sandbox,
        cert_data=cert_data,
    )
    overrides = wx.endpoints.model_dump(exclude_none=True)
    return WechatPayClient(
        account,
        sign_type=wx.sign_type,
        connect_timeout_ms=cfg.timeouts.connect_ms,
        read_timeout_ms=cfg.timeouts.read_ms,
        endpoints=replace(DEFAULT_ENDPOINTS, **overrides),
    )


def get_payment_gateway(provider: Optional[str] = None, settings: Optional[PaymentSettings] = None) -> PaymentGateway:
    cfg = settings or payment_settings
    name = (provider or cfg.default_provider).lower()
    if name in {"wechat", "wechatpay", "wx"}:
        return _wechat_from_settings(cfg)
    raise ValueError(f"Unsupported payment provider: {name}")
