"""
Payment-related settings using pydantic-settings v2 with nested env keys.

Example environment::

    PAYMENT__WECHAT__APP_ID=wx123
    PAYMENT__WECHAT__MCH_ID=10000
    PAYMENT__WECHAT__API_KEY=...
    PAYMENT__WECHAT__SANDBOX=true
    PAYMENT__TIMEOUTS__CONNECT_MS=2000
"""
from __future__ import annotations

from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field


class PaymentTimeouts(BaseModel):
    # Advisory budgets handed to the HTTP transport
    connect_ms: int = 2000
    read_ms: int = 1000


class WechatEndpoints(BaseModel):
    # Overrides only; unset fields keep the public gateway URLs
    sandbox_unified_order: Optional[str] = None
    sandbox_order_query: Optional[str] = None
    sandbox_sign_key: Optional[str] = None
    unified_order: Optional[str] = None
    order_query: Optional[str] = None


class WechatSettings(BaseModel):
    app_id: Optional[str] = None
    mch_id: Optional[str] = None
    api_key: Optional[str] = None
    cert_path: Optional[str] = None
    sandbox: bool = False
    sign_type: Literal["MD5", "HMAC-SHA256"] = "MD5"
    endpoints: WechatEndpoints = Field(default_factory=WechatEndpoints)


class PaymentSettings(BaseSettings):
    default_provider: str = "wechat"
    timeouts: PaymentTimeouts = Field(default_factory=PaymentTimeouts)
    wechat: WechatSettings = Field(default_factory=WechatSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PAYMENT__",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )


payment_settings = PaymentSettings()
