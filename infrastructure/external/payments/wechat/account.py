"""
Merchant identity and gateway endpoints.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Operation(str, Enum):
    UNIFIED_ORDER = "unified_order"
    ORDER_QUERY = "order_query"


@dataclass(frozen=True)
class Account:
    """WeChat Pay merchant account; ``sandbox`` selects the sandbox endpoints."""

    app_id: str
    mch_id: str
    api_key: str = field(repr=False)
    sandbox: bool = False
    # Client certificate (PKCS#12); not needed by order create/query
    cert_data: Optional[bytes] = field(default=None, repr=False)


@dataclass(frozen=True)
class Endpoints:
    sandbox_unified_order: str = "https://api.mch.weixin.qq.com/sandboxnew/pay/unifiedorder"
    sandbox_order_query: str = "https://api.mch.weixin.qq.com/sandboxnew/pay/orderquery"
    sandbox_sign_key: str = "https://api.mch.weixin.qq.com/sandboxnew/pay/getsignkey"
    unified_order: str = "https://api.mch.weixin.qq.com/pay/unifiedorder"
    order_query: str = "https://api.mch.weixin.qq.com/pay/orderquery"

    def resolve(self, operation: Operation, sandbox: bool) -> str:
        operation = Operation(operation)
        name = f"sandbox_{operation.value}" if sandbox else operation.value
        return getattr(self, name)


DEFAULT_ENDPOINTS = Endpoints()
