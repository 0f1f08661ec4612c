"""
Payment gateway port (application/ports) exposing a replaceable protocol.

Application code depends on this Protocol; infrastructure implements adapters.
"""
from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class PaymentGateway(Protocol):
    """Gateway protocol for map-based (v2 XML) payment providers.

    Implementations are synchronous: each call performs one HTTP exchange and
    returns the decoded response fields without interpreting them.
    """

    provider: str

    def unified_order(self, params: Mapping[str, str]) -> dict[str, str]: ...

    def order_query(self, params: Mapping[str, str]) -> dict[str, str]: ...

    def close(self) -> None: ...
