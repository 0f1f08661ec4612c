"""
Shared business codes used across layers (Domain/Core/Infrastructure).

This package exposes BusinessCode at `shared.codes` and keeps
payment-specific codes under `shared.codes.payment_codes`.
"""
from enum import IntEnum


class BusinessCode(IntEnum):
    """Unified business status codes (single source of truth)."""

    # Success
    SUCCESS = 0

    # Parameter errors (1xxxx)
    PARAM_ERROR = 10000
    PARAM_MISSING = 10001
    PARAM_VALIDATION_ERROR = 10003

    # System errors (4xxxx)
    SYSTEM_ERROR = 40000
    NETWORK_ERROR = 40002


__all__ = ["BusinessCode"]
