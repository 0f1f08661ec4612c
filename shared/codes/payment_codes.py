"""
Payment specific codes and WeChat Pay protocol markers.
"""
from __future__ import annotations

from enum import IntEnum


class PaymentCode(IntEnum):
    # Generic success
    SUCCESS = 0

    # Provider/Network errors (6xxxx)
    PROVIDER_ERROR = 60000
    SIGNATURE_ERROR = 60002


# Value of return_code / result_code on success. The client never interprets
# it; callers inspect the returned map.
WECHAT_SUCCESS = "SUCCESS"
