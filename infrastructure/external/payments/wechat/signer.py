"""
WeChat Pay v2 request signature.

Signing string: every field except ``sign``, keys sorted ascending, fields
with empty values left out, joined as ``k=v&`` and terminated by
``key=<api_key>``. The digest is MD5 or HMAC-SHA256 (keyed with the API key)
rendered as upper-case hex.
"""
from __future__ import annotations

import hashlib
import hmac
from enum import Enum
from typing import Mapping


SIGN_FIELD = "sign"


class SignType(str, Enum):
    MD5 = "MD5"
    HMAC_SHA256 = "HMAC-SHA256"


def signing_string(params: Mapping[str, str], api_key: str) -> str:
    """Build the canonical string that gets digested."""
    parts = []
    for key in sorted(k for k in params if k != SIGN_FIELD):
        value = params[key]
        if value:
            parts.append(f"{key}={value}&")
    parts.append(f"key={api_key}")
    return "".join(parts)


def sign(
    params: Mapping[str, str],
    api_key: str,
    sign_type: SignType | str = SignType.MD5,
) -> str:
    sign_type = SignType(sign_type)
    payload = signing_string(params, api_key).encode("utf-8")
    if sign_type is SignType.HMAC_SHA256:
        digest = hmac.new(api_key.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    else:
        digest = hashlib.md5(payload).hexdigest()
    return digest.upper()


def verify(
    params: Mapping[str, str],
    api_key: str,
    sign_type: SignType | str = SignType.MD5,
) -> bool:
    """Check ``params["sign"]`` against a freshly computed signature."""
    provided = params.get(SIGN_FIELD)
    if not provided:
        return False
    expected = sign(params, api_key, sign_type)
    return hmac.compare_digest(expected.encode("utf-8"), provided.upper().encode("utf-8"))
