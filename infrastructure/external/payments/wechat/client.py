"""
WeChat Pay v2 (XML API) adapter.

Features:
- Unified order (create) and order query round trips, sandbox or production
- MD5 / HMAC-SHA256 request signing with the merchant API key
- JSAPI bridge parameters and sandbox sign-key retrieval

Response fields are returned as decoded; ``return_code``/``result_code`` are
left for the caller to inspect.
"""
from __future__ import annotations

import time
from typing import Callable, Mapping, Optional

import httpx

from infrastructure.external.payments.base import BasePaymentClient
from infrastructure.external.payments.exceptions import PaymentSignatureError
from infrastructure.external.payments.wechat import signer
from infrastructure.external.payments.wechat.account import (
    DEFAULT_ENDPOINTS,
    Account,
    Endpoints,
    Operation,
)
from infrastructure.external.payments.wechat.params import Params
from infrastructure.external.payments.wechat.signer import SignType
from infrastructure.external.payments.wechat.xml_codec import compact, from_xml, to_xml


BODY_TYPE = "application/xml; charset=utf-8"


def nonce_str() -> str:
    """Decimal UTC epoch time in nanoseconds.

    Uniqueness rests on clock resolution only; two calls within the same tick
    get the same value.
    """
    return str(time.time_ns())


class WechatPayClient(BasePaymentClient):
    provider = "wechat"

    def __init__(
        self,
        account: Account,
        *,
        sign_type: SignType | str = SignType.MD5,
        connect_timeout_ms: int = 2000,
        read_timeout_ms: int = 1000,
        endpoints: Endpoints = DEFAULT_ENDPOINTS,
        http_client: Optional[httpx.Client] = None,
        nonce_factory: Callable[[], str] = nonce_str,
    ) -> None:
        super().__init__(
            connect_timeout_ms=connect_timeout_ms,
            read_timeout_ms=read_timeout_ms,
            http_client=http_client,
        )
        self.account = account
        self.sign_type = SignType(sign_type)
        self.endpoints = endpoints
        self._nonce = nonce_factory

    # ==================== signing ====================

    def sign(self, params: Mapping[str, str]) -> str:
        return signer.sign(params, self.account.api_key, self.sign_type)

    def verify_sign(self, params: Mapping[str, str]) -> bool:
        return signer.verify(params, self.account.api_key, self.sign_type)

    def ensure_signed(self, params: Mapping[str, str]) -> None:
        """Raise PaymentSignatureError unless ``params`` carries a valid sign."""
        if not self.verify_sign(params):
            raise PaymentSignatureError(
                "invalid or missing sign",
                provider=self.provider,
                details={"sign_type": self.sign_type.value},
            )

    # ==================== main API ====================

    def execute(self, operation: Operation | str, params: Mapping[str, str]) -> Params:
        """Sign ``params``, POST them to the endpoint for ``operation`` and decode the reply.

        A ``Params`` argument is extended in place with appid, mch_id,
        nonce_str, sign_type and sign; other mappings are copied first.
        """
        operation = Operation(operation)
        url = self.endpoints.resolve(operation, self.account.sandbox)
        request = params if isinstance(params, Params) else Params(params)
        request = (
            request.set_string("appid", self.account.app_id)
            .set_string("mch_id", self.account.mch_id)
            .set_string("nonce_str", self._nonce())
            .set_string("sign_type", self.sign_type.value)
        )
        # Must come last: the signature covers every field merged above
        request.set_string(signer.SIGN_FIELD, self.sign(request))

        self._log("wechat.request", operation=operation.value, url=url, sandbox=self.account.sandbox)
        return self._exchange(url, request)

    def unified_order(self, params: Mapping[str, str]) -> Params:
        return self.execute(Operation.UNIFIED_ORDER, params)

    def order_query(self, params: Mapping[str, str]) -> Params:
        return self.execute(Operation.ORDER_QUERY, params)

    def pay_params(self, prepay_id: str, nonce: Optional[str] = None) -> Params:
        """JSAPI parameters handed to the payer's WeChat client, ``paySign`` included."""
        params = (
            Params()
            .set_string("appId", self.account.app_id)
            .set_string("nonceStr", nonce if nonce is not None else self._nonce())
            .set_string("package", f"prepay_id={prepay_id}")
            .set_string("signType", self.sign_type.value)
            .set_int("timeStamp", int(time.time()))
        )
        return params.set_string("paySign", self.sign(params))

    def get_sandbox_sign_key(self) -> Params:
        """Fetch ``sandbox_signkey``; the sandbox only accepts an MD5 signature here."""
        request = Params().set_string("mch_id", self.account.mch_id).set_string("nonce_str", self._nonce())
        request.set_string(signer.SIGN_FIELD, signer.sign(request, self.account.api_key, SignType.MD5))
        url = self.endpoints.sandbox_sign_key
        self._log("wechat.request", operation="sandbox_sign_key", url=url, sandbox=True)
        return self._exchange(url, request)

    def _exchange(self, url: str, request: Params) -> Params:
        response = self._post(url, to_xml(request).encode("utf-8"), BODY_TYPE)
        result = from_xml(compact(response.text))
        self._log(
            "wechat.response",
            url=url,
            status_code=response.status_code,
            return_code=result.get_string("return_code"),
            result_code=result.get_string("result_code"),
        )
        return result
