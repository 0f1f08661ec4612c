"""
WeChat Pay v2 (XML) client: signed map requests over HTTPS.
"""
from .account import DEFAULT_ENDPOINTS, Account, Endpoints, Operation
from .client import WechatPayClient, nonce_str
from .params import Params
from .signer import SignType, sign, verify
from .xml_codec import compact, from_xml, to_xml
from shared.codes.payment_codes import WECHAT_SUCCESS as SUCCESS

__all__ = [
    "DEFAULT_ENDPOINTS",
    "Account",
    "Endpoints",
    "Operation",
    "Params",
    "SUCCESS",
    "SignType",
    "WechatPayClient",
    "compact",
    "from_xml",
    "nonce_str",
    "sign",
    "to_xml",
    "verify",
]
