"""Pytest bootstrap configuration.

Environment defaults are set before any module reads application settings.
"""
import os

os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import httpx
import pytest

from infrastructure.external.payments.wechat import Account, WechatPayClient
from tests.payments.fakes import FIXED_NONCE, FakeGateway


@pytest.fixture
def account():
    return Account(app_id="wx123", mch_id="10000", api_key="secretkey")


@pytest.fixture
def sandbox_account():
    return Account(app_id="wx123", mch_id="10000", api_key="secretkey", sandbox=True)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def make_client(gateway):
    """Build clients wired to ``gateway`` with a fixed nonce."""
    transports = []

    def _make(acct, **kwargs):
        kwargs.setdefault("nonce_factory", lambda: FIXED_NONCE)
        http = httpx.Client(transport=httpx.MockTransport(gateway))
        transports.append(http)
        return WechatPayClient(acct, http_client=http, **kwargs)

    yield _make
    for http in transports:
        http.close()
