"""
XML <-> Params codec for the WeChat Pay v2 wire format.

Documents are flat: a ``<xml>`` root with one child per field, each value
wrapped in CDATA::

    <xml><appid><![CDATA[wx123]]></appid><mch_id><![CDATA[10000]]></mch_id></xml>
"""
from __future__ import annotations

import re
from typing import Union

from lxml import etree

from core.logging_config import get_logger
from infrastructure.external.payments.wechat.params import Params


logger = get_logger(__name__)

ROOT_TAG = "xml"

# Leading declaration or other PI; after compact() "<?xml version=...?>"
# becomes "<?xmlversion=...?>", which lxml refuses.
_LEADING_PI = re.compile(rb"\A(?:\s*<\?.*?\?>)+", re.DOTALL)


def to_xml(params: dict[str, str]) -> str:
    """Serialize ``params`` in iteration order; values are not escaped."""
    parts = [f"<{ROOT_TAG}>"]
    for key, value in params.items():
        parts.append(f"<{key}><![CDATA[{value}]]></{key}>")
    parts.append(f"</{ROOT_TAG}>")
    return "".join(parts)


def compact(document: str) -> str:
    """Strip every newline and space character from the raw text.

    This is textual, not XML-aware: spaces inside values go too.
    """
    return document.replace("\n", "").replace(" ", "")


class _FlatTarget:
    """lxml parser target: two states, awaiting a tag or holding one.

    A start element (other than the root) moves to the holding state; the
    character data that follows becomes that tag's value and the machine goes
    back to awaiting. A bare newline is not treated as a value.
    """

    def __init__(self) -> None:
        self.result = Params()
        self._tag: str | None = None
        self._text: list[str] = []

    def _flush(self) -> None:
        if self._tag is not None and self._text:
            value = "".join(self._text)
            if value != "\n":
                self.result[self._tag] = value
            self._tag = None
        self._text = []

    def start(self, tag, attrib) -> None:
        self._flush()
        name = etree.QName(tag).localname
        self._tag = None if name == ROOT_TAG else name

    def data(self, data: str) -> None:
        if self._tag is not None:
            self._text.append(data)

    def end(self, tag) -> None:
        self._flush()

    def close(self) -> Params:
        self._flush()
        return self.result


def from_xml(document: Union[str, bytes]) -> Params:
    """Decode a flat WeChat XML document.

    Leading processing instructions are dropped. Decoding stops at the first
    parse error; whatever was read up to that point is returned.
    """
    if isinstance(document, str):
        document = document.encode("utf-8")
    document = _LEADING_PI.sub(b"", document)
    target = _FlatTarget()
    parser = etree.XMLParser(
        target=target,
        resolve_entities=False,
        no_network=True,
        strip_cdata=True,
    )
    try:
        parser.feed(document)
        return parser.close()
    except etree.LxmlError as exc:
        partial = target.close()
        logger.warning("wechat.xml.partial", error=str(exc), fields=len(partial))
        return partial
