from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure tests always import the local src tree, not an older installed wheel.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

QUOTE_WSDL = """<?xml version="1.0" encoding="UTF-8"?>
<definitions name="QuoteService"
             targetNamespace="http://example.com/quote.wsdl"
             xmlns="http://schemas.xmlsoap.org/wsdl/"
             xmlns:tns="http://example.com/quote.wsdl"
             xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <message name="GetQuoteRequest">
    <part name="symbol" type="xsd:string"/>
  </message>
  <message name="GetQuoteResponse">
    <part name="price" type="xsd:float" minOccurs="0"/>
  </message>
  <portType name="QuotePortType">
    <operation name="GetQuote">
      <input message="tns:GetQuoteRequest"/>
      <output message="tns:GetQuoteResponse"/>
    </operation>
  </portType>
</definitions>
"""

NO_OPERATIONS_WSDL = """<?xml version="1.0" encoding="UTF-8"?>
<definitions xmlns="http://schemas.xmlsoap.org/wsdl/">
  <message name="Ping">
    <part name="sentAt" type="xsd:dateTime"/>
  </message>
  <portType name="Empty"/>
</definitions>
"""

NO_MESSAGES_WSDL = """<?xml version="1.0" encoding="UTF-8"?>
<definitions xmlns="http://schemas.xmlsoap.org/wsdl/">
  <portType name="Empty"/>
</definitions>
"""


@pytest.fixture
def quote_wsdl(tmp_path: Path) -> Path:
    path = tmp_path / "quote_service.wsdl"
    path.write_text(QUOTE_WSDL, encoding="utf-8")
    return path


@pytest.fixture
def no_operations_wsdl(tmp_path: Path) -> Path:
    path = tmp_path / "ping.wsdl"
    path.write_text(NO_OPERATIONS_WSDL, encoding="utf-8")
    return path


@pytest.fixture
def no_messages_wsdl(tmp_path: Path) -> Path:
    path = tmp_path / "empty.wsdl"
    path.write_text(NO_MESSAGES_WSDL, encoding="utf-8")
    return path
