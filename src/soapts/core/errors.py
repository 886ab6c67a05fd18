"""Error types raised by the soapts core.

Every failure that aborts a generation run derives from SoapTsError, so
frontends can catch a single type and report it.
"""


class SoapTsError(RuntimeError):
    """Base class for all soapts failures."""


class SchemaReadError(SoapTsError):
    """Raised when the schema document cannot be read from disk."""


class SchemaParseError(SoapTsError):
    """Raised when the schema document is not well-formed XML."""


class SchemaShapeError(SoapTsError):
    """Raised when a parsed document lacks the expected WSDL structure."""


class MessageLookupError(SoapTsError):
    """Raised when an operation cannot be bound to its declared messages."""


class OutputWriteError(SoapTsError):
    """Raised when the rendered declarations cannot be written."""
