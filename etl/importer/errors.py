"""
Import errors. All derive from DocumentImportError (a ValueError) and carry a
message safe to show to the user.
"""


class DocumentImportError(ValueError):
    """Base class for document import failures."""
    pass


class UnsupportedFormatError(DocumentImportError):
    """Raised when the file extension is not supported."""
    pass


class EmptyDocumentError(DocumentImportError):
    """Raised when a document has no extractable text."""
    pass


class ScannedDocumentError(DocumentImportError):
    """Raised when a PDF has no (or almost no) selectable text."""
    pass


class DocumentParseError(DocumentImportError):
    """Raised when the file cannot be read as the claimed format."""
    pass
