"""Custom exception hierarchy for docaccess."""


class DocAccessError(Exception):
    """Base exception for all docaccess errors."""


class InvalidReferenceError(DocAccessError, ValueError):
    """Raised when a reference is not a well-formed URI or path."""


class PathNotFoundError(DocAccessError):
    """Raised when a document or path does not exist."""


class ReadError(DocAccessError):
    """Raised on I/O or decoding failures other than absence."""


class MissingWorkspaceRootError(DocAccessError):
    """Raised when an operation needs a workspace root and none is configured."""
