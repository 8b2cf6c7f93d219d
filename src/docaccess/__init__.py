"""docaccess: resolve and read documents by URI or local path.

Path normalization, relative resolution, and recursive file discovery for
document-processing tools, with live editor buffers taking precedence over disk.
"""

__version__ = "0.1.0"

from docaccess.accessor import LocalFileAccessor
from docaccess.config import AccessorConfig
from docaccess.documents import OpenDocument, OpenDocuments
from docaccess.exceptions import (
    DocAccessError,
    InvalidReferenceError,
    MissingWorkspaceRootError,
    PathNotFoundError,
    ReadError,
)
from docaccess.protocol import FileAccessor
from docaccess.ref import LocalPathRef, Reference, UriRef, parse_reference
from docaccess.resolver import PathResolver
from docaccess.uris import encode_uri, has_uri_scheme, parse_uri
from docaccess.walk import SkippedDir, WalkResult, walk

__all__ = [
    "AccessorConfig",
    "DocAccessError",
    "FileAccessor",
    "InvalidReferenceError",
    "LocalFileAccessor",
    "LocalPathRef",
    "MissingWorkspaceRootError",
    "OpenDocument",
    "OpenDocuments",
    "PathNotFoundError",
    "PathResolver",
    "ReadError",
    "Reference",
    "SkippedDir",
    "UriRef",
    "WalkResult",
    "__version__",
    "encode_uri",
    "has_uri_scheme",
    "parse_reference",
    "parse_uri",
    "walk",
]
