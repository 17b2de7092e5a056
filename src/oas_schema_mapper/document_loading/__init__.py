"""Document loading exports."""

from .document_loader import DocumentError, load_openapi_document
from .document_models import OpenApiDocument

__all__ = [
    "DocumentError",
    "OpenApiDocument",
    "load_openapi_document",
]
