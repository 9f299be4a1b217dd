"""Document input helpers."""

from .documents import expand_documents, load_document

__all__ = ["expand_documents", "load_document"]
