from .document import DocumentInfo

__all__ = ["DocumentInfo"]
