from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentInfo:
    """Id and revision of one document, as listed by _all_docs."""
    id: str
    revision: str
