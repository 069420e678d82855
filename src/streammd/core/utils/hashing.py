"""SHA-256 content hashing for detecting document changes between stream updates"""

import hashlib

from streammd.core.models import Document


def sha256(content: str) -> str:
    """Return hex-encoded SHA-256 hash of content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def document_hash(document: Document) -> str:
    """Hash the JSON form of a document; structurally equal documents hash equal."""
    return sha256(document.model_dump_json())
