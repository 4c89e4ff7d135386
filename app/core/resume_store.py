"""
Process-wide resume document. Loaded once (at startup) and shared read-only.

The first successful load is published under a lock; later callers always see the
same fully parsed document. A failed load publishes nothing and raises ResumeLoadError.
"""

import logging
import threading
from pathlib import Path

from pydantic import ValidationError

from app.core.config import RESUME_PATH
from app.core.errors import ResumeLoadError
from app.schemas.resume import ResumeDocument

logger = logging.getLogger(__name__)

_document: ResumeDocument | None = None
_lock = threading.Lock()


def load_resume(path: Path | str = RESUME_PATH) -> ResumeDocument:
    """Read and validate a resume JSON file. Raises ResumeLoadError on any failure."""
    path = Path(path)
    logger.info("[resume_store:load_resume] IN  path=%s", path)
    try:
        raw = path.read_bytes().decode("utf-8")
    except OSError as e:
        raise ResumeLoadError(f"Cannot read resume file: {e}", path=str(path)) from e
    except UnicodeDecodeError as e:
        raise ResumeLoadError(f"Resume file is not valid UTF-8: {e}", path=str(path)) from e
    try:
        document = ResumeDocument.model_validate_json(raw)
    except ValidationError as e:
        raise ResumeLoadError(f"Invalid resume file: {e}", path=str(path)) from e
    logger.info(
        "[resume_store:load_resume] OUT certifications=%d jobs=%d projects=%d",
        len(document.certifications),
        len(document.work_experience),
        len(document.projects),
    )
    return document


def init_resume(path: Path | str | None = None) -> ResumeDocument:
    """Load the resume if not loaded yet; return the shared document. Safe to call from many threads."""
    global _document
    with _lock:
        if _document is None:
            _document = load_resume(path if path is not None else RESUME_PATH)
        return _document


def get_resume() -> ResumeDocument:
    """Return the shared resume document, loading it on first use."""
    document = _document
    if document is not None:
        return document
    return init_resume()


def reset_resume() -> None:
    """Forget the loaded document. Only used by tests."""
    global _document
    with _lock:
        _document = None
