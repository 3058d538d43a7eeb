"""
Local File Source (Fallback)

Reads a last-known-good copy of the daily document from disk. By default this
is the copy packaged under eurofxref/data/.
"""

import logging
from pathlib import Path

from eurofxref.config import Settings, get_settings
from eurofxref.models import RateDocument
from eurofxref.parser import parse_document
from eurofxref.providers.base import (
    BaseDocumentSource,
    MalformedDocument,
    RetrievalFailed,
)

logger = logging.getLogger(__name__)


class BundledFileSource(BaseDocumentSource):
    """Reads the fallback document in the same schema as the ECB endpoint."""

    PROVIDER_NAME = "file"

    def __init__(
        self,
        path: Path | str | None = None,
        settings: Settings | None = None
    ):
        if path is None:
            path = (settings or get_settings()).resolved_fallback_path
        self.path = Path(path)

    def fetch_document(self) -> RateDocument:
        try:
            with self.path.open("rb") as fh:
                content = fh.read()
        except OSError as e:
            raise RetrievalFailed(
                message=f"Cannot read fallback document {self.path}: {e}",
                provider=self.PROVIDER_NAME,
                details={"path": str(self.path)}
            ) from e

        try:
            document = parse_document(content)
        except MalformedDocument as e:
            raise MalformedDocument(
                message=f"Unparseable fallback document {self.path}: {e}",
                provider=self.PROVIDER_NAME,
                details={"path": str(self.path), **e.details}
            ) from e

        logger.info(f"Loaded fallback document from {self.path}")
        return document
