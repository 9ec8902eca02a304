# reindexer/client.py
from typing import Optional
from urllib.parse import quote

import httpx

from .logger import get_logger
from .schemas import SeedDocument

logger = get_logger(__name__)

DOCUMENTS_PATH = "/v1/documents"


class DocumentsClient:
    """
    Client for the search service's document endpoints.
    Handles bearer authentication; every call is a single request with a pass/fail outcome.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.api_url,
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def delete_document(self, doc_id: str) -> bool:
        """DELETE /v1/documents/{id}; a 404 means already gone and counts as success."""
        path = f"{DOCUMENTS_PATH}/{quote(doc_id, safe='')}"
        logger.debug(f"  [API] DELETE {self.api_url}{path}")
        r = self._client.delete(path)

        if r.is_success:
            logger.info(f"  ✓ Deleted: {doc_id}")
            return True
        if r.status_code == 404:
            logger.info(f"  - Not found (skip): {doc_id}")
            return True
        logger.error(f"  ✗ Failed to delete {doc_id}: {r.status_code} {r.text}")
        return False

    def index_document(self, doc: SeedDocument) -> bool:
        """POST /v1/documents with the full document payload."""
        logger.debug(f"  [API] POST {self.api_url}{DOCUMENTS_PATH} id={doc.doc_id}")
        r = self._client.post(DOCUMENTS_PATH, json=doc.to_payload())

        if r.is_success:
            logger.info(f"  ✓ Indexed: {doc.doc_id}")
            return True
        logger.error(f"  ✗ Failed to index {doc.doc_id}: {r.status_code} {r.text}")
        return False
