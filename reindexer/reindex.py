# reindexer/reindex.py
from typing import Iterable, List

from .client import DocumentsClient
from .logger import get_logger
from .schemas import ReindexSummary, SeedDocument

logger = get_logger(__name__)


def delete_all(client: DocumentsClient, documents: Iterable[SeedDocument], summary: ReindexSummary) -> None:
    for doc in documents:
        if client.delete_document(doc.doc_id):
            summary.deleted += 1
        else:
            summary.delete_failed += 1


def index_all(client: DocumentsClient, documents: Iterable[SeedDocument], summary: ReindexSummary) -> None:
    for doc in documents:
        if client.index_document(doc):
            summary.indexed += 1
        else:
            summary.failed += 1
            summary.failed_ids.append(doc.doc_id)


def run_reindex(client: DocumentsClient, documents: List[SeedDocument], clean: bool = False) -> ReindexSummary:
    """Optionally delete, then re-index every document in file order.

    Individual failures never stop the run; they are tallied in the summary.
    """
    summary = ReindexSummary()

    if clean:
        logger.info("🗑️  Deleting existing documents...")
        delete_all(client, documents, summary)
        if summary.delete_failed:
            logger.warning(f"{summary.delete_failed} delete(s) failed, continuing with indexing")

    logger.info("📥 Indexing documents...")
    index_all(client, documents, summary)

    if summary.failed_ids:
        logger.error(f"Failed ids: {', '.join(summary.failed_ids)}")
    return summary
