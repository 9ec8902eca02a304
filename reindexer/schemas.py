# reindexer/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import List, Dict, Any, Union


# Seed data records; only the id is required, everything else is forwarded as read
class SeedDocument(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[str, int]
    text: Any = None
    metadata: Any = None

    @property
    def doc_id(self) -> str:
        return str(self.id)

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for POST /v1/documents: the record as read from the seed file."""
        payload = self.model_dump()
        for name in ("text", "metadata"):
            if name not in self.model_fields_set:
                payload.pop(name, None)
        return payload


# Run outcome
class ReindexSummary(BaseModel):
    deleted: int = 0
    delete_failed: int = 0
    indexed: int = 0
    failed: int = 0
    failed_ids: List[str] = []

    @property
    def ok(self) -> bool:
        return self.failed == 0
