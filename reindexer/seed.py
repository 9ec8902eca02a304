# reindexer/seed.py
import json
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from .config import PROJECT_ROOT
from .errors import SeedDataError
from .schemas import SeedDocument

DEFAULT_SEED_PATH = PROJECT_ROOT / "scripts" / "seed-data.json"


def load_seed_data(path: Union[str, Path] = DEFAULT_SEED_PATH) -> List[SeedDocument]:
    """Load the seed documents in file order."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedDataError(f"Cannot read seed data {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SeedDataError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise SeedDataError(f"{path} must contain a JSON array of documents")

    documents = []
    for i, item in enumerate(data):
        try:
            documents.append(SeedDocument.model_validate(item))
        except ValidationError as e:
            raise SeedDataError(f"Invalid document at index {i} in {path}: {e}") from e
    return documents
