"""
Dataset store for world wonders.

``WonderStore`` owns the validated wonder collection for the lifetime
of the process.  It is built once at startup, from the JSON document
bundled with the package, and is then handed to the HTTP layer which
passes it to request handlers.  The store never changes after
construction, so concurrent requests can share it freely.

Each record is validated by the ``Wonder`` model (field lengths,
whitespace, URL prefixes, image count, time period consistency).  The
store adds the checks that span records: the collection is not empty,
names are unique and no link is reused anywhere in the dataset.  Any
failure raises ``DatasetError``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from ..core.config import DEFAULT_DATA_FILE
from ..core.errors import DatasetError
from ..schemas.wonder import Wonder

logger = logging.getLogger(__name__)


class WonderStore:
    """Immutable, validated collection of wonders in source order."""

    def __init__(self, wonders: Iterable[Wonder]) -> None:
        self._wonders: Tuple[Wonder, ...] = tuple(wonders)
        self._check_collection(self._wonders)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "WonderStore":
        """Read and validate the wonder dataset stored at ``path``.

        Defaults to the dataset bundled with the package.  Raises
        ``DatasetError`` if the file cannot be read or parsed, or if
        any record or the collection as a whole is invalid.
        """
        data_path = Path(path or DEFAULT_DATA_FILE)
        try:
            with open(data_path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except OSError as e:
            raise DatasetError(f"Could not read wonder dataset at {data_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise DatasetError(f"Encountered error while parsing {data_path}: {e}") from e

        store = cls.from_records(records)
        logger.info("Loaded %d wonders from %s", len(store), data_path)
        return store

    @classmethod
    def from_records(cls, records: Any) -> "WonderStore":
        """Build a store from already parsed JSON records."""
        if not isinstance(records, list):
            raise DatasetError(
                f"Wonder dataset must be a JSON array, got {type(records).__name__}"
            )
        wonders: List[Wonder] = []
        for index, record in enumerate(records):
            try:
                wonders.append(Wonder.model_validate(record))
            except ValidationError as e:
                name = record.get("name") if isinstance(record, dict) else None
                raise DatasetError(f"Invalid wonder at index {index} ({name!r}): {e}") from e
        return cls(wonders)

    @staticmethod
    def _check_collection(wonders: Sequence[Wonder]) -> None:
        if not wonders:
            raise DatasetError("Wonder dataset is empty")

        seen_names = set()
        seen_links = set()
        for wonder in wonders:
            if wonder.name in seen_names:
                raise DatasetError(f"Duplicate name: '{wonder.name}'")
            seen_names.add(wonder.name)

            for link in wonder.links.all_links():
                if link in seen_links:
                    raise DatasetError(f"Duplicate link in '{wonder.name}': {link}")
                seen_links.add(link)

    def all(self) -> Tuple[Wonder, ...]:
        """Return every wonder, in the order of the source document."""
        return self._wonders

    def __len__(self) -> int:
        return len(self._wonders)

    def __iter__(self) -> Iterator[Wonder]:
        return iter(self._wonders)

    def __getitem__(self, index: int) -> Wonder:
        return self._wonders[index]
