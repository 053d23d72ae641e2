import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator

from wellness_journal.core.errors import InternalError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


def _empty_document() -> Document:
    return {"entries": []}


class JsonDatabase:
    """
    Single JSON document holding every journal entry.

    Each mutation reads the whole document, changes it in memory and writes it
    back in full. Writes go to a temp file that then replaces the target, so a
    crash never leaves a half-written document behind. The lock serialises
    read-modify-write cycles within one process only.
    """

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._lock = threading.RLock()

    def init(self) -> None:
        with self._lock:
            self.write(self.read())

    def read(self) -> Document:
        if not self.path.exists():
            return _empty_document()
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise InternalError("Failed to read journal store", details=str(e)) from e

        if not isinstance(data, dict):
            raise InternalError("Journal store is not a JSON object")
        if not isinstance(data.get("entries"), list):
            data["entries"] = []
        return data

    def write(self, data: Document) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise InternalError("Failed to write journal store", details=str(e)) from e

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Yield the current document and commit it on a clean exit."""
        with self._lock:
            data = self.read()
            yield data
            self.write(data)

    def reset(self) -> None:
        with self._lock:
            logger.warning(f"Resetting journal store at {self.path}")
            self.write(_empty_document())
