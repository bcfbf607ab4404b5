"""File-backed JSON collections.

Each registered collection name maps to one file holding a JSON array.
Every operation reads or rewrites the whole file. Blocking file calls run
in a worker thread via ``anyio.to_thread`` so the event loop keeps serving
other requests while a collection is read or written.

Concurrency:
    There is no lock around a collection. ``append_record`` is a
    read-modify-write sequence, and two requests appending to the same
    collection can interleave so that the later write drops the earlier
    record (lost update). A reader can also observe a partially written
    file. Collections are expected to be small and traffic low; callers
    that need stronger guarantees must serialize access themselves.
"""

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any, TypeAlias

import anyio

from havenox.data.errors import CorruptCollection, UnknownCollection

logger = logging.getLogger("havenox.data")

JSONValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None

# Collection name -> file name under the data directory
DATA_FILES: dict[str, str] = {
    "listings": "listings.json",
    "mints": "mints.json",
    "tradeHistory": "trade-history.json",
    "escrows": "escrows.json",
    "tents": "tents.json",
}


def _run_sync(func: Callable[..., Any], *args: Any) -> Any:
    """Run blocking call in anyio worker thread. Wrapper for ty compatibility."""
    return anyio.to_thread.run_sync(func, *args)  # type: ignore[union-attr]


class CollectionStore:
    """Named JSON-array collections stored as flat files.

    Usage::

        store = CollectionStore("data")
        await store.ensure_files()
        await store.append_record("listings", {"id": generate_id("listing")})
        listings = await store.read_collection("listings")
    """

    __slots__ = ("_files", "data_dir")

    def __init__(
        self,
        data_dir: str | Path,
        files: Mapping[str, str] | None = None,
    ) -> None:
        self.data_dir = Path(data_dir)
        self._files: dict[str, str] = dict(files if files is not None else DATA_FILES)

    @property
    def names(self) -> tuple[str, ...]:
        """Registered collection names, in registration order."""
        return tuple(self._files)

    def path_for(self, name: str) -> Path:
        """Resolve a collection name to its backing file.

        Raises ``UnknownCollection`` if *name* is not registered.
        """
        file_name = self._files.get(name)
        if file_name is None:
            raise UnknownCollection(name)
        return self.data_dir / file_name

    async def ensure_files(self) -> None:
        """Create the data directory and seed missing collection files with ``[]``.

        Existing files are left untouched.
        """
        await _run_sync(self._ensure_files_sync)

    def _ensure_files_sync(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        for name, file_name in self._files.items():
            target = self.data_dir / file_name
            if not target.exists():
                target.write_text("[]", encoding="utf-8")
                logger.info("Seeded empty collection %s at %s", name, target)

    async def read_collection(self, name: str) -> list[JSONValue]:
        """Return every record in the collection, in insertion order.

        An empty (or not yet created) file reads as an empty list.

        Raises:
            UnknownCollection: *name* is not registered.
            CorruptCollection: the file is not a valid JSON array.
        """
        path = self.path_for(name)
        raw = await _run_sync(_read_text, path)
        if not raw:
            return []
        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as exc:
            raise CorruptCollection(name, str(exc)) from exc
        if not isinstance(data, list):
            raise CorruptCollection(name, f"expected a JSON array, got {type(data).__name__}")
        return data

    async def write_collection(self, name: str, records: Iterable[JSONValue]) -> None:
        """Overwrite the collection file with *records*.

        Serialized as pretty-printed JSON (2-space indent, UTF-8). The
        write is not atomic.

        Raises:
            UnknownCollection: *name* is not registered.
            ValueError: a record holds a NaN or infinite float. Nothing is
                written.
        """
        path = self.path_for(name)
        payload = json.dumps(list(records), indent=2, ensure_ascii=False, allow_nan=False)
        await _run_sync(_write_text, path, payload)

    async def append_record(self, name: str, record: JSONValue) -> JSONValue:
        """Append *record* to the collection and return it.

        Read, push, write — see the module notes on the lost-update hazard.
        """
        collection = await self.read_collection(name)
        collection.append(record)
        await self.write_collection(name, collection)
        return record


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def _write_text(path: Path, payload: str) -> None:
    path.write_text(payload, encoding="utf-8")
