"""File-backed JSON collections for havenox.

One JSON array per named collection, read and rewritten whole.
Not a database.

Basic usage::

    from havenox.data import CollectionStore, generate_id

    store = CollectionStore("data")
    await store.ensure_files()

    record = {"id": generate_id("listing"), "price": 10}
    await store.append_record("listings", record)
    listings = await store.read_collection("listings")
"""

from havenox.data.errors import CorruptCollection, DataError, UnknownCollection
from havenox.data.ids import ensure_number, generate_id
from havenox.data.store import DATA_FILES, CollectionStore, JSONValue

__all__ = [
    "DATA_FILES",
    "CollectionStore",
    "CorruptCollection",
    "DataError",
    "JSONValue",
    "UnknownCollection",
    "ensure_number",
    "generate_id",
]
