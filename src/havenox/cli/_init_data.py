"""``havenox init-data`` — create the data directory and seed collections."""

import argparse

import anyio

from havenox.config import AppConfig
from havenox.data.store import CollectionStore


def run_init_data(args: argparse.Namespace) -> None:
    """Seed every missing collection file with ``[]``; existing files are kept."""
    config = AppConfig.from_env(data_dir=args.data_dir)
    store = CollectionStore(config.data_dir)
    anyio.run(store.ensure_files)
    for name in store.names:
        print(f"{name:<14} {store.path_for(name)}")
