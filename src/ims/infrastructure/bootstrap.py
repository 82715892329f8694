"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from ims.domain.repository.product_repository import ProductRepository
from ims.infrastructure import config
from ims.infrastructure.persistence.json_file_store import JsonFileKeyValueStore


def product_repository() -> ProductRepository:
    store = JsonFileKeyValueStore(config.store_path())
    return ProductRepository(store, currency=config.currency())
