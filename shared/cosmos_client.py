"""Cosmos DB access for stored requests.

The container client is created on first use and kept for the lifetime of
the worker process.
"""
import logging
from typing import Optional

from azure.cosmos import ContainerProxy, CosmosClient

from shared.config import Settings
from shared.models import StoredRequest

_container: Optional[ContainerProxy] = None


def get_container(settings: Settings) -> ContainerProxy:
    global _container
    if _container is None:
        settings.require_cosmos()
        client = CosmosClient.from_connection_string(settings.cosmos_connection)
        db = client.get_database_client(settings.cosmos_database)
        _container = db.get_container_client(settings.cosmos_container)
        logging.info(
            "Connected to Cosmos DB container %s/%s", settings.cosmos_database, settings.cosmos_container
        )
    return _container


def reset_container():
    """Drop the cached container client. Test hook; the app never calls it."""
    global _container
    _container = None


def store_request(record: StoredRequest, settings: Settings) -> dict:
    # create_item, not upsert_item: an existing id is a conflict, never an overwrite
    return get_container(settings).create_item(body=record.to_document())
