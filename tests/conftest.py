"""Shared fixtures: an in-memory store shaped like a small macOS dynamic store."""

import pytest

from screcords import create_app
from screcords.models.store_adapter import StoreAdapter
from screcords.models.store_adapters.memory import MemoryAdapter


SAMPLE_STORE = {
    "Setup:": {
        "CurrentSet": "/Sets/73C34124",
        "LastUpdated": "05/29/2015 15:35:21",
    },
    "Setup:/Network/Global/IPv4": {
        "ServiceOrder": ["0F4E1ECE", "1DDF4F0B"],
    },
    "State:/Network/Global/IPv4": {
        "PrimaryInterface": "en1",
        "PrimaryService": "0F4E1ECE",
    },
    "State:/Network/Interface/en1/IPv4": {
        "Addresses": ["192.168.0.4"],
        "BroadcastAddresses": ["192.168.0.255"],
        "SubnetMasks": ["255.255.255.0"],
    },
    "com.apple.smb": {
        "SigningEnabled": True,
        "SigningRequired": False,
    },
}


class RawAdapter(StoreAdapter):
    """Serves hand written dumps, including broken ones."""

    def __init__(self, dumps):
        self.dumps = dumps

    def list_subkeys(self):
        return list(self.dumps)

    def show(self, subkey):
        return self.dumps.get(subkey)


@pytest.fixture
def store():
    return MemoryAdapter(data=SAMPLE_STORE)


@pytest.fixture
def raw_store():
    def _make(dumps):
        return RawAdapter(dumps)
    return _make


@pytest.fixture
def app():
    return create_app({
        "stores": [
            {"name": "lab", "adapter": "memory", "data": SAMPLE_STORE},
            {"name": "empty", "adapter": "memory"},
        ]
    })


@pytest.fixture
def client(app):
    return app.test_client()
