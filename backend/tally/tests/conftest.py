import pytest

from shared.storage import MemoryGameStorage
from tally.session.store import GameStore
from tally.tests.helpers import create_game


@pytest.fixture
def storage():
    return MemoryGameStorage()


@pytest.fixture
def store(storage):
    return GameStore(storage)


@pytest.fixture
def started_store(store):
    store.start(create_game())
    return store
