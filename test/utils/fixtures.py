import os

import pytest
from chalice.test import Client

from app import app
from chalicelib.constants.constants import DISHES_STORE, ORDERS_STORE
from chalicelib.utils import store

PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(scope='session')
def chalice_client() -> Client:
    stage = os.environ.get('stage', 'test')
    with Client(app, stage_name=stage, project_dir=PROJECT_DIR) as client:
        yield client


@pytest.fixture(autouse=True)
def clean_stores():
    store.get_store(DISHES_STORE).clear()
    store.get_store(ORDERS_STORE).clear()
    yield
    store.get_store(DISHES_STORE).clear()
    store.get_store(ORDERS_STORE).clear()
