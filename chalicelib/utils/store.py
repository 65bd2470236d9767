import json
import os
from threading import RLock
from typing import Dict, List, Optional
from uuid import uuid4

from chalicelib.constants.constants import DISHES_STORE, ORDERS_STORE
from chalicelib.utils import exceptions
from chalicelib.utils.logger import logger

# store name -> env var holding a JSON file with initial records
SEED_FILES_ENV = {
    DISHES_STORE: 'DISHES_DATA_FILE',
    ORDERS_STORE: 'ORDERS_DATA_FILE'
}

_STORES: Dict[str, 'InMemoryStore'] = {}
_STORES_LOCK = RLock()


def next_id() -> str:
    return uuid4().hex


class InMemoryStore:
    """
    Ordered in-memory collection of records (dicts with an 'id' key).
    Records are handed out by reference, update_in_place mutates the stored object
    """

    def __init__(self, name: str, records: Optional[List[Dict]] = None):
        self.name = name
        self._records: List[Dict] = []
        self._lock = RLock()
        for record in records or []:
            self.append(record)

    @property
    def lock(self):
        """
        Held by a request across its guard chain and handler so check-then-write is atomic
        """
        return self._lock

    def __len__(self):
        return len(self._records)

    def list(self) -> List[Dict]:
        with self._lock:
            return list(self._records)

    def find(self, id_) -> Optional[Dict]:
        with self._lock:
            return next((record for record in self._records if record.get('id') == id_), None)

    def append(self, record: Dict) -> Dict:
        with self._lock:
            if self.find(record.get('id')) is not None:
                raise exceptions.DuplicateRecordId(f"{self.name} record id={record.get('id')} already exists")
            self._records.append(record)
        logger.info(f"append ::: {self.name} record id={record.get('id')} stored")
        return record

    def remove_by_id(self, id_) -> bool:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.get('id') == id_:
                    del self._records[index]
                    logger.info(f"remove_by_id ::: {self.name} record id={id_} removed")
                    return True
        logger.warning(f"remove_by_id ::: {self.name} record id={id_} not found")
        return False

    def update_in_place(self, id_, fields: Dict) -> Dict:
        with self._lock:
            record = self.find(id_)
            if record is None:
                logger.error(f"update_in_place ::: {self.name} record id={id_} not found")
                raise exceptions.RecordNotFound(f'{self.name} record id={id_} not found')
            record.update(fields)
        logger.info(f"update_in_place ::: {self.name} record id={id_} updated, fields={list(fields)}")
        return record

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


def load_seed_records(name: str) -> List[Dict]:
    path = os.environ.get(SEED_FILES_ENV.get(name, ''))
    if not path:
        return []
    with open(path) as seed_file:
        records = json.load(seed_file)
    logger.info(f"load_seed_records ::: loaded {len(records)} {name} records from {path}")
    return records


def get_store(name: str) -> InMemoryStore:
    with _STORES_LOCK:
        if name not in _STORES:
            _STORES[name] = InMemoryStore(name, load_seed_records(name))
        return _STORES[name]


def get_dishes_store() -> InMemoryStore:
    return get_store(DISHES_STORE)


def get_orders_store() -> InMemoryStore:
    return get_store(ORDERS_STORE)
