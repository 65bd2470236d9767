from typing import Dict, List, Optional, Tuple

from chalice import Response

from chalicelib.constants.status_codes import http200, http201
from chalicelib.utils import app as utils_app, data as utils_data, store as utils_store, validators
from chalicelib.utils.logger import logger


class EntityBase:
    """
    Resource backed by an in-memory store.
    An instance lives for one request: it carries the route id, the parsed payload
    and the record found by the existence guard
    """
    store_name: str = None
    resource_label: str = None
    mutable_fields: Tuple[str, ...] = ()

    create_guards: Tuple = ()
    read_guards: Tuple = (validators.record_exists,)
    update_guards: Tuple = ()

    def __init__(self, route_id=None, raw_body=None, store=None):
        self.route_id: Optional[str] = route_id
        self.raw_body = raw_body
        self.store: utils_store.InMemoryStore = store if store is not None else utils_store.get_store(self.store_name)
        self.data: Dict = {}
        self.record: Optional[Dict] = None

    @classmethod
    def init_request(cls, request, route_id=None):
        logger.info(f"init_request ::: {cls.resource_label} route_id={route_id}")
        return cls(route_id=route_id, raw_body=request.raw_body)

    def _run_guards(self, guards) -> None:
        self.data = utils_data.get_request_data(self.raw_body)
        validators.run_guards(guards, self.data, self)

    def _new_record(self) -> Dict:
        """
        Should be re-implemented in each child class
        :return:
        record to store, built from the validated payload
        """
        return {'id': utils_store.next_id()}

    def _replacement_fields(self) -> Dict:
        """
        Full replace: every mutable field is taken from the payload
        """
        return {field: self.data.get(field) for field in self.mutable_fields}

    @classmethod
    @utils_app.request_exception_handler
    @utils_app.log_start_finish
    def endpoint_list(cls, route_id=None, store=None) -> Response:
        if store is None:
            store = utils_store.get_store(cls.store_name)
        records: List[Dict] = store.list()
        if route_id:
            records = [record for record in records if str(record.get('id')) == str(route_id)]
        logger.info(f"endpoint_list ::: returning {cls.store_name} ids={[record.get('id') for record in records]}")
        return Response(status_code=http200, body={'data': records})

    @utils_app.request_exception_handler
    @utils_app.log_start_finish
    def endpoint_create(self) -> Response:
        with self.store.lock:
            self._run_guards(self.create_guards)
            record = self.store.append(self._new_record())
        return Response(status_code=http201, body={'data': record})

    @utils_app.request_exception_handler
    @utils_app.log_start_finish
    def endpoint_read(self) -> Response:
        with self.store.lock:
            self._run_guards(self.read_guards)
        return Response(status_code=http200, body={'data': self.record})

    @utils_app.request_exception_handler
    @utils_app.log_start_finish
    def endpoint_update(self) -> Response:
        with self.store.lock:
            self._run_guards(self.update_guards)
            record = self.store.update_in_place(self.record['id'], self._replacement_fields())
        return Response(status_code=http200, body={'data': record})
