from typing import Dict

from chalice import Response

from chalicelib.base_class_entity import EntityBase
from chalicelib.constants.constants import ORDERS_STORE, ORDER_STATUS_PENDING
from chalicelib.constants.status_codes import http204
from chalicelib.utils import app as utils_app, store as utils_store, validators, exceptions
from chalicelib.utils.logger import logger


class Order(EntityBase):
    store_name = ORDERS_STORE
    resource_label = 'Order'
    mutable_fields = ('deliverTo', 'mobileNumber', 'status', 'dishes')

    # line items are stored as sent, dishId is not checked against the dishes store
    create_guards = (
        validators.body_data_has('deliverTo'),
        validators.body_data_has('mobileNumber'),
        validators.body_data_has('dishes'),
        validators.dishes_is_non_empty_list,
        validators.dishes_have_quantity,
        validators.dish_quantities_are_valid
    )

    update_guards = (
        validators.record_exists,
        validators.body_data_has('deliverTo'),
        validators.body_data_has('mobileNumber'),
        validators.body_data_has('status'),
        validators.body_data_has('dishes'),
        validators.id_matches_route_param,
        validators.status_is_valid,
        validators.dishes_is_non_empty_list,
        validators.dishes_have_quantity,
        validators.dish_quantities_are_valid
    )

    delete_guards = (validators.record_exists,)

    def _new_record(self) -> Dict:
        return {
            'id': utils_store.next_id(),
            'deliverTo': self.data.get('deliverTo'),
            'mobileNumber': self.data.get('mobileNumber'),
            'status': self.data.get('status'),
            'dishes': self.data.get('dishes')
        }

    @utils_app.request_exception_handler
    @utils_app.log_start_finish
    def endpoint_delete(self) -> Response:
        with self.store.lock:
            self._run_guards(self.delete_guards)
            if self.record.get('status') != ORDER_STATUS_PENDING or not self.store.remove_by_id(self.record['id']):
                logger.warning(f"endpoint_delete ::: order {self.route_id} has status={self.record.get('status')}")
                raise exceptions.InvalidInput('An order cannot be deleted unless it is pending.')
        return Response(status_code=http204, body='')
