"""
Request guards.

A guard is called as guard(data, entity) where data is the request payload and
entity is the resource object handling the request (it carries route_id, store,
resource_label and the record found by record_exists). A guard returns on pass
and raises InvalidInput / NotFound on failure.
"""
from typing import Callable, Dict, Iterable

from chalicelib.constants.constants import ORDER_CHANGEABLE_STATUSES, ORDER_STATUS_DELIVERED, ORDER_STATUSES
from chalicelib.utils.data import is_truthy, is_positive_number
from chalicelib.utils.exceptions import InvalidInput, NotFound
from chalicelib.utils.logger import logger

Guard = Callable[[Dict, object], None]

QUANTITY_ERROR = 'Dish {index} must have a quantity that is an integer greater than 0.'


def run_guards(guards: Iterable[Guard], data: Dict, entity) -> None:
    """
    Runs guards in order, the first failing guard ends the chain
    """
    for guard in guards:
        try:
            guard(data, entity)
        except (InvalidInput, NotFound) as error:
            logger.warning(f"run_guards ::: {getattr(guard, '__name__', guard)} failed: {error}")
            raise


def body_data_has(field: str) -> Guard:
    def guard(data, entity):
        if not is_truthy(data.get(field)):
            raise InvalidInput(f'Must include a {field}.')
    guard.__name__ = f'body_data_has_{field}'
    return guard


def record_exists(data, entity):
    record = entity.store.find(entity.route_id)
    if record is None:
        raise NotFound(f'{entity.resource_label} does not exist: {entity.route_id}.')
    entity.record = record


def id_matches_route_param(data, entity):
    id_ = data.get('id')
    if is_truthy(id_) and id_ != entity.route_id:
        label = entity.resource_label
        raise InvalidInput(f'{label} id does not match route id. {label}: {id_}, Route: {entity.route_id}.')


def price_is_valid(data, entity):
    if not is_positive_number(data.get('price')):
        raise InvalidInput('Dish price must be an integer greater than zero.')


def status_is_valid(data, entity):
    """
    The requested status must be changeable to, and a stored delivered order stays delivered
    """
    record = getattr(entity, 'record', None)
    if record is not None and record.get('status') == ORDER_STATUS_DELIVERED:
        raise InvalidInput('A delivered order cannot be changed.')
    status = data.get('status')
    if status in ORDER_CHANGEABLE_STATUSES:
        return
    if status == ORDER_STATUS_DELIVERED:
        raise InvalidInput('A delivered order cannot be changed.')
    raise InvalidInput(f"Order must have a status of {', '.join(ORDER_STATUSES)}.")


def dishes_is_non_empty_list(data, entity):
    dishes = data.get('dishes')
    if not isinstance(dishes, list) or len(dishes) == 0:
        raise InvalidInput('Order must include at least one dish.')


def dishes_have_quantity(data, entity):
    for index, line_item in enumerate(data.get('dishes', [])):
        if not isinstance(line_item, dict) or not is_truthy(line_item.get('quantity')):
            raise InvalidInput(QUANTITY_ERROR.format(index=index))


def dish_quantities_are_valid(data, entity):
    for index, line_item in enumerate(data.get('dishes', [])):
        if not isinstance(line_item, dict) or not is_positive_number(line_item.get('quantity')):
            raise InvalidInput(QUANTITY_ERROR.format(index=index))
