import pytest

from chalicelib.utils import store, validators
from chalicelib.utils.data import get_request_data, is_truthy
from chalicelib.utils.exceptions import InvalidInput, NotFound


class FakeEntity:
    resource_label = 'Order'

    def __init__(self, route_id=None, records=None):
        self.route_id = route_id
        self.store = store.InMemoryStore('orders', records)
        self.record = None


@pytest.mark.parametrize('value, expected', [
    (None, False), (False, False), (0, False), (0.0, False), ('', False), (float('nan'), False),
    (True, True), (1, True), ('x', True), ([], True), ({}, True)
])
def test_is_truthy(value, expected):
    assert is_truthy(value) is expected


def test_get_request_data():
    assert get_request_data(b'{"data": {"name": "Taco"}}') == {'name': 'Taco'}
    assert get_request_data(b'{"data": "Taco"}') == {}
    assert get_request_data(b'[1, 2]') == {}
    assert get_request_data(b'') == {}
    with pytest.raises(InvalidInput, match='Request body must be valid JSON.'):
        get_request_data(b'{"data": ')


def test_body_data_has():
    guard = validators.body_data_has('deliverTo')
    guard({'deliverTo': 'home'}, FakeEntity())
    with pytest.raises(InvalidInput, match='Must include a deliverTo.'):
        guard({'deliverTo': ''}, FakeEntity())
    with pytest.raises(InvalidInput, match='Must include a deliverTo.'):
        guard({}, FakeEntity())


def test_record_exists_stores_record():
    entity = FakeEntity('1', [{'id': '1', 'status': 'pending'}])
    validators.record_exists({}, entity)
    assert entity.record == {'id': '1', 'status': 'pending'}


def test_record_exists_missing():
    entity = FakeEntity('2', [{'id': '1'}])
    with pytest.raises(NotFound, match='Order does not exist: 2.'):
        validators.record_exists({}, entity)


def test_id_matches_route_param():
    entity = FakeEntity('1')
    validators.id_matches_route_param({'id': '1'}, entity)
    validators.id_matches_route_param({'id': ''}, entity)
    validators.id_matches_route_param({}, entity)
    with pytest.raises(InvalidInput, match='Order id does not match route id. Order: 2, Route: 1.'):
        validators.id_matches_route_param({'id': '2'}, entity)


@pytest.mark.parametrize('price', [-1, 0, '5', True, None])
def test_price_is_invalid(price):
    with pytest.raises(InvalidInput, match='Dish price must be an integer greater than zero.'):
        validators.price_is_valid({'price': price}, FakeEntity())


def test_status_is_valid():
    for status in ('pending', 'preparing', 'out-for-delivery'):
        validators.status_is_valid({'status': status}, FakeEntity())
    with pytest.raises(InvalidInput, match='A delivered order cannot be changed.'):
        validators.status_is_valid({'status': 'delivered'}, FakeEntity())
    with pytest.raises(InvalidInput, match='Order must have a status of pending, preparing, '):
        validators.status_is_valid({'status': 'invalid'}, FakeEntity())
    with pytest.raises(InvalidInput, match='Order must have a status of pending, preparing, out-for-delivery, delivered.'):
        validators.status_is_valid({}, FakeEntity())


def test_status_of_delivered_record_cannot_change():
    entity = FakeEntity('1', [{'id': '1', 'status': 'delivered'}])
    validators.record_exists({}, entity)
    with pytest.raises(InvalidInput, match='A delivered order cannot be changed.'):
        validators.status_is_valid({'status': 'pending'}, entity)


@pytest.mark.parametrize('dishes', [[], 'dish', {'dishId': '1', 'quantity': 1}])
def test_dishes_is_non_empty_list(dishes):
    with pytest.raises(InvalidInput, match='Order must include at least one dish.'):
        validators.dishes_is_non_empty_list({'dishes': dishes}, FakeEntity())


def test_dishes_have_quantity_reports_first_index():
    dishes = [{'dishId': '1', 'quantity': 1}, {'dishId': '2'}, {'dishId': '3', 'quantity': 0}]
    with pytest.raises(InvalidInput, match='Dish 1 must have a quantity that is an integer greater than 0.'):
        validators.dishes_have_quantity({'dishes': dishes}, FakeEntity())


def test_dish_quantities_are_valid():
    validators.dish_quantities_are_valid({'dishes': [{'quantity': 2}]}, FakeEntity())
    with pytest.raises(InvalidInput, match='Dish 0 must have a quantity that is an integer greater than 0.'):
        validators.dish_quantities_are_valid({'dishes': [{'quantity': '2'}]}, FakeEntity())
    with pytest.raises(InvalidInput, match='Dish 1 must have a quantity that is an integer greater than 0.'):
        validators.dish_quantities_are_valid({'dishes': [{'quantity': 1}, {'quantity': -3}]}, FakeEntity())


def test_run_guards_stops_at_first_failure():
    called = []

    def passing(data, entity):
        called.append('passing')

    def never(data, entity):
        called.append('never')

    with pytest.raises(InvalidInput, match='Must include a name.'):
        validators.run_guards([passing, validators.body_data_has('name'), never], {}, FakeEntity())
    assert called == ['passing']
