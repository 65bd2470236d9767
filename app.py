from uuid import uuid4

from chalice import Chalice

from chalicelib import dishes, orders
from chalicelib.utils.logger import logger, log_request

app = Chalice(app_name='dishes-and-orders')

app.debug = True


@app.middleware('http')
def request_logging_middleware(event, get_response):
    logger.current_request_id = (event.context or {}).get('requestId') or str(uuid4())
    log_request(event)
    return get_response(event)


@app.route('/health-check', methods=['GET'], cors=True)
def health_check():
    return {'health': 'check'}


# DISHES
@app.route('/dishes', methods=['GET'], cors=True)
def list_dishes():
    return dishes.Dish.endpoint_list()


@app.route('/dishes', methods=['POST'], cors=True)
def create_dish():
    return dishes.Dish.init_request(app.current_request).endpoint_create()


@app.route('/dishes/{dish_id}', methods=['GET'], cors=True)
def read_dish(dish_id):
    return dishes.Dish.init_request(app.current_request, dish_id).endpoint_read()


@app.route('/dishes/{dish_id}', methods=['PUT'], cors=True)
def update_dish(dish_id):
    """
    full replace: name, description, price and image_url are all required
    """
    return dishes.Dish.init_request(app.current_request, dish_id).endpoint_update()


# ORDERS
@app.route('/orders', methods=['GET'], cors=True)
def list_orders():
    return orders.Order.endpoint_list()


@app.route('/orders', methods=['POST'], cors=True)
def create_order():
    return orders.Order.init_request(app.current_request).endpoint_create()


@app.route('/orders/{order_id}', methods=['GET'], cors=True)
def read_order(order_id):
    return orders.Order.init_request(app.current_request, order_id).endpoint_read()


@app.route('/orders/{order_id}', methods=['PUT'], cors=True)
def update_order(order_id):
    """
    full replace: deliverTo, mobileNumber, status and dishes are all required,
    a delivered order cannot be changed
    """
    return orders.Order.init_request(app.current_request, order_id).endpoint_update()


@app.route('/orders/{order_id}', methods=['DELETE'], cors=True)
def delete_order(order_id):
    """
    only pending orders can be deleted
    """
    return orders.Order.init_request(app.current_request, order_id).endpoint_delete()
