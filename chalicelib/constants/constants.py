DISHES_STORE = 'dishes'
ORDERS_STORE = 'orders'

ORDER_STATUS_PENDING = 'pending'
ORDER_STATUS_DELIVERED = 'delivered'

# statuses an order may be moved to by an update
ORDER_CHANGEABLE_STATUSES = ('pending', 'preparing', 'out-for-delivery')
ORDER_STATUSES = (*ORDER_CHANGEABLE_STATUSES, ORDER_STATUS_DELIVERED)
