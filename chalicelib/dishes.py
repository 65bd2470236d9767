from typing import Dict

from chalicelib.base_class_entity import EntityBase
from chalicelib.constants.constants import DISHES_STORE
from chalicelib.utils import store as utils_store, validators


class Dish(EntityBase):
    store_name = DISHES_STORE
    resource_label = 'Dish'
    mutable_fields = ('name', 'description', 'price', 'image_url')

    create_guards = (
        validators.body_data_has('name'),
        validators.body_data_has('description'),
        validators.body_data_has('price'),
        validators.body_data_has('image_url'),
        validators.price_is_valid
    )

    update_guards = (
        validators.record_exists,
        validators.body_data_has('name'),
        validators.body_data_has('description'),
        validators.body_data_has('price'),
        validators.body_data_has('image_url'),
        validators.id_matches_route_param,
        validators.price_is_valid
    )

    def _new_record(self) -> Dict:
        return {
            'id': utils_store.next_id(),
            'name': self.data.get('name'),
            'description': self.data.get('description'),
            'price': self.data.get('price'),
            'image_url': self.data.get('image_url')
        }
