import json
import math
from numbers import Number

from chalicelib.utils.exceptions import InvalidInput


def parse_raw_body(raw_body) -> dict:
    if not raw_body:
        return {}
    try:
        body = json.loads(raw_body)
    except ValueError:
        raise InvalidInput('Request body must be valid JSON.')
    return body if isinstance(body, dict) else {}


def get_request_data(raw_body) -> dict:
    """
    Unwrap the {"data": {...}} envelope of a request body.
    A missing or non-object envelope is an empty payload
    """
    data = parse_raw_body(raw_body).get('data')
    return data if isinstance(data, dict) else {}


def is_truthy(value) -> bool:
    """
    JSON truthiness: null, false, 0, NaN and "" are falsy,
    empty arrays and objects are not
    """
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, Number):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ''
    return True


def is_positive_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool) and value > 0
