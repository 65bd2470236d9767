__all__ = ["InvalidInput", "NotFound", "RecordNotFound", "DuplicateRecordId"]


# Request exceptions
class InvalidInput(Exception):
    STATUS_CODE = 400
    LEVEL = 'warning'


class NotFound(Exception):
    STATUS_CODE = 404
    LEVEL = 'warning'


# Store exceptions
class RecordNotFound(Exception):
    pass


class DuplicateRecordId(Exception):
    pass
