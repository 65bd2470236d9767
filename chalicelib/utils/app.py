import functools
from typing import Callable

from chalice import Response

from chalicelib.constants.status_codes import http500
from chalicelib.utils.exceptions import InvalidInput, NotFound
from chalicelib.utils.logger import logger, log_exception


def error_response(error: Exception, msg: str = "", status_code: int = 400, *args, **kwargs) -> Response:
    log_exception(error=error, msg=msg, status_code=status_code, *args, **kwargs)
    return Response(
        body={'error': str(error)},
        status_code=status_code,
        headers={'Content-Type': 'application/json'}
    )


def request_exception_handler(func: Callable):
    @functools.wraps(func)
    def result(*args, **kwargs):
        try:
            logger.info(f'Calling function {func.__name__}')
            return func(*args, **kwargs)
        except (InvalidInput, NotFound) as request_error:
            return error_response(
                error=request_error,
                msg=f'function = {func.__name__} , error = {request_error}',
                status_code=request_error.STATUS_CODE)
        except Exception as exception:
            return error_response(
                error=exception,
                msg=f'function = {func.__name__}, error = {exception}',
                status_code=http500)
    return result


def log_start_finish(func: Callable):
    @functools.wraps(func)
    def result(*args, **kwargs):
        logger.info(f'{func.__name__} ::: started')
        response = func(*args, **kwargs)
        logger.info(f'{func.__name__} ::: finished')
        return response
    return result
