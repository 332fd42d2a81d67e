import traceback

from fillstation.utils.loggers import ColoredLogger


class BadRequestException(Exception):
    def __init__(self, message: str):
        self.message = message


class CapacityExceededException(BadRequestException):
    def __init__(self, quantity: float, current_quantity: float, limit: float):
        self.quantity = quantity
        self.limit = limit
        self.overflow = current_quantity + quantity - limit
        super().__init__(
            f"Cannot add {quantity:g} ltr(s). This will exceed the tank limit of {limit:g} ltr(s) "
            f"by {self.overflow:g} ltr(s)."
        )


class NotFoundException(Exception):
    def __init__(self, message: str = 'Record not found'):
        self.message = message


class ForbiddenException(Exception):
    def __init__(self, message: str = 'You are not authorized to perform this action'):
        self.message = message


class DBException(Exception):
    def __init__(self):
        self.message = 'Database request failed'


class DBDuplicateException(Exception):
    def __init__(self, message: str = 'Integrity violation: an identical record already exists'):
        self.message = message


api_logger = ColoredLogger(logfile_name='api.log', logger_name='API')


class ApiError(Exception):

    def __init__(self, message: str, trace: bool = True) -> None:
        self.message = message
        api_logger.error(message)
        if trace:
            api_logger.error(traceback.format_exc())

        super().__init__(message)
