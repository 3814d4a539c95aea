class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class WorkflowStageError(DomainError):
    """Operation is not allowed in the attempt's current stage"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class GatewayError(CustomBaseError):
    """Payment declined or gateway unreachable"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 402)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class ServiceUnavailableError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 503)
