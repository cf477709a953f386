class ServiceError(Exception):
    """Базовая ошибка сервиса"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Некорректные входные данные, отдаём 400"""


class InvalidGenresError(ValidationError):
    """Фильм ссылается на жанры, которых нет в хранилище"""

    def __init__(self, message: str = "One or more genres are invalid"):
        super().__init__(message)


class StoreError(ServiceError):
    """Ошибка хранилища, отдаём 500"""
