class DomainException(Exception):
    pass


class DecodeError(DomainException):
    """Тело запроса не является корректным JSON заказа"""
    pass


class ValidationError(DomainException):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class PersistenceError(DomainException):
    pass


class ConfigurationError(DomainException):
    pass
