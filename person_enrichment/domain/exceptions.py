class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class InvalidParameterError(ValidationError):
    pass


class UnknownParameterError(ValidationError):
    def __init__(self, name: str):
        super().__init__(f"invalid query param: {name}")
        self.name = name


class InvalidFieldError(ValidationError):
    def __init__(self, field: str):
        super().__init__(f"invalid field: {field}")
        self.field = field


class TypeMismatchError(ValidationError):
    def __init__(self, field: str, expected: str):
        super().__init__(f"field '{field}' must be of type {expected}")
        self.field = field


class MissingFieldError(ValidationError):
    def __init__(self, field: str):
        super().__init__(f"field '{field}' is required")
        self.field = field


class NotFoundError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


class ProviderError(DomainError):
    pass
