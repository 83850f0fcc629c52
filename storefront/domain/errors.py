# storefront/domain/errors.py


class AuthenticationRequired(PermissionError):
    """Operacja wymaga zalogowanego uzytkownika."""

    def __init__(self, message: str = "Please sign in to continue"):
        super().__init__(message)


class NotFoundError(LookupError):
    pass


class OutOfStockError(RuntimeError):
    pass


class CheckoutInProgressError(RuntimeError):
    pass
