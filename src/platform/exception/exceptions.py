class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, code: str) -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, code: str = 'domain_error') -> None:
        super().__init__(message, code)


class PersistenceError(CustomBaseError):
    """Durable medium rejected a read or write (disk full, permission denied, ...)"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 'persistence_failure')


class LedgerUnavailableError(CustomBaseError):
    """Ledger could not be opened at startup - the process must not continue"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 'ledger_unavailable')
