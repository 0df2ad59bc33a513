"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class TransactionsAPIError(DomainException):
    """Transactions API returned an error or is unavailable"""

    pass


class InvalidTransactionDataError(DomainException):
    """Transaction data is malformed or invalid"""

    pass


class InvalidGoalError(DomainException):
    """Goal snapshot is malformed and cannot be optimized"""

    pass
