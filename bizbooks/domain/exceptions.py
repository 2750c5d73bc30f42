"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class TransactionNotFoundError(DomainException):
    """No transaction exists with the requested id"""

    def __init__(self, transaction_id: int):
        super().__init__(f"Transaction {transaction_id} not found")
        self.transaction_id = transaction_id


class InvalidPhotoError(DomainException):
    """Uploaded receipt is not an accepted image type"""

    pass


class PhotoTooLargeError(InvalidPhotoError):
    """Uploaded receipt exceeds the configured size limit"""

    pass


class InvalidPeriodError(DomainException):
    """Report period start is after its end"""

    pass
