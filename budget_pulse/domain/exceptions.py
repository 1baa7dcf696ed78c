"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidPeriodError(DomainException):
    """Period start date falls after its end date"""

    pass


class InvalidExpenseError(DomainException):
    """Expense amount is negative or not a finite number"""

    pass
