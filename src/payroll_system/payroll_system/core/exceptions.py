class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PayrollCalculationError(DomainError):
    """Raised when a payroll cannot be computed for an employee and period."""


class DataSourceUnavailableError(Exception):
    """Raised when a repository cannot reach its backing store."""
