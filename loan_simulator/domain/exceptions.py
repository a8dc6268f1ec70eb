"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class NoCompatibleProductError(DomainException):
    """No product in the catalog admits the requested principal and term"""

    pass


class InvalidSimulationInputError(DomainException, ValueError):
    """Principal, term or rate violates the engine's preconditions"""

    pass
