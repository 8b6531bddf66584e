"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

There are three families:

- ``ValidationError``: a value or field is malformed (never retried).
- ``EntityNotFoundError``: a product, basket or order does not exist.
- ``StateConflictError``: the request is well-formed but conflicts with the
  current state (insufficient stock, illegal order transition, ...).
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StateConflictError(DomainException):
    """The operation is not allowed in the current state."""


# --- Validation ---------------------------------------------------------------


class InvalidAmountError(ValidationError):
    pass


class InvalidCurrencyError(ValidationError):
    pass


class InvalidFactorError(ValidationError):
    pass


class NegativeQuantityError(ValidationError):
    pass


class EmptyNameError(ValidationError):
    pass


class MissingPriceError(ValidationError):
    pass


class MissingStockError(ValidationError):
    pass


# --- Not found ----------------------------------------------------------------


class ProductNotFoundError(EntityNotFoundError):
    pass


class BasketNotFoundError(EntityNotFoundError):
    pass


class OrderNotFoundError(EntityNotFoundError):
    pass


# --- State conflicts ----------------------------------------------------------


class CurrencyMismatchError(StateConflictError):
    pass


class NegativeResultError(StateConflictError):
    pass


class InsufficientStockError(StateConflictError):
    pass


class ItemNotFoundError(StateConflictError):
    """The product is not in the basket."""


class EmptyBasketError(StateConflictError):
    pass


class InvalidTransitionError(StateConflictError):
    pass


class AlreadyDeliveredError(StateConflictError):
    pass


class AlreadyCancelledError(StateConflictError):
    pass
