__all__ = ['DomainError']


class DomainError(ValueError):
    """
    Raised when an operation is undefined for the shape of its input

    E.g. element access on an empty sequence, a zero stride or a rotation midpoint outside of its
    range. Out-of-range bounds are not domain errors, those are clamped.
    """
