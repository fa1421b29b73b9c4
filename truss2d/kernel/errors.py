# truss2d/kernel/errors.py
"""Exceptions raised by the truss solve pipeline."""


class TrussError(RuntimeError):
    """Base class for every modelling or solve failure."""
    pass


class DeterminacyMismatch(TrussError):
    """Raised when the equation count differs from the unknown count."""

    def __init__(self, equations: int, unknowns: int):
        self.equations = equations
        self.unknowns = unknowns
        if unknowns < equations:
            hint = "too few members/supports (mechanism by count)"
        else:
            hint = "redundant members/supports (statically indeterminate)"
        super().__init__(
            f"Truss is not statically determinate: equations={equations}, "
            f"unknowns={unknowns} ({hint})."
        )


class GeometricInstability(TrussError):
    """Raised when the equilibrium system is singular (structure is a mechanism)."""
    pass


class InvalidReference(TrussError):
    """Raised when the model references a node that does not exist or is ambiguous."""
    pass


class InvalidValue(TrussError):
    """Raised when a coordinate or load component is NaN or infinite."""
    pass
