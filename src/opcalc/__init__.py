"""opcalc - basic and scientific calculators with named operation dispatch."""

from opcalc.calculator import Calculator, Operands, basic_calculator, scientific_calculator
from opcalc.errors import OperationNotSupportedError
from opcalc.operations import (
    BASIC_OPERATIONS,
    SCIENTIFIC_OPERATIONS,
    BasicOperationProvider,
    BasicOperations,
    ScientificOperationProvider,
    ScientificOperations,
)
from opcalc.registry import (
    OperationDescription,
    Registry,
    build_basic_registry,
    build_registry,
    build_scientific_registry,
)

__all__ = [
    # Dispatch
    "Calculator",
    "Operands",
    "basic_calculator",
    "scientific_calculator",
    "OperationNotSupportedError",
    # Providers
    "BASIC_OPERATIONS",
    "SCIENTIFIC_OPERATIONS",
    "BasicOperations",
    "ScientificOperations",
    "BasicOperationProvider",
    "ScientificOperationProvider",
    # Registries
    "Registry",
    "OperationDescription",
    "build_registry",
    "build_basic_registry",
    "build_scientific_registry",
]
