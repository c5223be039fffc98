"""Calculator dispatching named operations to a registry."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from opcalc.errors import OperationNotSupportedError
from opcalc.operations import BasicOperationProvider, ScientificOperationProvider, as_float
from opcalc.registry import Registry, build_basic_registry, build_scientific_registry


class Operands(BaseModel):
    """Operand pair passed to every operation.

    Single-operand operations (sin, cos, tan) ignore ``value2``, but it must
    still be supplied so that every call has the same shape.
    """

    value1: float = Field(description="First operand")
    value2: float = Field(description="Second operand, ignored by single-operand operations")

    @field_validator("value1", "value2", mode="before")
    @classmethod
    def saturate_large_ints(cls, value: Any) -> Any:
        """Integers beyond the float range become an infinity of the same sign."""
        if isinstance(value, int) and not isinstance(value, bool):
            return as_float(value)
        return value


class Calculator:
    """Executes operations from the registry it was constructed with."""

    def __init__(self, registry: Registry):
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def operations(self) -> tuple[str, ...]:
        """Names of the supported operations, in registry order."""
        return self._registry.names

    def execute_operation(self, operation: str, operands: Operands | Mapping[str, Any]) -> float:
        """Look up an operation by name and apply it to the operands.

        Args:
            operation: Name of a registered operation
            operands: Operands model or a mapping with value1 and value2

        Returns:
            The numeric result, possibly inf or NaN for degenerate inputs

        Raises:
            OperationNotSupportedError: If no operation is registered under the name
            pydantic.ValidationError: If the operands are not numeric
        """
        op_desc = self._registry.get_description(operation) if isinstance(operation, str) else None
        if op_desc is None:
            raise OperationNotSupportedError(operation, self._registry.names)

        if not isinstance(operands, Operands):
            operands = Operands.model_validate(operands)

        return op_desc(operands.value1, operands.value2)


def basic_calculator() -> Calculator:
    """Calculator supporting add, subtract, multiply, power and divide."""
    return Calculator(build_basic_registry(BasicOperationProvider()))


def scientific_calculator() -> Calculator:
    """Calculator supporting the basic operations plus sin, cos and tan."""
    provider = ScientificOperationProvider(BasicOperationProvider())
    return Calculator(build_scientific_registry(provider))
