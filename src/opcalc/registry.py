"""Operation registries mapping operation names to functions."""

import inspect
import logging
from collections import OrderedDict
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from opcalc.docstring import parse_operation_doc
from opcalc.operations import (
    BASIC_OPERATIONS,
    SCIENTIFIC_OPERATIONS,
    BasicOperations,
    ScientificOperations,
)

logger = logging.getLogger(__name__)


class OperationDescription:
    """A registered operation: its name, function, arity and description."""

    name: str
    function: Callable[..., float]
    arity: int
    description: str
    parameters: dict[str, str]

    def __init__(self, func: Callable[..., float], name: str | None = None):
        self.function = func
        self.name = name or func.__name__
        self.arity = _positional_arity(func)

        doc = parse_operation_doc(inspect.getdoc(func))
        self.description = doc.summary
        self.parameters = doc.parameters

    def __call__(self, value1: float, value2: float) -> float:
        """Call the operation with an operand pair, dropping value2 for unary operations."""
        if self.arity == 1:
            return self.function(value1)
        return self.function(value1, value2)

    def __repr__(self) -> str:
        return f"OperationDescription(name={self.name!r}, arity={self.arity})"


def _positional_arity(func: Callable[..., Any]) -> int:
    params = [
        p
        for p in inspect.signature(func).parameters.values()
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    if len(params) not in (1, 2):
        raise TypeError(
            f"Operation {getattr(func, '__name__', func)!r} must take one or two operands, "
            f"got {len(params)}"
        )
    return len(params)


class Registry:
    """Ordered registry of operations, frozen once built."""

    def __init__(self):
        self._operations: dict[str, OperationDescription] = OrderedDict()
        self._frozen = False

    def register(self, func: Callable[..., float], name: str | None = None) -> None:
        """Register an operation function.

        Args:
            func: Function taking one or two numeric operands
            name: Override operation name, defaults to the function name
        """
        if self._frozen:
            raise RuntimeError("Cannot register operations on a frozen registry")

        name = name or func.__name__

        if name in self._operations:
            logger.debug(f"Operation {name} already registered, skipping")
            return

        self._operations[name] = OperationDescription(func, name=name)
        logger.debug(f"Registered operation: {name}")

    def freeze(self) -> "Registry":
        """Disallow further registrations and return the registry."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def names(self) -> tuple[str, ...]:
        """Operation names in registration order."""
        return tuple(self._operations)

    @property
    def functions(self) -> list[OperationDescription]:
        """Get all registered operation descriptions."""
        return list(self._operations.values())

    def get_description(self, name: str) -> OperationDescription | None:
        """Get an operation description by name."""
        return self._operations.get(name)

    def get_function(self, name: str) -> Callable[..., float]:
        """Get the raw function by name."""
        op_desc = self._operations.get(name)
        if op_desc is None:
            raise KeyError(f"Operation '{name}' not found")
        return op_desc.function

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)


def build_registry(provider: object, names: Iterable[str]) -> Registry:
    """Snapshot the named methods of a provider into a frozen registry.

    Functions are captured when the registry is built, so later changes to
    the provider are not reflected.

    Args:
        provider: Object implementing each named operation
        names: Operation names to collect, in order

    Raises:
        AttributeError: If the provider lacks one of the operations
    """
    registry = Registry()
    for name in names:
        registry.register(getattr(provider, name), name=name)
    return registry.freeze()


def build_basic_registry(provider: BasicOperations) -> Registry:
    """Registry with the five basic operations."""
    return build_registry(provider, BASIC_OPERATIONS)


def build_scientific_registry(provider: ScientificOperations) -> Registry:
    """Registry with the basic operations followed by sin, cos and tan."""
    return build_registry(provider, SCIENTIFIC_OPERATIONS)
