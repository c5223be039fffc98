"""Errors raised by calculators."""

from collections.abc import Iterable


class OperationNotSupportedError(LookupError):
    """Raised when a calculator has no operation registered under a name."""

    def __init__(self, operation: object, supported: Iterable[str]):
        self.operation = operation
        self.supported = tuple(supported)
        super().__init__(
            f'Operation "{operation}" not supported, choose a valid operation '
            f"[{', '.join(self.supported)}]"
        )
