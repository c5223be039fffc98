"""Data models for reporting calculations."""

from pydantic import BaseModel, ConfigDict, Field


class CalculationResult(BaseModel):
    """Outcome of a single calculator invocation."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    calculator: str = Field(description="Calculator variant that ran the operation")
    operation: str = Field(description="The operation that was requested")
    value1: float | None = Field(default=None, description="First operand, unset if it was not numeric")
    value2: float | None = Field(default=None, description="Second operand, unset if it was not numeric")
    result: float | None = Field(default=None, description="The calculated result")
    error: str | None = Field(default=None, description="Error message if the operation failed")

    @property
    def ok(self) -> bool:
        return self.error is None
