"""Tests for the command line demo driver."""

import math

import pytest
from click.testing import CliRunner

from opcalc.cli import DEMO_CALLS, build_calculators, cli, run_calculation, run_demo
from opcalc.models import CalculationResult


@pytest.fixture
def runner():
    return CliRunner()


class TestRunDemo:
    """Test the demo invocations without the CLI layer."""

    def test_results(self):
        results = run_demo()

        assert len(results) == len(DEMO_CALLS)
        assert all(isinstance(r, CalculationResult) for r in results)
        assert [r.result for r in results[:3]] == [30, 30, 5]
        assert results[3].result == math.inf
        assert results[4].result == pytest.approx(1.0)

    def test_unsupported_operation_recorded(self):
        result = run_demo()[-1]

        assert not result.ok
        assert result.result is None
        assert 'Operation "unknown_op" not supported' in result.error

    def test_run_calculation_error_does_not_raise(self):
        calculators = build_calculators()
        result = run_calculation(calculators, "basic", "tan", 1, 0)

        assert not result.ok
        assert "tan" in result.error

    def test_run_calculation_invalid_operands_does_not_raise(self):
        """Non-numeric operands are recorded as an error result."""
        calculators = build_calculators()
        result = run_calculation(calculators, "basic", "add", "abc", 1)

        assert not result.ok
        assert result.result is None
        assert result.value1 is None
        assert "value1" in result.error

    def test_run_calculation_huge_integer(self):
        calculators = build_calculators()
        result = run_calculation(calculators, "basic", "divide", 10**400, 1)

        assert result.ok
        assert result.value1 == math.inf
        assert result.result == math.inf

    def test_json_serialization_keeps_infinity(self):
        result = CalculationResult(
            calculator="basic", operation="divide", value1=1, value2=0, result=math.inf
        )

        assert '"result":Infinity' in result.model_dump_json()


class TestCLI:
    """Test the click commands."""

    def test_demo_raw(self, runner):
        result = runner.invoke(cli, ["demo", "--format", "raw"])

        assert result.exit_code == 0
        assert "basic add(10.0, 20.0) = 30.0" in result.output
        assert "basic divide(1.0, 0.0) = inf" in result.output
        assert 'Operation "unknown_op" not supported' in result.output

    def test_demo_json(self, runner):
        result = runner.invoke(cli, ["demo", "--format", "json"])

        assert result.exit_code == 0
        assert '"result": Infinity' in result.output
        assert '"operation": "unknown_op"' in result.output

    def test_demo_table(self, runner):
        result = runner.invoke(cli, ["demo", "--format", "table"])

        assert result.exit_code == 0
        assert "multiply" in result.output

    def test_demo_format_from_env(self, runner, monkeypatch):
        monkeypatch.setenv("OPCALC_OUTPUT_FORMAT", "raw")
        result = runner.invoke(cli, ["demo"])

        assert result.exit_code == 0
        assert "basic multiply(5.0, 6.0) = 30.0" in result.output

    def test_operations_basic(self, runner):
        result = runner.invoke(cli, ["operations", "--variant", "basic"])

        assert result.exit_code == 0
        assert "divide" in result.output
        assert "cos" not in result.output

    def test_operations_scientific(self, runner):
        result = runner.invoke(cli, ["operations", "--variant", "scientific"])

        assert result.exit_code == 0
        for name in ["add", "sin", "cos", "tan"]:
            assert name in result.output

    def test_operations_show_parameter_docs(self, runner):
        result = runner.invoke(
            cli, ["operations", "--variant", "basic"], env={"COLUMNS": "200"}
        )

        assert result.exit_code == 0
        assert "value1: Dividend" in result.output
        assert "value2: Exponent, may be fractional or negative" in result.output

    def test_invalid_format(self, runner):
        result = runner.invoke(cli, ["demo", "--format", "xml"])

        assert result.exit_code != 0
