"""Tests for docstring parsing."""

from opcalc.docstring import parse_operation_doc


def test_google_style():
    doc = parse_operation_doc(
        """Raise a number to a power.

        Args:
            value1: Base
            value2: Exponent
        """
    )

    assert doc.summary == "Raise a number to a power."
    assert doc.parameters == {"value1": "Base", "value2": "Exponent"}


def test_summary_is_first_line():
    doc = parse_operation_doc("Add two numbers.\nWorks on floats.")

    assert doc.summary == "Add two numbers."
    assert doc.parameters == {}


def test_empty():
    assert parse_operation_doc(None).summary == ""
    assert parse_operation_doc("").parameters == {}
