"""Docstring parsing using griffe for operation descriptions."""

import inspect

from griffe import Docstring
from pydantic import BaseModel


class OperationDoc(BaseModel):
    """Documentation extracted from an operation's docstring."""

    summary: str
    parameters: dict[str, str]


def parse_operation_doc(docstring_text: str | None) -> OperationDoc:
    """Extract the summary line and parameter docs from a Google-style docstring.

    Args:
        docstring_text: The docstring text to parse

    Returns:
        OperationDoc with the first line of the description and any documented parameters
    """
    if not docstring_text:
        return OperationDoc(summary="", parameters={})

    docstring = Docstring(inspect.cleandoc(docstring_text), lineno=1)
    parsed = docstring.parse("google", warnings=False)

    summary = ""
    parameters: dict[str, str] = {}

    for section in parsed:
        if section.kind.value == "text" and section.value and not summary:
            summary = section.value.strip().split("\n")[0].strip()
        elif section.kind.value == "parameters" and section.value:
            for param in section.value:
                parameters[param.name] = param.description

    return OperationDoc(summary=summary, parameters=parameters)
