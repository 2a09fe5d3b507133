"""
Sample functions registered in the test scenario.

These are ordinary functions; the scenario builder exposes them to
expression text under camelCase names.
"""

from typing import List

from ..runtime.formatting import format_template


def is_even(i: int) -> str:
    """Parity flag: "y" for even, "n" for odd."""
    if i % 2 == 0:
        return "y"
    return "n"


def reverse_int(i: int, j: int, k: int) -> List[int]:
    return [k, j, i]


def reverse_string(text: str) -> str:
    return text[::-1]


def _bracketed(items) -> str:
    return "[" + ", ".join(str(item) for item in items) + "]"


def varargs_function(*strings: str) -> str:
    """Render the arguments as "[a, b, c]"; no arguments render as "[]"."""
    return _bracketed(strings)


def varargs_function2(i: int, *strings: str) -> str:
    """Render as "<i>-[a, b, c]"."""
    return f"{i}-{_bracketed(strings)}"


def message(template: str, *args: str) -> str:
    """Format a template against string arguments."""
    return format_template(template, args)


def format_message(template: str, *args: object) -> str:
    """Format a template against arguments of any type."""
    return format_template(template, args)
