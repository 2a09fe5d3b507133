"""
Runtime pieces of the evaluation context.

This module provides:
- Invocable: Direct and bound (curried) callables with one invoke contract
- FunctionRegistry: Named invocables reachable from expression text
- EvaluationContext: Root object, variables and functions in one handle
- format_template: printf-style substitution used by message functions
"""

from .invocable import (
    Invocable,
    DirectInvocable,
    BoundInvocable,
)

from .registry import (
    FunctionRegistry,
)

from .context import (
    RootObjectBinder,
    VariableTable,
    EvaluationContext,
    create_context,
)

from .formatting import (
    format_template,
)

__all__ = [
    # Invocables
    'Invocable',
    'DirectInvocable',
    'BoundInvocable',

    # Registry
    'FunctionRegistry',

    # Context
    'RootObjectBinder',
    'VariableTable',
    'EvaluationContext',
    'create_context',

    # Formatting
    'format_template',
]
