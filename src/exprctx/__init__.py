"""
exprctx - evaluation contexts for an embedded expression language.

This package provides:
- Types and signatures: Parameter types and callable signatures
- Runtime: Direct and bound invocables, the function registry, and the
  evaluation context (root object, variables, functions)
- Introspection: Read-only views of registered signatures
- Scenario: Sample functions and a ready-made test context

Usage:
    from exprctx import create_context, DirectInvocable

    ctx = create_context(variables={"answer": 42})
    ctx.register_function("shout", lambda s: s.upper())

    shout = ctx.function("shout")
    shout.invoke(["hi"])        # "HI"
"""

from importlib.metadata import PackageNotFoundError, version
import logging

from .types import (
    Type,
    PrimitiveType,
    ObjectType,
    ListType,
    OptionalType,
    INT,
    FLOAT,
    BOOL,
    STRING,
    OBJECT,
    resolve_type_name,
    resolve_annotation,
)

from .signature import (
    Parameter,
    CallableSignature,
    make_signature,
    signature_from_function,
)

from .errors import (
    ErrorSeverity,
    Diagnostic,
    EvalError,
    ArityError,
    SignatureError,
    TypeError,
    FormatError,
    UnknownFunctionError,
)

from .runtime import (
    Invocable,
    DirectInvocable,
    BoundInvocable,
    FunctionRegistry,
    RootObjectBinder,
    VariableTable,
    EvaluationContext,
    create_context,
    format_template,
)

try:
    __version__ = version("exprctx")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    'Type',
    'PrimitiveType',
    'ObjectType',
    'ListType',
    'OptionalType',
    'INT',
    'FLOAT',
    'BOOL',
    'STRING',
    'OBJECT',
    'resolve_type_name',
    'resolve_annotation',

    # Signatures
    'Parameter',
    'CallableSignature',
    'make_signature',
    'signature_from_function',

    # Errors
    'ErrorSeverity',
    'Diagnostic',
    'EvalError',
    'ArityError',
    'SignatureError',
    'TypeError',
    'FormatError',
    'UnknownFunctionError',

    # Runtime
    'Invocable',
    'DirectInvocable',
    'BoundInvocable',
    'FunctionRegistry',
    'RootObjectBinder',
    'VariableTable',
    'EvaluationContext',
    'create_context',
    'format_template',
]
