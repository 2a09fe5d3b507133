"""
Exceptions raised while binding and invoking registered functions.

Error code ranges:
- E40x: Invocation errors (arity, binding, argument types, formatting)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional
import builtins

from .types import Type, type_name_of

if TYPE_CHECKING:
    from .signature import CallableSignature


class ErrorSeverity(Enum):
    """Severity levels for diagnostics."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


@dataclass
class Diagnostic:
    """A single diagnostic message (error, warning, etc.)."""
    code: str                       # E401, E402, etc.
    message: str                    # Human-readable message
    severity: ErrorSeverity = ErrorSeverity.ERROR
    function: Optional[str] = None  # Function being bound or invoked
    hints: List[str] = field(default_factory=list)

    def format(self) -> str:
        """Format the diagnostic for display."""
        parts = [f"{self.severity.value}[{self.code}]: {self.message}"]

        if self.function is not None:
            parts.append(f"    --> in function '{self.function}'")

        for hint in self.hints:
            parts.append(f"    = hint: {hint}")

        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
            "function": self.function,
            "hints": self.hints,
        }


class EvalError(Exception):
    """Base exception for evaluation-context errors."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.diagnostic.format()


class ArityError(EvalError):
    """Argument count does not match a signature at call time (E401)."""
    pass


class SignatureError(EvalError):
    """Bind request incompatible with the remaining signature (E402)."""
    pass


class TypeError(EvalError, builtins.TypeError):
    """Argument value incompatible with its declared parameter type (E403)."""
    pass


class FormatError(EvalError, ValueError):
    """Template references more placeholders than supplied arguments (E404)."""
    pass


class UnknownFunctionError(EvalError, LookupError):
    """No function registered under the requested name (E405)."""
    pass


# --- Invocation error codes ---

def _describe_arity(signature: "CallableSignature") -> str:
    if signature.is_variadic:
        return f"at least {signature.fixed_arity}"
    return f"exactly {signature.fixed_arity}"


def error_arity_mismatch(signature: "CallableSignature", found: int) -> ArityError:
    """E401: Wrong number of arguments for a call."""
    diag = Diagnostic(
        code="E401",
        message=(
            f"'{signature.name}' expects {_describe_arity(signature)} "
            f"argument(s), got {found}"
        ),
        function=signature.name,
        hints=[f"signature: {signature}"],
    )
    return ArityError(diag)


def error_over_binding(signature: "CallableSignature", supplied: int) -> SignatureError:
    """E402: More bound values than the remaining signature can take."""
    diag = Diagnostic(
        code="E402",
        message=(
            f"cannot bind {supplied} value(s) to '{signature.name}': "
            f"only {signature.fixed_arity} parameter(s) remain"
        ),
        function=signature.name,
        hints=[f"remaining signature: {signature}"],
    )
    return SignatureError(diag)


def error_argument_type(function: str, parameter: str, expected: Type, value: Any) -> TypeError:
    """E403: Argument type mismatch."""
    diag = Diagnostic(
        code="E403",
        message=(
            f"argument '{parameter}' expects '{expected.name}', "
            f"found '{type_name_of(value)}'"
        ),
        function=function,
    )
    return TypeError(diag)


def error_conversion_mismatch(specifier: str, value: Any) -> TypeError:
    """E403: Format conversion applied to an incompatible value."""
    diag = Diagnostic(
        code="E403",
        message=f"format specifier '{specifier}' cannot render a '{type_name_of(value)}' value",
    )
    return TypeError(diag)


def error_missing_format_argument(specifier: str, index: int, supplied: int) -> FormatError:
    """E404: Placeholder without a matching argument."""
    diag = Diagnostic(
        code="E404",
        message=(
            f"format specifier '{specifier}' needs argument {index}, "
            f"but only {supplied} supplied"
        ),
    )
    return FormatError(diag)


def error_unknown_conversion(specifier: str) -> FormatError:
    """E404: Placeholder with an unsupported conversion character."""
    diag = Diagnostic(
        code="E404",
        message=f"unknown format conversion '{specifier}'",
        hints=["supported conversions: s S d o x X e E f g G c b B h n %"],
    )
    return FormatError(diag)


def error_unknown_function(name: str) -> UnknownFunctionError:
    """E405: Function name not registered."""
    diag = Diagnostic(
        code="E405",
        message=f"unknown function '{name}'",
        function=name,
    )
    return UnknownFunctionError(diag)
