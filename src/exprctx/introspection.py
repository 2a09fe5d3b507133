"""
Introspection API for registered functions.

Gives evaluators and tools read-only access to the signatures kept in a
FunctionRegistry, as dictionaries, text or JSON.

Usage:
    from exprctx.introspection import describe_function, get_function_info

    info = get_function_info(ctx.registry, "varargsFunction2")
    print(info["signature"])  # "varargsFunction2(i: int, strings: string...) -> string"
"""

from typing import Any, Dict, List, Optional
import json

from .signature import CallableSignature
from .runtime.invocable import BoundInvocable, Invocable
from .runtime.registry import FunctionRegistry


def format_signature(sig: CallableSignature) -> str:
    """Format a signature as a string."""
    return str(sig)


def signature_to_dict(sig: CallableSignature) -> Dict[str, Any]:
    """Convert a CallableSignature to a dictionary."""
    params = [{"name": p.name, "type": p.type.name} for p in sig.params]
    varargs = None
    if sig.varargs is not None:
        varargs = {"name": sig.varargs.name, "type": sig.varargs.type.name}

    return {
        "name": sig.name,
        "parameters": params,
        "varargs": varargs,
        "return_type": sig.return_type.name,
        "fixed_arity": sig.fixed_arity,
        "is_variadic": sig.is_variadic,
        "signature": format_signature(sig),
    }


def _invocable_to_dict(name: str, func: Invocable) -> Dict[str, Any]:
    info = signature_to_dict(func.signature)
    info["registered_as"] = name
    info["kind"] = "bound" if isinstance(func, BoundInvocable) else "direct"
    info["bound_args"] = len(func.bound_args) if isinstance(func, BoundInvocable) else 0
    return info


def list_functions(registry: FunctionRegistry, variadic: Optional[bool] = None) -> List[str]:
    """
    List registered function names.

    Args:
        registry: The registry to inspect
        variadic: Optional filter on whether the effective signature is variadic

    Returns:
        Sorted list of function names
    """
    names = []
    for name, func in registry.items():
        if variadic is None or func.signature.is_variadic == variadic:
            names.append(name)
    return names


def get_function_info(registry: FunctionRegistry, name: str) -> Optional[Dict[str, Any]]:
    """
    Get detailed information about a registered function.

    Returns None if the function is not registered.
    """
    func = registry.lookup(name)
    if func is None:
        return None
    return _invocable_to_dict(name, func)


def describe_function(registry: FunctionRegistry, name: str) -> str:
    """Get a human-readable description of a registered function."""
    info = get_function_info(registry, name)
    if info is None:
        return f"Unknown function: {name}"

    lines = [
        f"Function: {name}",
        f"Signature: {info['signature']}",
        f"Kind: {info['kind']}",
    ]

    if info["bound_args"]:
        lines.append(f"Bound arguments: {info['bound_args']}")

    if info["is_variadic"]:
        lines.append("Note: This function accepts variable arguments or a list")

    return "\n".join(lines)


def get_api_reference(registry: FunctionRegistry) -> Dict[str, Any]:
    """Get every registered function as a dictionary keyed by name."""
    return {
        "functions": {name: _invocable_to_dict(name, func) for name, func in registry.items()},
    }


def get_api_as_json(registry: FunctionRegistry) -> str:
    """Get the API reference as a JSON string."""
    return json.dumps(get_api_reference(registry), indent=2)
