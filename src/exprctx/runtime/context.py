"""
Evaluation context for the expression evaluator.

Bundles the root object, the variable table and the function registry into
the single handle an evaluator is given.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union
import logging

from ..errors import error_unknown_function
from .invocable import Invocable
from .registry import FunctionRegistry

logger = logging.getLogger(__name__)


class RootObjectBinder:
    """Holds the object unqualified property and method references resolve against."""

    def __init__(self, root: Any = None):
        self._root = root

    @property
    def root(self) -> Any:
        return self._root

    @property
    def has_root(self) -> bool:
        return self._root is not None

    def set_root(self, root: Any) -> None:
        """Replace the root object (None clears it)."""
        self._root = root


@dataclass
class VariableTable:
    """Named variable values; the last write for a name wins."""
    variables: Dict[str, Any] = field(default_factory=dict)

    def get(self, name: str) -> Optional[Any]:
        """Look up a variable, returning None if it is not defined."""
        return self.variables.get(name)

    def set(self, name: str, value: Any) -> None:
        """Define or replace a variable."""
        self.variables[name] = value

    def contains(self, name: str) -> bool:
        return name in self.variables

    def names(self) -> List[str]:
        return sorted(self.variables)

    def items(self) -> Iterator[Tuple[str, Any]]:
        return iter(sorted(self.variables.items()))

    def __len__(self) -> int:
        return len(self.variables)


@dataclass
class EvaluationContext:
    """
    The full context handed to the expression evaluator.

    Holds:
    - The root object (optional)
    - Variables
    - Registered functions
    """
    root_binder: RootObjectBinder = field(default_factory=RootObjectBinder)
    variable_table: VariableTable = field(default_factory=VariableTable)
    registry: FunctionRegistry = field(default_factory=FunctionRegistry)

    # --- Evaluator-facing lookups ---

    def root(self) -> Optional[Any]:
        """The root object, or None when unqualified references cannot resolve."""
        return self.root_binder.root

    def variable(self, name: str) -> Optional[Any]:
        """Look up a variable by name."""
        return self.variable_table.get(name)

    def function(self, name: str) -> Optional[Invocable]:
        """Look up a function by name."""
        return self.registry.lookup(name)

    # --- Setup ---

    def set_root_object(self, root: Any) -> None:
        """Set the root object."""
        self.root_binder.set_root(root)
        logger.debug("Root object set to %s", type(root).__name__)

    def set_variable(self, name: str, value: Any) -> None:
        """Define or replace a variable."""
        self.variable_table.set(name, value)

    def register_function(self, name: str, target: Union[Invocable, Callable[..., Any]]) -> Invocable:
        """Register a function (or plain Python callable) under `name`."""
        return self.registry.register(name, target)

    def call_function(self, name: str, args: Sequence[Any] = ()) -> Any:
        """
        Call a registered function by name.

        Raises UnknownFunctionError if no function is registered under `name`.
        """
        func = self.registry.lookup(name)
        if func is None:
            raise error_unknown_function(name)
        return func.invoke(args)


def create_context(
    root: Any = None,
    variables: Optional[Mapping[str, Any]] = None,
    functions: Optional[Mapping[str, Union[Invocable, Callable[..., Any]]]] = None,
) -> EvaluationContext:
    """
    Create a populated evaluation context.

    Args:
        root: The root object (optional)
        variables: Variable values by name
        functions: Invocables or plain Python callables by name

    Returns:
        A fresh EvaluationContext
    """
    ctx = EvaluationContext()
    if root is not None:
        ctx.set_root_object(root)
    for name, value in (variables or {}).items():
        ctx.set_variable(name, value)
    for name, target in (functions or {}).items():
        ctx.register_function(name, target)
    return ctx
