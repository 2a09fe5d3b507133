"""
Function registry for the evaluation context.

Maps names used in expression text to invocables.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union
import logging

from ..signature import CallableSignature
from .invocable import DirectInvocable, Invocable

logger = logging.getLogger(__name__)


class FunctionRegistry:
    """
    Registry of named invocable functions.

    Registering an existing name replaces the previous entry. No arity or
    type checking happens here; signatures are kept so the evaluator can
    validate calls.
    """

    def __init__(self):
        self._functions: Dict[str, Invocable] = {}

    def register(self, name: str, target: Union[Invocable, Callable[..., Any]]) -> Invocable:
        """
        Register an invocable under `name`.

        A plain Python callable is wrapped in a DirectInvocable whose
        signature is reflected from the function.
        """
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"invalid function name: {name!r}")
        if isinstance(target, Invocable):
            invocable = target
        elif callable(target):
            invocable = DirectInvocable.from_function(target, name)
        else:
            raise ValueError(f"cannot register {type(target).__name__} as function '{name}'")

        if name in self._functions:
            logger.debug("Replacing function %s", name)
        self._functions[name] = invocable
        logger.debug("Registered function %s: %s", name, invocable.signature)
        return invocable

    def register_function(self, function: Callable[..., Any], name: Optional[str] = None,
                          signature: Optional[CallableSignature] = None) -> DirectInvocable:
        """Register a Python function, reflecting its signature unless one is given."""
        name = name or function.__name__
        if signature is None:
            invocable = DirectInvocable.from_function(function, name)
        else:
            invocable = DirectInvocable(function, signature)
        self.register(name, invocable)
        return invocable

    def lookup(self, name: str) -> Optional[Invocable]:
        """Look up a function by name."""
        return self._functions.get(name)

    def names(self) -> List[str]:
        """Registered names, sorted."""
        return sorted(self._functions)

    def items(self) -> Iterator[Tuple[str, Invocable]]:
        return iter(sorted(self._functions.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)
