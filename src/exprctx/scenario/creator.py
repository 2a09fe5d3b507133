"""
Builds the evaluation context used by expression tests.

The context has:
- An Inventor (Nikola Tesla) as the root object
- One variable, `answer`
- Direct functions (isEven, reverseInt, ...) and a family of curried
  message functions built by progressively binding a template and its
  arguments
"""

from datetime import date

from ..runtime.context import EvaluationContext
from .functions import (
    format_message,
    is_even,
    message,
    reverse_int,
    reverse_string,
    varargs_function,
    varargs_function2,
)
from .inventor import Inventor, PlaceOfBirth

MESSAGE_TEMPLATE = "This is a %s message with %s words: <%s>"


def get_test_evaluation_context() -> EvaluationContext:
    """Create a fully populated test context."""
    ctx = EvaluationContext()
    setup_root_context_object(ctx)
    populate_variables(ctx)
    populate_functions(ctx)
    populate_bound_functions(ctx)
    return ctx


def populate_functions(ctx: EvaluationContext) -> None:
    """Register the sample functions by reflecting over their signatures."""
    registry = ctx.registry
    registry.register_function(is_even, "isEven")
    registry.register_function(reverse_int, "reverseInt")
    registry.register_function(reverse_string, "reverseString")
    registry.register_function(varargs_function, "varargsFunction")
    registry.register_function(varargs_function2, "varargsFunction2")


def populate_bound_functions(ctx: EvaluationContext) -> None:
    """Register the message functions and their partially and fully bound forms."""
    registry = ctx.registry

    # message(template, args...)
    message_fn = registry.register_function(format_message, "message")
    # messageTemplate(args...)
    message_template = registry.register("messageTemplate", message_fn.bind([MESSAGE_TEMPLATE]))
    # messageBound()
    registry.register(
        "messageBound",
        message_template.bind([["prerecorded", 3, "Oh Hello World", "ignored"]]),
    )

    # messageStatic(template, args...)
    static_fn = registry.register_function(message, "messageStatic")
    # messageStaticTemplate(args...)
    static_template = registry.register("messageStaticTemplate", static_fn.bind([MESSAGE_TEMPLATE]))
    # messageStaticBound()
    registry.register(
        "messageStaticBound",
        static_template.bind([["prerecorded", "3", "Oh Hello World", "ignored"]]),
    )


def populate_variables(ctx: EvaluationContext) -> None:
    ctx.set_variable("answer", 42)


def setup_root_context_object(ctx: EvaluationContext) -> None:
    """Set an Inventor as the root object; unqualified references resolve against it."""
    tesla = Inventor("Nikola Tesla", date(1856, 8, 9), "Serbian")
    tesla.place_of_birth = PlaceOfBirth("SmilJan")
    tesla.set_inventions(
        "Telephone repeater", "Rotating magnetic field principle",
        "Polyphase alternating-current system", "Induction motor",
        "Alternating-current power transmission", "Tesla coil transformer",
        "Wireless communication", "Radio", "Fluorescent lights",
    )
    ctx.set_root_object(tesla)
