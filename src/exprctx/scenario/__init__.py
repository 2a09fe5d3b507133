"""
Test scenario: a populated evaluation context for expression tests.
"""

from .inventor import Inventor, PlaceOfBirth

from .functions import (
    is_even,
    reverse_int,
    reverse_string,
    varargs_function,
    varargs_function2,
    message,
    format_message,
)

from .creator import (
    MESSAGE_TEMPLATE,
    get_test_evaluation_context,
    setup_root_context_object,
    populate_variables,
    populate_functions,
    populate_bound_functions,
)

__all__ = [
    'Inventor',
    'PlaceOfBirth',
    'is_even',
    'reverse_int',
    'reverse_string',
    'varargs_function',
    'varargs_function2',
    'message',
    'format_message',
    'MESSAGE_TEMPLATE',
    'get_test_evaluation_context',
    'setup_root_context_object',
    'populate_variables',
    'populate_functions',
    'populate_bound_functions',
]
