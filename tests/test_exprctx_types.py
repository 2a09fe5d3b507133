"""
Tests for parameter types, signatures and signature reflection.
"""

from typing import List, Optional, Sequence

import pytest

from exprctx import (
    INT, FLOAT, BOOL, STRING, OBJECT, ListType, OptionalType,
    CallableSignature, Parameter, SignatureError,
    make_signature, resolve_annotation, resolve_type_name, signature_from_function,
)


# --- Type Tests ---

class TestTypes:
    """Test runtime acceptance and assignability."""

    def test_int_accepts(self):
        """Test int accepts ints but not bools or floats."""
        assert INT.accepts(3)
        assert not INT.accepts(True)
        assert not INT.accepts(3.0)

    def test_float_accepts_int(self):
        """Test int values are accepted where float is declared."""
        assert FLOAT.accepts(1.5)
        assert FLOAT.accepts(2)
        assert not INT.accepts(2.0)

    def test_bool_and_string(self):
        """Test bool and string acceptance."""
        assert BOOL.accepts(False)
        assert not BOOL.accepts(0)
        assert STRING.accepts("")
        assert not STRING.accepts(None)

    def test_object_accepts_anything(self):
        """Test the top type."""
        assert OBJECT.accepts(None)
        assert OBJECT.accepts([1, "a"])

    def test_list_type(self):
        """Test list<T> acceptance."""
        strings = ListType(STRING)
        assert strings.accepts(["a", "b"])
        assert strings.accepts(())
        assert not strings.accepts(["a", 1])
        assert not strings.accepts("ab")
        assert strings.name == "list<string>"

    def test_optional_type(self):
        """Test T? acceptance."""
        opt = OptionalType(INT)
        assert opt.accepts(None)
        assert opt.accepts(1)
        assert opt.name == "int?"

    def test_resolve_type_name(self):
        """Test lookup by name."""
        assert resolve_type_name("string") is STRING
        assert resolve_type_name("geometry") is None

    def test_resolve_annotation(self):
        """Test mapping Python annotations to types."""
        assert resolve_annotation(int) == INT
        assert resolve_annotation(str) == STRING
        assert resolve_annotation(List[int]) == ListType(INT)
        assert resolve_annotation(list[str]) == ListType(STRING)
        assert resolve_annotation(Sequence[float]) == ListType(FLOAT)
        assert resolve_annotation(list) == ListType(OBJECT)
        assert resolve_annotation(Optional[str]) == OptionalType(STRING)
        assert resolve_annotation(int | None) == OptionalType(INT)
        assert resolve_annotation(dict) == OBJECT


# --- Signature Tests ---

class TestSignature:
    """Test signature shape and binding arithmetic."""

    def test_make_signature(self):
        """Test synthetic parameter names."""
        sig = make_signature("f", [INT, STRING], STRING, varargs_type=OBJECT)
        assert [p.name for p in sig.params] == ["arg0", "arg1"]
        assert sig.fixed_arity == 2
        assert sig.is_variadic
        assert str(sig) == "f(arg0: int, arg1: string, args: object...) -> string"

    def test_accepts_count(self):
        """Test call-count validation."""
        fixed = make_signature("f", [INT, INT])
        assert fixed.accepts_count(2)
        assert not fixed.accepts_count(1)
        assert not fixed.accepts_count(3)
        variadic = make_signature("g", [INT], varargs_type=STRING)
        assert variadic.accepts_count(1)
        assert variadic.accepts_count(5)
        assert not variadic.accepts_count(0)

    def test_bind_fixed(self):
        """Test binding fixed values drops leading parameters."""
        sig = make_signature("f", [INT, STRING])
        reduced, prefix = sig.bind([1])
        assert reduced.params == (Parameter("arg1", STRING),)
        assert prefix == (1,)

    def test_bind_keeps_tail_sequence_open(self):
        """Test a sequence landing in the tail is kept whole and the tail stays open."""
        sig = make_signature("f", [INT], varargs_type=STRING)
        reduced, prefix = sig.bind([1, ("a", "b")])
        assert prefix == (1, ("a", "b"))
        assert reduced.fixed_arity == 0
        assert reduced.is_variadic
        assert reduced.accepts_count(2)

    def test_bind_past_fixed_signature(self):
        """Test over-binding raises SignatureError with a code."""
        sig = make_signature("f", [INT])
        with pytest.raises(SignatureError) as exc_info:
            sig.bind([1, 2])
        assert exc_info.value.code == "E402"
        assert exc_info.value.diagnostic.function == "f"

    def test_signature_is_immutable(self):
        """Test binding leaves the original signature untouched."""
        sig = make_signature("f", [INT, INT])
        sig.bind([1])
        assert sig.fixed_arity == 2


# --- Reflection Tests ---

class TestReflection:
    """Test signatures reflected from Python functions."""

    def test_reflect_annotated(self):
        """Test annotations become parameter types."""
        def f(a: int, b: str, *rest: float) -> str:
            return ""

        sig = signature_from_function(f)
        assert sig.name == "f"
        assert sig.params == (Parameter("a", INT), Parameter("b", STRING))
        assert sig.varargs == Parameter("rest", FLOAT)
        assert sig.return_type == STRING

    def test_reflect_unannotated(self):
        """Test missing annotations mean object."""
        sig = signature_from_function(lambda x, y: None, name="pair")
        assert sig.name == "pair"
        assert [p.type for p in sig.params] == [OBJECT, OBJECT]
        assert not sig.is_variadic

    def test_reflect_keyword_only_with_default(self):
        """Test keyword-only parameters with defaults are skipped."""
        def f(a, *, verbose=False):
            return a

        sig = signature_from_function(f)
        assert sig.fixed_arity == 1

    def test_reflect_keyword_only_required(self):
        """Test required keyword-only parameters cannot be reflected."""
        def f(a, *, mode):
            return a

        with pytest.raises(ValueError, match="keyword-only parameter 'mode'"):
            signature_from_function(f)

    def test_signature_equality(self):
        """Test signatures compare by value."""
        assert CallableSignature("f") == CallableSignature("f")
