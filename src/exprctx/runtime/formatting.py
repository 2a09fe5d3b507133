"""
printf-style template formatting used by the message functions.

Specifiers have the form::

    %[index$][flags][width][.precision]conversion

where flags are any of ``-#+ 0`` plus ``<`` (reuse the previous argument).
Arguments beyond the last referenced one are ignored. Text conversions render
None as "null" and booleans in lower case, and %h gives a hash that is the
same in every process.
"""

from typing import Any, Optional, Sequence
import re
import struct

from ..errors import (
    error_conversion_mismatch,
    error_missing_format_argument,
    error_unknown_conversion,
)

_SPECIFIER = re.compile(r"%(?:(\d+)\$)?([-#+ 0<]*)(\d+)?(?:\.(\d+))?([a-zA-Z%])?")

_TEXT_CONVERSIONS = frozenset("sbhc")
_INTEGER_CONVERSIONS = frozenset("dox")
_FLOAT_CONVERSIONS = frozenset("efg")


def format_template(template: str, args: Sequence[Any]) -> str:
    """
    Substitute `args` into `template`.

    Raises FormatError when a specifier refers past the supplied arguments
    or uses an unknown conversion, and TypeError when a numeric conversion
    receives a non-number.
    """
    args = tuple(args)
    out = []
    pos = 0
    next_index = 0
    last_index: Optional[int] = None

    for match in _SPECIFIER.finditer(template):
        out.append(template[pos:match.start()])
        pos = match.end()

        index, flags, width, precision, conversion = match.groups()
        spec = match.group(0)
        if conversion is None:
            raise error_unknown_conversion(spec)
        if conversion == "%":
            out.append(_pad("%", flags, width))
            continue
        if conversion == "n":
            out.append("\n")
            continue

        if "<" in flags:
            if last_index is None:
                raise error_missing_format_argument(spec, 1, len(args))
            i = last_index
        elif index is not None:
            i = int(index) - 1
        else:
            i = next_index
            next_index += 1

        if i < 0 or i >= len(args):
            raise error_missing_format_argument(spec, i + 1, len(args))
        last_index = i
        out.append(_render(spec, args[i], flags.replace("<", ""), width, precision, conversion))

    out.append(template[pos:])
    return "".join(out)


def _render(spec: str, value: Any, flags: str, width: Optional[str],
            precision: Optional[str], conversion: str) -> str:
    conv = conversion.lower()

    if conv in _TEXT_CONVERSIONS:
        text = _text(spec, value, conv)
        if precision is not None:
            text = text[:int(precision)]
        text = _pad(text, flags, width)
    elif conv in _INTEGER_CONVERSIONS:
        if isinstance(value, bool) or not isinstance(value, int):
            raise error_conversion_mismatch(spec, value)
        if conv in "ox":
            value = _twos_complement(value)
        text = _printf(flags, width, None, conv, value)
    elif conv in _FLOAT_CONVERSIONS:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise error_conversion_mismatch(spec, value)
        text = _printf(flags, width, precision, conv, float(value))
    else:
        raise error_unknown_conversion(spec)

    return text.upper() if conversion.isupper() else text


def _text(spec: str, value: Any, conv: str) -> str:
    if conv == "s":
        return _display(value)
    if conv == "b":
        return "false" if value is None or value is False else "true"
    if conv == "h":
        return "null" if value is None else format(_stable_hash(spec, value), "x")
    # c
    if isinstance(value, int) and not isinstance(value, bool):
        return chr(value)
    if isinstance(value, str) and len(value) == 1:
        return value
    raise error_conversion_mismatch(spec, value)


def _display(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_display(item) for item in value) + "]"
    return str(value)


_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _fold64(bits: int) -> int:
    bits &= _MASK64
    return (bits ^ (bits >> 32)) & _MASK32


def _stable_hash(spec: str, value: Any) -> int:
    """32-bit hash of a value, independent of interpreter hash seeding."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return 1231 if value else 1237
    if isinstance(value, int):
        if -2**31 <= value < 2**31:
            return value & _MASK32
        return _fold64(value)
    if isinstance(value, float):
        return _fold64(struct.unpack(">q", struct.pack(">d", value))[0])
    if isinstance(value, str):
        data = value.encode("utf-16-be")
        h = 0
        for i in range(0, len(data), 2):
            h = (31 * h + ((data[i] << 8) | data[i + 1])) & _MASK32
        return h
    if isinstance(value, (list, tuple)):
        h = 1
        for item in value:
            h = (31 * h + _stable_hash(spec, item)) & _MASK32
        return h
    raise error_conversion_mismatch(spec, value)


def _twos_complement(value: int) -> int:
    # Negative values print as their unsigned 32-bit or 64-bit pattern
    if value >= 0:
        return value
    if value >= -2**31:
        return value & _MASK32
    if value >= -2**63:
        return value & _MASK64
    return value


def _printf(flags: str, width: Optional[str], precision: Optional[str], conv: str, value: Any) -> str:
    fmt = "%" + flags + (width or "")
    if precision is not None:
        fmt += "." + precision
    return (fmt + conv) % value


def _pad(text: str, flags: str, width: Optional[str]) -> str:
    if not width:
        return text
    if "-" in flags:
        return text.ljust(int(width))
    return text.rjust(int(width))
