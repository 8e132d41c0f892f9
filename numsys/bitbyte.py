"""Bit/byte unit conversion and a bitwise operation visualiser."""

from __future__ import annotations

from enum import Enum
from typing import Callable

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)


class Unit(Enum):
    """Storage units understood by the converter."""

    BIT = "bit"
    BYTE = "byte"
    KB = "kb"
    MB = "mb"
    GB = "gb"

    @property
    def bits(self) -> int:
        """Number of bits in one of this unit."""
        return _UNIT_BITS[self]

    @classmethod
    def parse(cls, unit: Unit | str) -> Unit:
        """Return the unit named by *unit*, ignoring case and surrounding space."""
        if isinstance(unit, cls):
            return unit
        try:
            return cls(str(unit).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid unit: {unit!r}") from None


_UNIT_BITS = {
    Unit.BIT: 1,
    Unit.BYTE: 8,
    Unit.KB: 8 * 1024,
    Unit.MB: 8 * 1024 * 1024,
    Unit.GB: 8 * 1024 * 1024 * 1024,
}


class BitwiseOp(Enum):
    """Bitwise operations offered by the simulator, numbered as in its menu."""

    AND = 1
    OR = 2
    XOR = 3
    NOT = 4
    LEFT_SHIFT = 5
    RIGHT_SHIFT = 6

    @property
    def symbol(self) -> str:
        return _OP_SYMBOLS[self]

    @property
    def menu_label(self) -> str:
        return _OP_LABELS[self]


_OP_SYMBOLS = {
    BitwiseOp.AND: "&",
    BitwiseOp.OR: "|",
    BitwiseOp.XOR: "^",
    BitwiseOp.NOT: "~",
    BitwiseOp.LEFT_SHIFT: "<<",
    BitwiseOp.RIGHT_SHIFT: ">>",
}

_OP_LABELS = {
    BitwiseOp.AND: "AND (a & b)",
    BitwiseOp.OR: "OR  (a | b)",
    BitwiseOp.XOR: "XOR (a ^ b)",
    BitwiseOp.NOT: "NOT (~a)",
    BitwiseOp.LEFT_SHIFT: "Left Shift  (a << 1)",
    BitwiseOp.RIGHT_SHIFT: "Right Shift (a >> 1)",
}

_CONVERTER_BANNER = (
    "\n==========================================\n"
    "       📐 Bit / Byte Unit Converter\n"
    "==========================================\n"
    " Converts between bits, bytes, KB, MB, GB.\n"
    "------------------------------------------"
)

_BITWISE_BANNER = (
    "\n===========================================\n"
    "      🔎 Bitwise Operation Visualizer\n"
    "===========================================\n"
    " Try AND, OR, XOR, NOT, <<, >> in binary\n"
    "-------------------------------------------"
)

_MODULE_MENU = (
    "\n============================================\n"
    "     🧮 Bit/Byte & Bitwise Operations\n"
    "============================================\n"
    "1. Bit/Byte/Kilobyte Converter\n"
    "2. Bitwise Operation Visualizer (AND, OR, etc.)\n"
    "3. Back to Main Menu"
)


def _wrap_int32(value: int) -> int:
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _first_token(reply: str) -> str:
    parts = reply.split()
    return parts[0] if parts else ""


def _parse_int(reply: str) -> int | None:
    try:
        return int(_first_token(reply))
    except ValueError:
        return None


def _ask_int(input_fn: InputFn, output_fn: OutputFn, prompt: str) -> int:
    while True:
        value = _parse_int(input_fn(prompt))
        if value is not None:
            return value
        output_fn("⚠️  Please enter a whole number.")


def _wants_more(input_fn: InputFn, prompt: str) -> bool:
    return _first_token(input_fn(prompt))[:1] in ("y", "Y")


def to_bits(value: float, unit: Unit | str) -> float:
    """Express *value* of *unit* as a number of bits."""
    return value * Unit.parse(unit).bits


def convert_all(value: float, unit: Unit | str) -> dict[Unit, float]:
    """Express *value* of *unit* in every known unit."""
    bits = to_bits(value, unit)
    return {target: bits / target.bits for target in Unit}


def format_conversion(bits: float) -> str:
    """Render the conversion table for an amount given in bits."""
    return "\n".join(
        (
            f"Bits   : {bits:.0f}",
            f"Bytes  : {bits / Unit.BYTE.bits:.3f}",
            f"KB     : {bits / Unit.KB.bits:.6f}",
            f"MB     : {bits / Unit.MB.bits:.6f}",
            f"GB     : {bits / Unit.GB.bits:.6f}",
        )
    )


def binary_string(num: int, bits: int = 8) -> str:
    """Return the lowest *bits* bits of *num* as a string of 0s and 1s."""
    if bits < 0:
        raise ValueError("bit width must not be negative")
    return "".join(str((num >> shift) & 1) for shift in reversed(range(bits)))


def apply_bitwise(op: BitwiseOp | int, a: int, b: int = 0) -> int:
    """Apply *op* to *a* (and *b*) with 32-bit signed integer semantics."""
    op = BitwiseOp(op)
    if op is BitwiseOp.AND:
        result = a & b
    elif op is BitwiseOp.OR:
        result = a | b
    elif op is BitwiseOp.XOR:
        result = a ^ b
    elif op is BitwiseOp.NOT:
        result = ~a
    elif op is BitwiseOp.LEFT_SHIFT:
        result = a << 1
    else:
        result = a >> 1
    return _wrap_int32(result)


def render_bitwise(op: BitwiseOp | int, a: int, b: int = 0, bits: int = 8) -> str:
    """Show an operation on *a* and *b* bit by bit, with its decimal result."""
    op = BitwiseOp(op)
    result = apply_bitwise(op, a, b)
    bin_a = binary_string(a, bits)
    bin_b = binary_string(b, bits)
    bin_result = binary_string(result, bits)
    if op is BitwiseOp.NOT:
        lines = [f"\n~ {bin_a} (A)", f"= {bin_result} → {result}"]
    elif op in (BitwiseOp.LEFT_SHIFT, BitwiseOp.RIGHT_SHIFT):
        lines = [f"\n{bin_a} {op.symbol} 1 = {bin_result} → {result}"]
    else:
        lines = [
            f"\n  {bin_a} (A)",
            f"{op.symbol} {bin_b} (B)",
            f"= {bin_result} → {result}",
        ]
    return "\n".join(lines)


def run_converter(input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
    """Ask for an amount and a unit, then print it in every unit."""
    output_fn(_CONVERTER_BANNER)
    try:
        value = float(_first_token(input_fn("Enter the value (numeric): ")))
    except ValueError:
        output_fn("⚠️  Invalid value entered.")
        return
    unit = _first_token(input_fn("Enter the unit (bit/byte/kb/mb/gb): "))
    try:
        bits = to_bits(value, unit)
    except ValueError:
        output_fn("⚠️  Invalid unit entered.")
        return
    output_fn("\n🔁 Conversion Results:")
    output_fn(format_conversion(bits))


def run_bitwise_simulator(input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
    """Interactively apply bitwise operations to pairs of numbers."""
    output_fn(_BITWISE_BANNER)
    while True:
        a = _ask_int(input_fn, output_fn, "Enter number A: ")
        b = _ask_int(input_fn, output_fn, "Enter number B: ")
        output_fn("\nChoose operation:")
        for op in BitwiseOp:
            output_fn(f"{op.value}. {op.menu_label}")
        choice = _parse_int(input_fn("Enter choice: "))
        try:
            op = BitwiseOp(choice)
        except ValueError:
            output_fn("⚠️  Invalid choice.")
        else:
            output_fn(render_bitwise(op, a, b))
        if not _wants_more(input_fn, "\nDo you want to try another? (y/n): "):
            break


def run_bit_byte_module(input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
    """Menu for the unit converter and the bitwise simulator."""
    while True:
        output_fn(_MODULE_MENU)
        choice = _parse_int(input_fn("Enter your choice: "))
        if choice == 1:
            run_converter(input_fn, output_fn)
        elif choice == 2:
            run_bitwise_simulator(input_fn, output_fn)
        elif choice == 3:
            output_fn("Returning to main menu...")
            return
        else:
            output_fn("⚠️  Invalid choice. Try again.")