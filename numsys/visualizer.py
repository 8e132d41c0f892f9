"""Step-by-step visualisations of conversions between number bases."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]
DelayFn = Callable[[float], None]

_Line = tuple[str, float]

_DIGITS = "0123456789ABCDEF"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_OCTAL_DIGITS = "01234567"

_BINARY_ROW_PAUSE = 0.25
_TABLE_ROW_PAUSE = 0.2

_DEC_TO_BIN_BANNER = (
    "\n=========================================\n"
    "   🔄 Decimal to Binary - Visualizer\n"
    "=========================================\n"
    "  This shows how decimal numbers convert\n"
    "  step-by-step into binary using division.\n"
    "-----------------------------------------"
)

_DEC_TO_HEX_BANNER = (
    "\n============================================\n"
    "   🧮 Decimal to Hexadecimal - Visualizer\n"
    "============================================\n"
    "  Shows how repeated /16 gives hex digits.\n"
    "--------------------------------------------"
)

_DEC_TO_OCT_BANNER = (
    "\n===========================================\n"
    "   🧮 Decimal to Octal - Visualizer\n"
    "===========================================\n"
    "  Shows how repeated /8 gives octal digits.\n"
    "-------------------------------------------"
)

_BIN_TO_DEC_BANNER = (
    "\n=============================================\n"
    "   🧮 Binary to Decimal - Visualizer\n"
    "=============================================\n"
    "  Shows how each bit contributes to the total.\n"
    "---------------------------------------------"
)

_HEX_TO_DEC_BANNER = (
    "\n=============================================\n"
    "   🧮 Hexadecimal to Decimal - Visualizer\n"
    "=============================================\n"
    "  Shows place value of each hex digit (16ⁿ).\n"
    "---------------------------------------------"
)

_OCT_TO_DEC_BANNER = (
    "\n=============================================\n"
    "   🧮 Octal to Decimal - Visualizer\n"
    "=============================================\n"
    "  Shows how each digit contributes (8ⁿ).\n"
    "---------------------------------------------"
)

_RULE = "---------------------------------------------"

_MENU = (
    "\n=======================================\n"
    "     🔍 Number Conversion Visualizer\n"
    "=======================================\n"
    "1. Decimal → Binary\n"
    "2. Binary → Decimal\n"
    "3. Decimal → Hexadecimal\n"
    "4. Hexadecimal → Decimal\n"
    "5. Decimal → Octal\n"
    "6. Octal → Decimal\n"
    "7. Back to Main Menu"
)


@dataclass(frozen=True)
class DivisionStep:
    """One row of a repeated-division table; the last row has no remainder."""

    quotient: int
    remainder: int | None

    @property
    def digit(self) -> str:
        """The digit this row contributes, or "-" for the closing row."""
        return "-" if self.remainder is None else _DIGITS[self.remainder]


def division_steps(num: int, base: int) -> list[DivisionStep]:
    """Rows of dividing *num* repeatedly by *base*, ending with a zero row."""
    if not 2 <= base <= 16:
        raise ValueError("base must be between 2 and 16")
    if num < 0:
        raise ValueError("Please enter a positive number.")
    steps = []
    while num > 0:
        steps.append(DivisionStep(num, num % base))
        num //= base
    steps.append(DivisionStep(0, None))
    return steps


def _digits_msb_first(steps: list[DivisionStep]) -> str:
    return "".join(step.digit for step in reversed(steps[:-1]))


def hex_char_to_int(c: str) -> int:
    """Value of one hexadecimal digit, either case."""
    if len(c) != 1 or c not in _HEX_DIGITS:
        raise ValueError(f"Invalid hex digit '{c}'. Use 0-9, A-F.")
    return _DIGITS.index(c.upper())


def octal_char_to_int(c: str) -> int:
    """Value of one octal digit."""
    if len(c) != 1 or c not in _OCTAL_DIGITS:
        raise ValueError(f"Invalid octal digit '{c}'. Use 0–7 only.")
    return _OCTAL_DIGITS.index(c)


def _bit_char_to_int(c: str) -> int:
    if c not in ("0", "1"):
        raise ValueError(f"Invalid binary digit '{c}'. Please enter only 0 or 1.")
    return int(c)


def _require_text(text: str) -> str:
    if not text:
        raise ValueError("Please enter a number.")
    return text


def _decimal_to_binary_lines(num: int) -> list[_Line]:
    steps = division_steps(num, 2)
    lines: list[_Line] = [
        (_DEC_TO_BIN_BANNER, 0.0),
        ("\n🧮 Step-by-Step Division Table:", 0.0),
        ("┌────────────┬─────────────┐", 0.0),
        ("│  Quotient  │  Remainder  │", 0.0),
        ("├────────────┼─────────────┤", 0.0),
    ]
    for step in steps:
        if step.remainder is None:
            row = f"│     {step.quotient:3d}    │      -      │"
        else:
            row = f"│     {step.quotient:3d}    │     {step.remainder}       │"
        lines.append((row, _BINARY_ROW_PAUSE))
    lines.append(("└────────────┴─────────────┘", 0.0))
    lines.append(
        (
            f"\n🧠 Final Binary for Decimal {num} (MSB ← LSB): "
            f"{_digits_msb_first(steps)} ✅",
            0.0,
        )
    )
    return lines


def _division_table_lines(
    num: int, base: int, banner: str, digit_header: str, rule: str, label: str
) -> list[_Line]:
    steps = division_steps(num, base)
    lines: list[_Line] = [
        (banner, 0.0),
        (f"\nDecimal Input: {num}", 0.0),
        (f"\nStep | Quotient | Remainder | {digit_header}", 0.0),
        (rule, 0.0),
    ]
    for number, step in enumerate(steps, start=1):
        if step.remainder is None:
            row = f" {number:2d}  |   {step.quotient:3d}    |     -     |    -"
        else:
            row = (
                f" {number:2d}  |   {step.quotient:3d}    |    {step.remainder:2d}     |"
                f"    {step.digit}"
            )
        lines.append((row, _TABLE_ROW_PAUSE))
    lines.append((f"\n🧠 {label} (MSB ← LSB): {_digits_msb_first(steps)} ✅", 0.0))
    return lines


def _decimal_to_hex_lines(num: int) -> list[_Line]:
    return _division_table_lines(
        num, 16, _DEC_TO_HEX_BANNER, "Hex Digit", "-" * 40, "Hexadecimal"
    )


def _decimal_to_octal_lines(num: int) -> list[_Line]:
    return _division_table_lines(
        num, 8, _DEC_TO_OCT_BANNER, "Octal Digit", "-" * 42, "Octal"
    )


def _binary_to_decimal_lines(binary: str) -> list[_Line]:
    bits = [_bit_char_to_int(c) for c in _require_text(binary)]
    exponents = range(len(bits) - 1, -1, -1)
    terms = [(bit, 1 << power) for bit, power in zip(bits, exponents)]
    total = sum(bit * weight for bit, weight in terms)
    return [
        (_BIN_TO_DEC_BANNER, 0.0),
        (f"\nBinary Input: {binary}\n", 0.0),
        ("Position (2^n):  " + "".join(f"2^{power}  " for power in exponents), 0.0),
        ("Bit Value     :  " + "".join(f" {c}   " for c in binary), 0.0),
        (_RULE, 0.0),
        (
            "Calculation   :  "
            + " + ".join(f"({bit}×{weight})" for bit, weight in terms)
            + f" = {total} ✅",
            0.0,
        ),
    ]


def _hex_to_decimal_lines(hex_text: str) -> list[_Line]:
    digits = [hex_char_to_int(c) for c in _require_text(hex_text)]
    exponents = range(len(digits) - 1, -1, -1)
    terms = [(digit, 16**power) for digit, power in zip(digits, exponents)]
    values = [digit * weight for digit, weight in terms]
    return [
        (_HEX_TO_DEC_BANNER, 0.0),
        (f"\nHex Input: {hex_text}\n", 0.0),
        ("Position (16^n):   " + "".join(f"16^{power}  " for power in exponents), 0.0),
        ("Hex Digit      :   " + "".join(f" {c}    " for c in hex_text), 0.0),
        ("Decimal Value  :   " + "".join(f"{value:4d} " for value in values), 0.0),
        (_RULE, 0.0),
        (
            "Total Decimal  = "
            + " + ".join(f"({digit}×{weight})" for digit, weight in terms)
            + f" = {sum(values)} ✅",
            0.0,
        ),
    ]


def _octal_to_decimal_lines(octal: str) -> list[_Line]:
    digits = [octal_char_to_int(c) for c in _require_text(octal)]
    exponents = range(len(digits) - 1, -1, -1)
    terms = [(digit, 8**power) for digit, power in zip(digits, exponents)]
    values = [digit * weight for digit, weight in terms]
    return [
        (_OCT_TO_DEC_BANNER, 0.0),
        (f"\nOctal Input: {octal}\n", 0.0),
        ("Position (8^n):     " + "".join(f"8^{power}   " for power in exponents), 0.0),
        ("Octal Digit   :     " + "".join(f" {c}    " for c in octal), 0.0),
        ("Decimal Value :     " + "".join(f"{value:4d}  " for value in values), 0.0),
        (_RULE, 0.0),
        (
            "Total Decimal = "
            + " + ".join(f"({digit}×{weight})" for digit, weight in terms)
            + f" = {sum(values)} ✅",
            0.0,
        ),
    ]


def _join(lines: list[_Line]) -> str:
    return "\n".join(text for text, _ in lines)


def decimal_to_binary_visual(num: int) -> str:
    """Division table turning a non-negative decimal into binary."""
    return _join(_decimal_to_binary_lines(num))


def decimal_to_hex_visual(num: int) -> str:
    """Division table turning a non-negative decimal into hexadecimal."""
    return _join(_decimal_to_hex_lines(num))


def decimal_to_octal_visual(num: int) -> str:
    """Division table turning a non-negative decimal into octal."""
    return _join(_decimal_to_octal_lines(num))


def binary_to_decimal_visual(binary: str) -> str:
    """Place-value breakdown of a binary string."""
    return _join(_binary_to_decimal_lines(binary))


def hex_to_decimal_visual(hex_text: str) -> str:
    """Place-value breakdown of a hexadecimal string."""
    return _join(_hex_to_decimal_lines(hex_text))


def octal_to_decimal_visual(octal: str) -> str:
    """Place-value breakdown of an octal string."""
    return _join(_octal_to_decimal_lines(octal))


def _first_token(reply: str) -> str:
    parts = reply.split()
    return parts[0] if parts else ""


def _parse_int(reply: str) -> int | None:
    try:
        return int(_first_token(reply))
    except ValueError:
        return None


def _show(lines: list[_Line], output_fn: OutputFn, delay: DelayFn) -> None:
    for text, pause in lines:
        output_fn(text)
        if pause:
            delay(pause)


_DECIMAL_CHOICES: dict[int, Callable[[int], list[_Line]]] = {
    1: _decimal_to_binary_lines,
    3: _decimal_to_hex_lines,
    5: _decimal_to_octal_lines,
}

_TEXT_CHOICES: dict[int, tuple[str, Callable[[str], list[_Line]]]] = {
    2: ("Enter a binary number: ", _binary_to_decimal_lines),
    4: ("Enter a hexadecimal number: ", _hex_to_decimal_lines),
    6: ("Enter an octal number: ", _octal_to_decimal_lines),
}


def run_visualizer_module(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    delay: DelayFn = time.sleep,
) -> None:
    """Menu of conversion visualisations, animated row by row with *delay*."""
    while True:
        output_fn(_MENU)
        choice = _parse_int(input_fn("Enter your choice: "))
        if choice == 7:
            output_fn("Returning to main menu...")
            return
        if choice in _DECIMAL_CHOICES:
            num = _parse_int(input_fn("Enter a decimal number: "))
            if num is None:
                output_fn("⚠️  Please enter a whole number.")
            elif num < 0:
                output_fn("⚠️  Please enter a positive number.")
            else:
                _show(_DECIMAL_CHOICES[choice](num), output_fn, delay)
        elif choice in _TEXT_CHOICES:
            prompt, build = _TEXT_CHOICES[choice]
            text = _first_token(input_fn(prompt))
            try:
                lines = build(text)
            except ValueError as exc:
                output_fn(f"⚠️  {exc}")
            else:
                _show(lines, output_fn, delay)
        else:
            output_fn("⚠️  Invalid choice. Try again.")