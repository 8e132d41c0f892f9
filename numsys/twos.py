"""Two's complement encoding and a bit-by-bit addition simulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MAX_BITS = 32

_BANNER = (
    "\n===========================================\n"
    "   ➕ Two's Complement Arithmetic Simulator\n"
    "===========================================\n"
    " Understand how signed binary arithmetic\n"
    " works using two's complement logic.\n"
    "-------------------------------------------"
)

_RULE = "----------------------------------"


def detect_overflow(a: int, b: int, result: int) -> bool:
    """True when two operands of equal sign gave a result of the other sign."""
    return (a > 0 and b > 0 and result < 0) or (a < 0 and b < 0 and result > 0)


def signed_range(bits: int) -> tuple[int, int]:
    """Smallest and largest value a *bits*-bit signed integer can hold."""
    if not 1 <= bits <= MAX_BITS:
        raise ValueError(f"bit size must be between 1 and {MAX_BITS}")
    half = 1 << (bits - 1)
    return -half, half - 1


def to_twos_complement(value: int, bits: int) -> str:
    """Lowest *bits* bits of *value* in two's complement form."""
    signed_range(bits)
    return format(value & ((1 << bits) - 1), f"0{bits}b")


def _check_binary(binary: str) -> None:
    if not binary or any(digit not in "01" for digit in binary):
        raise ValueError(f"not a binary string: {binary!r}")


def binary_to_signed_decimal(binary: str) -> int:
    """Read *binary* as a two's complement number of its own width."""
    _check_binary(binary)
    value = int(binary, 2)
    return value - (1 << len(binary)) if binary[0] == "1" else value


def add_twos_complement(bin_a: str, bin_b: str) -> tuple[str, str]:
    """Add two equal-width binary strings.

    Returns the sum, with the carry out of the top bit dropped, and the carry
    that flowed into each bit position.
    """
    _check_binary(bin_a)
    _check_binary(bin_b)
    if len(bin_a) != len(bin_b):
        raise ValueError("operands must have the same width")
    result: list[str] = []
    carries: list[str] = []
    carry = 0
    for bit_a, bit_b in zip(reversed(bin_a), reversed(bin_b)):
        total = int(bit_a) + int(bit_b) + carry
        result.append(str(total % 2))
        carries.append(str(carry))
        carry = total // 2
    return "".join(reversed(result)), "".join(reversed(carries))


@dataclass(frozen=True)
class TwosResult:
    """Outcome of one simulated addition or subtraction."""

    a: int
    b: int
    bits: int
    subtract: bool
    bin_a: str
    bin_b: str
    result: str
    carry: str
    signed_result: int
    overflow: bool

    @property
    def operator(self) -> str:
        return "-" if self.subtract else "+"


def simulate(a: int, b: int, bits: int, subtract: bool = False) -> TwosResult:
    """Compute a + b (or a - b) in *bits*-bit two's complement."""
    low, high = signed_range(bits)
    if not (low <= a <= high and low <= b <= high):
        raise ValueError(
            f"Numbers must be within {low} to {high} for {bits}-bit signed integers."
        )
    bin_a = to_twos_complement(a, bits)
    bin_b = to_twos_complement(-b if subtract else b, bits)
    result, carry = add_twos_complement(bin_a, bin_b)
    exact = a - b if subtract else a + b
    return TwosResult(
        a=a,
        b=b,
        bits=bits,
        subtract=subtract,
        bin_a=bin_a,
        bin_b=bin_b,
        result=result,
        carry=carry,
        signed_result=binary_to_signed_decimal(result),
        overflow=not low <= exact <= high,
    )


def _render(outcome: TwosResult) -> list[str]:
    lines = []
    if outcome.subtract:
        lines.append(f"Binary of -b ({-outcome.b}): {outcome.bin_b}")
    lines += [
        "\nBit-by-bit Addition:",
        f"  A      : {outcome.bin_a}",
        f"  B      : {outcome.bin_b}",
        "  --------",
        f"  Result : {outcome.result}",
        f"  Carry  : {outcome.carry}",
        "\nSummary:",
        _RULE,
        f"  Decimal:    {outcome.a} {outcome.operator} {outcome.b} = {outcome.signed_result}",
        f"  Binary A:   {outcome.bin_a}",
        f"  Binary B:   {outcome.bin_b}",
        f"  Result:     {outcome.result} (Decimal: {outcome.signed_result})",
        f"  Carry Bits: {outcome.carry}",
    ]
    if outcome.overflow:
        lines.append(
            f"⚠️  Overflow Detected! Result is outside {outcome.bits}-bit signed range."
        )
    lines.append(_RULE)
    return lines


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


def run_twos_complement_module(input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
    """Interactively add or subtract signed numbers in two's complement."""
    output_fn(_BANNER)
    while True:
        output_fn("\nChoose operation:")
        output_fn("1. Addition (a + b)")
        output_fn("2. Subtraction (a - b)")
        choice = _parse_int(input_fn("Enter choice: "))
        bits = _ask_int(input_fn, output_fn, "Enter bit size (e.g. 4, 8, 16): ")
        try:
            low, high = signed_range(bits)
        except ValueError as exc:
            output_fn(f"⚠️  Error: {exc}")
        else:
            a = _ask_int(input_fn, output_fn, "Enter first number (a): ")
            b = _ask_int(input_fn, output_fn, "Enter second number (b): ")
            if not (low <= a <= high and low <= b <= high):
                output_fn(
                    f"⚠️  Error: Numbers must be within {low} to {high} "
                    f"for {bits}-bit signed integers."
                )
            elif choice not in (1, 2):
                output_fn("⚠️  Invalid operation choice.")
            else:
                for line in _render(simulate(a, b, bits, subtract=choice == 2)):
                    output_fn(line)
        reply = _first_token(input_fn("\nDo you want to try another operation? (y/n): "))
        if reply[:1] not in ("y", "Y"):
            break