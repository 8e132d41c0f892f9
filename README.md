# numsys

An interactive terminal trainer for learning number systems. The main menu
offers four screens:

1. **Number Conversion Quiz Game** – random questions on binary → decimal,
   decimal → binary, hex → decimal and binary addition, with a running score.
2. **Two's Complement Arithmetic Simulator** – add or subtract signed integers
   at a bit width from 1 to 32, showing the operands in two's complement, the
   bit-by-bit sum, the carry into each bit and whether the result overflowed.
3. **Number Conversion Visualizer** – step-by-step tables for decimal → binary,
   binary → decimal, decimal → hexadecimal, hexadecimal → decimal,
   decimal → octal and octal → decimal. Table rows are shown with a short pause
   between them.
4. **Bit/Byte Conversion & Bitwise Operations** – convert an amount between
   bits, bytes, KB, MB and GB (powers of 1024), and see AND, OR, XOR, NOT and
   one-place shifts laid out in 8-bit binary.

## Installation

```
pip install .
```

## Usage

Start the menu:

```
numsys
```

Choose an entry by number and follow the prompts. Option 5 leaves the program,
as does end of input. `numsys --help` prints a short description; the command
takes no other options.

## Using the pieces from Python

The helpers behind each screen can be called directly:

```python
from numsys.quiz import binary_to_decimal, decimal_to_binary
from numsys.twos import to_twos_complement, binary_to_signed_decimal, simulate
from numsys.bitbyte import convert_all, binary_string, apply_bitwise, BitwiseOp
from numsys.visualizer import division_steps, decimal_to_hex_visual

decimal_to_binary(10)                  # "1010"
binary_to_decimal("1010")              # 10
to_twos_complement(-3, 4)              # "1101"
binary_to_signed_decimal("1101")       # -3
binary_string(5, 8)                    # "00000101"
apply_bitwise(BitwiseOp.NOT, 5)        # -6 (32-bit signed result)
convert_all(1, "kb")                   # {Unit.BIT: 8192.0, Unit.BYTE: 1024.0, ...}

result = simulate(5, 4, 4)             # TwosResult for 5 + 4 in 4 bits
result.result, result.signed_result    # ("1001", -7)
result.overflow                        # True

division_steps(10, 16)                 # [DivisionStep(10, 10), DivisionStep(0, None)]
print(decimal_to_hex_visual(255))      # the full division table as text
```

The `*_visual` functions in `numsys.visualizer` return the table as a string.
Invalid input raises `ValueError`: a negative number, a digit outside the base,
an empty string, an unknown unit, a bit width outside 1–32, or operands out of
range for `simulate`.

The interactive loops — `run_quiz_module`, `run_twos_complement_module`,
`run_visualizer_module` and `run_bit_byte_module` — take `input_fn` and
`output_fn` callables (defaulting to `input` and `print`), so they can be
driven by something other than the terminal. `run_quiz_module` also takes a
`random.Random` to draw questions from and returns the final `Quiz` score;
`run_visualizer_module` takes a `delay` callable used for the pause between
table rows (default `time.sleep`).

## What it does not do

Quiz scores are not saved anywhere; each quiz starts again at 0/0. There is no
graphical interface: everything runs as text in the terminal.

## Running the tests

```
pip install ".[test]"
pytest
```