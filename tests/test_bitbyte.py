import pytest

from numsys.bitbyte import (
    BitwiseOp,
    Unit,
    apply_bitwise,
    binary_string,
    convert_all,
    format_conversion,
    render_bitwise,
    run_bit_byte_module,
    run_bitwise_simulator,
    run_converter,
    to_bits,
)


def _feed(*replies):
    it = iter(replies)
    return lambda prompt="": next(it)


def _run(func, *replies):
    out = []
    func(_feed(*replies), out.append)
    return "\n".join(out)


def test_byte_is_eight_bits():
    assert to_bits(1, "byte") == 8


def test_kilobyte_is_1024_bytes():
    assert to_bits(1, "kb") == to_bits(1024, "byte")


def test_unit_names_ignore_case():
    assert to_bits(3, "MB") == to_bits(3, Unit.MB)


def test_invalid_unit_raises():
    with pytest.raises(ValueError):
        to_bits(1, "tb")


@pytest.mark.parametrize("unit", list(Unit))
def test_convert_all_round_trip(unit):
    table = convert_all(5, unit)
    assert table[unit] == pytest.approx(5)
    assert table[Unit.BIT] == to_bits(5, unit)


def test_format_conversion_lines():
    text = format_conversion(to_bits(1, "kb"))
    lines = text.splitlines()
    assert len(lines) == 5
    assert "Bytes  : 1024.000" in lines
    assert "KB     : 1.000000" in lines


def test_binary_string_pads():
    assert binary_string(5, 8) == "00000101"


def test_binary_string_negative_is_all_ones():
    assert binary_string(-1, 8) == "1" * 8


@pytest.mark.parametrize("value", [0, 1, 77, 200, 255])
def test_binary_string_round_trip(value):
    assert int(binary_string(value, 8), 2) == value


def test_not_twice_is_identity():
    for a in (-5, 0, 3, 100):
        assert apply_bitwise(BitwiseOp.NOT, apply_bitwise(BitwiseOp.NOT, a)) == a


def test_xor_identity():
    for a, b in ((12, 10), (0, 255), (7, 7)):
        union = apply_bitwise(BitwiseOp.OR, a, b)
        both = apply_bitwise(BitwiseOp.AND, a, b)
        assert apply_bitwise(BitwiseOp.XOR, a, b) == union - both


def test_shift_round_trip():
    for a in (0, 1, 9, 63):
        assert apply_bitwise(BitwiseOp.RIGHT_SHIFT, apply_bitwise(BitwiseOp.LEFT_SHIFT, a)) == a


def test_left_shift_wraps_to_32_bits():
    assert apply_bitwise(BitwiseOp.LEFT_SHIFT, 1 << 30) < 0


def test_invalid_op_number():
    with pytest.raises(ValueError):
        apply_bitwise(7, 1, 2)


def test_render_binary_operation():
    text = render_bitwise(BitwiseOp.AND, 12, 10)
    result = apply_bitwise(BitwiseOp.AND, 12, 10)
    assert f"  {binary_string(12)} (A)" in text
    assert f"& {binary_string(10)} (B)" in text
    assert f"= {binary_string(result)} → {result}" in text


def test_render_shift():
    text = render_bitwise(BitwiseOp.RIGHT_SHIFT, 6)
    result = apply_bitwise(BitwiseOp.RIGHT_SHIFT, 6)
    assert text.strip() == f"{binary_string(6)} >> 1 = {binary_string(result)} → {result}"


def test_run_converter_prints_table():
    text = _run(run_converter, "1", "KB")
    assert "Conversion Results" in text
    assert format_conversion(to_bits(1, "kb")) in text


def test_run_converter_rejects_unit():
    out = []
    run_converter(_feed("1", "parsec"), out.append)
    text = "\n".join(out)
    assert "Invalid unit entered." in text
    assert "Conversion Results" not in text


def test_run_bitwise_simulator():
    text = _run(run_bitwise_simulator, "12", "10", "3", "n")
    assert render_bitwise(BitwiseOp.XOR, 12, 10) in text


def test_run_bitwise_simulator_invalid_op_then_repeat():
    text = _run(run_bitwise_simulator, "1", "2", "9", "y", "4", "0", "4", "n")
    assert "Invalid choice." in text
    assert render_bitwise(BitwiseOp.NOT, 4) in text


def test_run_bit_byte_module_menu():
    out = []
    run_bit_byte_module(_feed("9", "3"), out.append)
    text = "\n".join(out)
    assert "Invalid choice. Try again." in text
    assert text.rstrip().endswith("Returning to main menu...")