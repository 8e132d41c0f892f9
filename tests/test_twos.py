import pytest

from numsys.twos import (
    add_twos_complement,
    binary_to_signed_decimal,
    detect_overflow,
    run_twos_complement_module,
    signed_range,
    simulate,
    to_twos_complement,
)


def _feed(*replies):
    it = iter(replies)
    return lambda prompt="": next(it)


def _run(*replies):
    out = []
    run_twos_complement_module(_feed(*replies), out.append)
    return "\n".join(out)


def test_signed_range_eight_bits():
    assert signed_range(8) == (-128, 127)


@pytest.mark.parametrize("bits", [0, 33])
def test_signed_range_rejects_width(bits):
    with pytest.raises(ValueError):
        signed_range(bits)


def test_minus_one_is_all_ones():
    assert to_twos_complement(-1, 4) == "1111"


@pytest.mark.parametrize("bits", [1, 4, 8])
def test_encoding_round_trip(bits):
    low, high = signed_range(bits)
    for value in range(low, high + 1):
        encoded = to_twos_complement(value, bits)
        assert len(encoded) == bits
        assert binary_to_signed_decimal(encoded) == value


def test_signed_decimal_rejects_garbage():
    with pytest.raises(ValueError):
        binary_to_signed_decimal("10a1")
    with pytest.raises(ValueError):
        binary_to_signed_decimal("")


def test_add_pins_carry_row():
    assert add_twos_complement("0001", "0001") == ("0010", "0010")


def test_add_width_mismatch():
    with pytest.raises(ValueError):
        add_twos_complement("0001", "01")


def test_add_matches_wrapped_sum():
    low, high = signed_range(4)
    for a in range(low, high + 1):
        for b in range(low, high + 1):
            result, carry = add_twos_complement(
                to_twos_complement(a, 4), to_twos_complement(b, 4)
            )
            assert result == to_twos_complement(a + b, 4)
            assert carry[-1] == "0"
            assert len(carry) == 4


def test_detect_overflow():
    assert detect_overflow(100, 100, -56)
    assert detect_overflow(-100, -100, 56)
    assert not detect_overflow(1, -1, 0)


def test_simulate_invariants():
    low, high = signed_range(4)
    for a in range(low, high + 1):
        for b in range(low, high + 1):
            for subtract in (False, True):
                r = simulate(a, b, 4, subtract=subtract)
                exact = a - b if subtract else a + b
                assert r.overflow == (not low <= exact <= high)
                if not r.overflow:
                    assert r.signed_result == exact


def test_simulate_subtract_encodes_negated_b():
    r = simulate(5, 3, 8, subtract=True)
    assert r.bin_b == to_twos_complement(-3, 8)
    assert r.operator == "-"


def test_simulate_out_of_range():
    with pytest.raises(ValueError):
        simulate(8, 0, 4)


def test_run_module_addition():
    text = _run("1", "8", "3", "4", "n")
    r = simulate(3, 4, 8)
    assert f"Decimal:    3 + 4 = {r.signed_result}" in text
    assert f"  Carry  : {r.carry}" in text
    assert "Overflow" not in text


def test_run_module_subtraction_and_overflow():
    text = _run("2", "4", "-8", "1", "n")
    r = simulate(-8, 1, 4, subtract=True)
    assert f"Binary of -b (-1): {r.bin_b}" in text
    assert "Overflow Detected! Result is outside 4-bit signed range." in text


def test_run_module_range_error_then_invalid_op():
    low, high = signed_range(4)
    text = _run("1", "4", "9", "0", "y", "7", "4", "1", "1", "n")
    assert f"Numbers must be within {low} to {high} for 4-bit signed integers." in text
    assert "Invalid operation choice." in text
    assert "Summary:" not in text