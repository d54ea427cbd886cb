import pytest
from hypothesis import given
from hypothesis import strategies as st

from bls_scalar.limbs import (
    INV,
    MASK64,
    MODULUS,
    R,
    R2,
    R3,
    adc,
    from_limbs,
    mac,
    montgomery_reduce,
    sbb,
    to_limbs,
)

RADIX = 1 << 256
words = st.integers(min_value=0, max_value=MASK64)


def test_modulus_limbs():
    assert to_limbs(MODULUS, 4) == (
        0xFFFF_FFFF_0000_0001,
        0x53BD_A402_FFFE_5BFE,
        0x3339_D808_09A1_D805,
        0x73ED_A753_299D_7D48,
    )


def test_radix_constants_limbs():
    assert to_limbs(R, 4) == (
        0x0000_0001_FFFF_FFFE,
        0x5884_B7FA_0003_4802,
        0x998C_4FEF_ECBC_4FF5,
        0x1824_B159_ACC5_056F,
    )
    assert to_limbs(R2, 4) == (
        0xC999_E990_F3F2_9C6D,
        0x2B6C_EDCB_8792_5C23,
        0x05D3_1496_7254_398F,
        0x0748_D9D9_9F59_FF11,
    )
    assert to_limbs(R3, 4) == (
        0xC62C_1807_439B_73AF,
        0x1B3E_0D18_8CF0_6990,
        0x73D1_3C71_C7B5_F418,
        0x6E2A_5BB9_C8DB_33E9,
    )


def test_inv_negates_modulus_inverse():
    # Exponentiate the low limb of the modulus by totient(2**64) - 1 using
    # word-sized multiply-accumulate, then negate with a borrowing subtract.
    low_limb = to_limbs(MODULUS, 4)[0]
    inv = 1
    for _ in range(63):
        inv, _ = mac(0, inv, inv, 0)
        inv, _ = mac(0, inv, low_limb, 0)
    negated, _ = sbb(0, inv, 0)
    assert negated == INV


def test_adc_values():
    assert adc(MASK64, 1, 0) == (0, 1)
    assert adc(MASK64, MASK64, MASK64) == (MASK64 - 2, 2)
    assert adc(1, 2, 3) == (6, 0)


def test_sbb_values():
    assert sbb(5, 3, 0) == (2, 0)
    assert sbb(5, 3, MASK64) == (1, 0)
    assert sbb(0, 1, 0) == (MASK64, MASK64)
    assert sbb(0, 0, MASK64) == (MASK64, MASK64)


def test_sbb_borrow_uses_top_bit_only():
    assert sbb(5, 3, 1) == (2, 0)


def test_mac_values():
    assert mac(0, MASK64, MASK64, 0) == (1, MASK64 - 1)
    assert mac(MASK64, MASK64, MASK64, MASK64) == (MASK64, MASK64)
    assert mac(1, 2, 3, 4) == (11, 0)


@pytest.mark.parametrize("func,args", [
    (adc, (1 << 64, 0, 0)),
    (sbb, (0, -1, 0)),
    (mac, (0, 0, 1 << 64, 0)),
])
def test_word_range_checked(func, args):
    with pytest.raises(ValueError):
        func(*args)


@given(words, words, st.integers(min_value=0, max_value=1))
def test_adc_reconstructs_sum(a, b, carry):
    low, high = adc(a, b, carry)
    assert low + (high << 64) == a + b + carry


@given(words, words, words, words)
def test_mac_reconstructs_value(a, b, c, carry):
    low, high = mac(a, b, c, carry)
    assert low + (high << 64) == a + b * c + carry


@given(words, words)
def test_sbb_borrow_signals_underflow(a, b):
    low, borrow = sbb(a, b, 0)
    assert borrow == (MASK64 if a < b else 0)
    assert (low - a + b) % (1 << 64) == 0


def test_to_limbs_rejects_bad_input():
    with pytest.raises(ValueError):
        to_limbs(-1, 4)
    with pytest.raises(ValueError):
        to_limbs(1 << 256, 4)
    with pytest.raises(ValueError):
        to_limbs(1, 0)


def test_from_limbs_rejects_oversized_limb():
    with pytest.raises(ValueError):
        from_limbs([0, 1 << 64])


def test_from_limbs_little_endian():
    assert from_limbs([1, 0, 0, 0]) == 1
    assert from_limbs([0, 1]) == 1 << 64
    assert from_limbs([]) == 0


@given(st.integers(min_value=0, max_value=(1 << 512) - 1))
def test_limbs_round_trip(value):
    assert from_limbs(to_limbs(value, 8)) == value


def test_montgomery_reduce_of_one_and_r2():
    assert montgomery_reduce(R) == 1
    assert montgomery_reduce(0) == 0
    assert montgomery_reduce(MODULUS) == 0
    assert montgomery_reduce(R2) == (
        0x1824B159ACC5056F998C4FEFECBC4FF55884B7FA0003480200000001FFFFFFFE
    )


def test_montgomery_reduce_negative_one():
    # Montgomery form of -1 is q - R; reducing it gives q - 1.
    assert to_limbs(montgomery_reduce(MODULUS - R), 4) == (
        0xFFFF_FFFF_0000_0000,
        0x53BD_A402_FFFE_5BFE,
        0x3339_D808_09A1_D805,
        0x73ED_A753_299D_7D48,
    )


def test_montgomery_reduce_r3():
    assert montgomery_reduce(R3) == R2


def test_montgomery_reduce_rejects_out_of_range():
    with pytest.raises(ValueError):
        montgomery_reduce(-1)
    with pytest.raises(ValueError):
        montgomery_reduce(MODULUS * RADIX)


@given(st.integers(min_value=0, max_value=MODULUS * RADIX - 1))
def test_montgomery_reduce_divides_by_radix(value):
    result = montgomery_reduce(value)
    assert 0 <= result < MODULUS
    assert (result * RADIX - value) % MODULUS == 0


@given(st.integers(min_value=0, max_value=MODULUS - 1),
       st.integers(min_value=0, max_value=MODULUS - 1))
def test_montgomery_product_is_fully_reduced(a, b):
    result = montgomery_reduce(a * b)
    assert result < MODULUS
    assert (result * RADIX) % MODULUS == (a * b) % MODULUS