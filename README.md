# bls_scalar

Arithmetic in the scalar field of the BLS12-381 curve, the prime field of order

```
q = 0x73eda753299d7d483339d80809a1d80553bda402fffe5bfeffffffff00000001
```

Elements are held in Montgomery form (`a * 2^256 mod q`) as four 64-bit
little-endian limbs. Their byte encoding is the canonical 32-byte
little-endian one.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `bls_scalar.limbs` – 64-bit limb helpers (`adc`, `sbb`, `mac`,
  `to_limbs`, `from_limbs`) and `montgomery_reduce`, plus the constants
  `MODULUS`, `INV`, `R`, `R2`, `R3`.
- `bls_scalar.scalar` – the `Scalar` class and the field constants
  `GENERATOR`, `ROOT_OF_UNITY`, `ROOT_OF_UNITY_INV`, `TWO_INV`, `DELTA`,
  `TWO_ADACITY` and `MODULUS_HEX`.
- `bls_scalar.roots` – `sqrt` and `is_square`.
- `bls_scalar.bits` – `to_bits`, `pow_of_2`, `uni_random`, `shift_right`.
- `bls_scalar.okm` – `from_okm`, the hash-to-field step for scalars.

## Using it

```python
from bls_scalar.scalar import Scalar

a = Scalar.from_int(500)
b = Scalar.from_int(499)

total = a + b
product = a * b
inverse = a.invert()          # raises ZeroDivisionError for zero
assert a * inverse == Scalar.one()

data = bytes(a)               # 32 bytes, little-endian
assert Scalar.from_bytes(data) == a

wide = Scalar.from_bytes_wide(bytes(64))   # reduce any 512-bit integer
print(repr(a ^ b))            # 0x...0007
```

Ways to build a scalar:

- `Scalar(limbs)` takes the internal Montgomery-form limbs as they are.
- `Scalar.from_int(n)` takes an unsigned 64-bit integer.
- `Scalar.from_raw(limbs)` takes four little-endian limbs of an ordinary
  integer and reduces it into the field.
- `Scalar.from_bytes(data)` takes 32 little-endian bytes and raises
  `ValueError` when the value is at or above the modulus.
- `Scalar.from_bytes_wide(data)` and `Scalar.from_u512(limbs)` reduce a
  512-bit integer modulo `q`.
- `Scalar.random(rng)` reduces 64 bytes from `rng.randbytes`, or from the
  operating system when `rng` is `None`.

`pow` and `pow_vartime` take the exponent either as an int below `2^256` or
as four little-endian limbs. `is_zero`, `is_one` and `is_odd` return plain
booleans. `internal_repr()` gives the Montgomery limbs and `reduce()` gives a
scalar whose internal limbs are this scalar's canonical value.

Scalars compare and order by their internal limbs, hash consistently with
equality, and support `+`, `-`, `*`, unary `-`, `^` and `&` (the bitwise
operators act on the canonical values and map the result back into the
field).

### Square roots

```python
from bls_scalar.roots import sqrt, is_square

four = Scalar.from_int(4)
root = sqrt(four)                  # raises ValueError when there is no root
assert root * root == four
assert is_square(four)
```

### Bits and powers of two

```python
import secrets
from bls_scalar.bits import to_bits, pow_of_2, uni_random, shift_right

bits = to_bits(pow_of_2(128))      # 256 entries, least significant first
s = uni_random(secrets.SystemRandom())
shifted = shift_right(s, 1)        # shifts the internal limbs
```

`uni_random` uses rejection sampling, so every scalar is equally likely. Its
`rng` argument is any object with a `randbytes(n)` method and may be left
out to use the operating system's randomness.

### Hashing to the field

```python
from bls_scalar.okm import from_okm

element = from_okm(b"\x00" * 48)   # 48 bytes of output keying material
```

The 48 bytes are read as a big-endian integer and reduced modulo `q`.
Expanding a message into those bytes is left to the caller.

## What it does not do

The package covers the scalar field only. It has no curve groups, no
pairing, no base-field arithmetic and no hashing to curve points, and it
offers no command-line tool.

## Caveats

This is plain Python integer arithmetic. It makes no constant-time guarantee
and is not meant for handling secrets where timing can be observed.