"""Arithmetic in the finite field GF(2^8) using exponent and logarithm tables."""

from __future__ import annotations

_ORDER = 255


class GaloisField:
    """The field GF(2^8) built from a reduction polynomial.

    ``primitive_poly`` holds the low eight bits of the reduction polynomial.
    For x^8 + x^4 + x^3 + x^2 + 1 that is ``0x1D``. Field elements are ints
    in the range 0..255.
    """

    def __init__(self, primitive_poly: int) -> None:
        if not 0 <= primitive_poly <= 0xFF:
            raise ValueError(f"primitive polynomial must fit in a byte, got {primitive_poly!r}")
        self.primitive_poly = primitive_poly
        self._exp, self._log = self._build_tables(primitive_poly)

    @staticmethod
    def _build_tables(poly: int) -> tuple[tuple[int, ...], tuple[int, ...]]:
        exp: list[int] = []
        x = 1
        for _ in range(_ORDER):
            exp.append(x)
            x = ((x << 1) & 0xFF) ^ poly if x & 0x80 else (x << 1) & 0xFF
        # The multiplicative group is cyclic: alpha^255 == alpha^0.
        exp.append(exp[0])

        first_power: dict[int, int] = {}
        for power, value in enumerate(exp):
            first_power.setdefault(value, power)
        # log(0) is undefined; 0 marks it, as does any value never generated.
        log = tuple(first_power.get(value, 0) if value else 0 for value in range(256))
        return tuple(exp), log

    @staticmethod
    def _check(*values: int) -> None:
        for value in values:
            if not 0 <= value <= 0xFF:
                raise ValueError(f"field element must be in 0..255, got {value!r}")

    def add(self, a: int, b: int) -> int:
        """Return a + b, which in characteristic 2 is XOR."""
        self._check(a, b)
        return a ^ b

    def sub(self, a: int, b: int) -> int:
        """Return a - b; identical to addition in this field."""
        self._check(a, b)
        return a ^ b

    def mul(self, a: int, b: int) -> int:
        """Return the product of two field elements."""
        self._check(a, b)
        if a == 0 or b == 0:
            return 0
        return self._exp[(self._log[a] + self._log[b]) % _ORDER]

    def div(self, a: int, b: int) -> int:
        """Return a / b; raises ZeroDivisionError when b is 0 and a is not."""
        self._check(a, b)
        if a == 0:
            return 0
        if b == 0:
            raise ZeroDivisionError("division by zero in GF(2^8)")
        return self._exp[(self._log[a] - self._log[b]) % _ORDER]

    def pow(self, a: int, power: int) -> int:
        """Return a raised to an integer power, which may be negative."""
        self._check(a)
        if a == 0:
            return 0
        if power == 0:
            return 1
        return self._exp[(self._log[a] * power) % _ORDER]

    def inv(self, a: int) -> int:
        """Return the multiplicative inverse of a."""
        self._check(a)
        if a == 0:
            raise ZeroDivisionError("0 has no multiplicative inverse")
        return self._exp[_ORDER - self._log[a]]