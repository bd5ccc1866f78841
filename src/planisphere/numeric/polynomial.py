"""Polynomials with real coefficients."""

from .._identity import NoValueEquality
from ..errors import InvalidArgumentError


class Polynomial(NoValueEquality):
    """Polynomial whose coefficients are stored highest degree first."""

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: tuple[float, ...]):
        self._coefficients = coefficients

    @classmethod
    def of(cls, leading: float, *coefficients: float) -> "Polynomial":
        """Create a polynomial from its coefficients, highest degree first.

        Polynomial.of(1, 2, 3) is x² + 2x + 3.

        Raises:
            InvalidArgumentError: If the leading coefficient is zero
        """
        if leading == 0:
            raise InvalidArgumentError("Leading coefficient of a polynomial must not be 0")
        return cls(tuple(float(c) for c in (leading, *coefficients)))

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def at(self, x):
        """Evaluate the polynomial at x with Horner's method.

        Works on floats and element-wise on numpy arrays.
        """
        value = self._coefficients[0]
        for coefficient in self._coefficients[1:]:
            value = value * x + coefficient
        return value

    def __str__(self) -> str:
        terms = []
        for i, coefficient in enumerate(self._coefficients):
            if coefficient == 0:
                continue
            power = self.degree - i

            if coefficient < 0:
                sign = "-"
            elif terms:
                sign = "+"
            else:
                sign = ""

            magnitude = "" if abs(coefficient) == 1 and power > 0 else str(abs(coefficient))

            if power > 1:
                variable = f"x^{power}"
            elif power == 1:
                variable = "x"
            else:
                variable = ""

            terms.append(f"{sign}{magnitude}{variable}")
        return "".join(terms)

    def __repr__(self) -> str:
        return f"Polynomial.of({', '.join(map(repr, self._coefficients))})"
