"""
rootfind.diagnostics.problems

Published root-finding test problems with analytic first and second
derivatives, starting guesses for the derivative methods and brackets for the
bracketing methods.

Sources:

- Ford, J. A. (1995). Improved algorithms of Illinois-type for the numerical
  solution of nonlinear equations. University of Essex, Department of Computer
  Science.
- Costabile, F., Gualtieri, M. I., & Luceri, R. (2006). A modification of
  Muller's method. Calcolo, 43(1), 39-50. Examples 22 to 28 are deliberately
  hard for pure Newton-Raphson and Halley (multiple roots, poles, starting
  points a hair away from the root).
- Miscellaneous textbook examples.

Roots are quoted to the precision of the source.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, e, exp, log, sin, sqrt

from rootfind.evaluator import RealFnD2
from rootfind.types import Bracket
from rootfind.typing import ScalarFn

__all__ = [
    "RootProblem",
    "ford95_problems",
    "costabile06_problems",
    "misc_problems",
    "all_problems",
]

_SQRT2 = sqrt(2.0)
_SQRT3 = sqrt(3.0)


@dataclass(frozen=True, slots=True)
class RootProblem:
    """A function with known roots; ``roots[i]`` pairs with ``guesses[i]`` and ``brackets[i]``."""

    name: str
    f: ScalarFn
    df: ScalarFn
    d2f: ScalarFn
    roots: tuple[float, ...]
    guesses: tuple[float, ...]
    brackets: tuple[Bracket, ...]

    def __post_init__(self) -> None:
        if not (len(self.roots) == len(self.guesses) == len(self.brackets)):
            raise ValueError(f"{self.name}: roots, guesses and brackets must align")

    @property
    def evaluator(self) -> RealFnD2:
        return RealFnD2(self.f, self.df, self.d2f)

    def cases(self) -> list[tuple[float, float, Bracket]]:
        return list(zip(self.roots, self.guesses, self.brackets))


def _p(name, f, df, d2f, roots, guesses, brackets) -> RootProblem:
    return RootProblem(
        name=name,
        f=f,
        df=df,
        d2f=d2f,
        roots=tuple(roots),
        guesses=tuple(guesses),
        brackets=tuple(Bracket(lo, hi) for lo, hi in brackets),
    )


def ford95_problems() -> list[RootProblem]:
    return [
        _p(
            "Ford95 Example One",
            lambda x: 4.0 * cos(x) - exp(x),
            lambda x: -4.0 * sin(x) - exp(x),
            lambda x: -4.0 * cos(x) - exp(x),
            [0.90478821787302],
            [5.0],
            [(-1.5, 6.0)],
        ),
        _p(
            "Ford95 Example Three",
            lambda x: 2.0 * x * exp(-20.0) + 1.0 - 2.0 * exp(-20.0 * x),
            lambda x: 40.0 * exp(-20.0 * x) + 2.0 * exp(-20.0),
            lambda x: -800.0 * exp(-20.0 * x),
            [0.034657358821882],
            [-2.5],
            [(-1.0, 4.0)],
        ),
        _p(
            "Ford95 Example Four",
            lambda x: exp(1.0 / x - 25.0) - 1.0,
            lambda x: -exp(1.0 / x - 25.0) / (x * x),
            lambda x: exp(1.0 / x - 25.0) * (2.0 * x + 1.0) / x**4,
            [0.04],
            [0.035],
            [(0.02, 1.0)],
        ),
        _p(
            "Ford95 Example Six",
            lambda x: 1e10 * x ** (1.0 / x) - 1.0,
            lambda x: -1e10 * x ** (1.0 / x - 2.0) * (log(x) - 1.0),
            lambda x: 1e10
            * x ** (1.0 / x - 4.0)
            * (-3.0 * x + log(x) ** 2 + 2.0 * (x - 1.0) * log(x) + 1.0),
            [0.1],
            [0.15],
            [(0.05, 0.2)],
        ),
        _p(
            "Ford95 Example Seven",
            lambda x: x**20 - 1.0,
            lambda x: 20.0 * x**19,
            lambda x: 380.0 * x**18,
            [1.0],
            [1.2],
            [(-0.5, 5.0)],
        ),
        _p(
            "Ford95 Example Eight",
            lambda x: exp(21000.0 / x) / (1.11e11 * x * x) - 1.0,
            lambda x: -1.8018e-11 * exp(21000.0 / x) * (x + 10500.0) / x**4,
            lambda x: exp(21000.0 / x)
            * (5.40541e-11 * x * x + 1.13514e-6 * x + 0.00397297)
            / x**6,
            [551.77382493033],
            [400.0],
            [(350.0, 850.0)],
        ),
        _p(
            "Ford95 Example Nine",
            lambda x: 1.0 / x + log(x) - 100.0,
            lambda x: (x - 1.0) / (x * x),
            lambda x: (2.0 - x) / x**3,
            [0.0095556044375379],
            [0.01],
            [(0.001, 100.0)],
        ),
        _p(
            "Ford95 Example Ten",
            lambda x: exp(exp(x)) - exp(e),
            lambda x: exp(x + exp(x)),
            lambda x: exp(x + exp(x)) * (exp(x) + 1.0),
            [1.0],
            [1.8],
            [(0.5, 3.5)],
        ),
        _p(
            "Ford95 Example Eleven",
            lambda x: sin(0.01 / x) - 0.01,
            lambda x: -0.01 * cos(0.01 / x) / (x * x),
            lambda x: (0.02 * x * cos(0.01 / x) - 0.0001 * sin(0.01 / x)) / x**4,
            [0.99998333286109],
            [0.55],
            [(0.004, 200.0)],
        ),
    ]


def costabile06_problems() -> list[RootProblem]:
    return [
        _p(
            "Costabile06 Example One",
            lambda x: x**3 - 1.0,
            lambda x: 3.0 * x * x,
            lambda x: 6.0 * x,
            [1.0],
            [0.1],
            [(0.1, 1.3)],
        ),
        _p(
            "Costabile06 Example Two",
            lambda x: x * x * (x * x / 3.0 + _SQRT2 * sin(x)) - _SQRT3 / 18.0,
            lambda x: 4.0 * x**3 / 3.0
            + _SQRT2 * x * x * cos(x)
            + 2.0 * _SQRT2 * x * sin(x),
            lambda x: 4.0 * x * x
            - _SQRT2 * x * x * sin(x)
            + 2.0 * _SQRT2 * sin(x)
            + 4.0 * _SQRT2 * x * cos(x),
            [0.39942229171096819451],
            [1.0],
            [(0.1, 1.0)],
        ),
        _p(
            "Costabile06 Example Three",
            lambda x: 2.0 * x * exp(-10.0) + 1.0 - 2.0 * exp(-10.0 * x),
            lambda x: 20.0 * exp(-10.0 * x) + 2.0 * exp(-10.0),
            lambda x: -200.0 * exp(-10.0 * x),
            [0.069314088687023473303],
            [0.0],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Four",
            lambda x: 2.0 * x * exp(-20.0) + 1.0 - 2.0 * exp(-20.0 * x),
            lambda x: 40.0 * exp(-20.0 * x) + 2.0 * exp(-20.0),
            lambda x: -800.0 * exp(-20.0 * x),
            [0.034657359020853851362],
            [0.2],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Five",
            lambda x: 17.0 * x * x - (1.0 - 5.0 * x) ** 2,
            lambda x: 10.0 - 16.0 * x,
            lambda x: -16.0,
            [0.109611796797792],
            [0.4],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Six",
            lambda x: 82.0 * x * x - (1.0 - 10.0 * x) ** 2,
            lambda x: 20.0 - 36.0 * x,
            lambda x: -36.0,
            [0.0524786034368102],
            [0.4],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Seven",
            lambda x: 362.0 * x * x - (1.0 - 20.0 * x) ** 2,
            lambda x: 40.0 - 76.0 * x,
            lambda x: -76.0,
            [0.0256237476199882],
            [0.4],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Eight",
            lambda x: x * x - (1.0 - x) ** 5,
            lambda x: 5.0 * (1.0 - x) ** 4 + 2.0 * x,
            lambda x: 20.0 * (1.0 - x) ** 3 + 2.0,
            [0.34595481584824201796],
            [1.0],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Nine",
            lambda x: 257.0 * x - (1.0 - 5.0 * x) ** 4,
            lambda x: 20.0 * (1.0 - 5.0 * x) ** 3 + 257.0,
            lambda x: -300.0 * (1.0 - 5.0 * x) ** 2,
            [0.00361710817890406],
            [0.5],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Twelve",
            lambda x: x * x + sin(x / 5.0) - 0.25,
            lambda x: 2.0 * x + cos(x / 5.0) / 5.0,
            lambda x: 2.0 - sin(x / 5.0) / 25.0,
            [0.40999201798913713162125838],
            [0.0],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Thirteen",
            lambda x: x * x + sin(x / 10.0) - 0.25,
            lambda x: 2.0 * x + cos(x / 10.0) / 10.0,
            lambda x: 2.0 - sin(x / 10.0) / 100.0,
            [0.45250914557764122545806719],
            [0.0],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Fourteen",
            lambda x: x * x + sin(x / 20.0) - 0.25,
            lambda x: 2.0 * x + cos(x / 20.0) / 20.0,
            lambda x: 2.0 - sin(x / 20.0) / 400.0,
            [0.47562684859606241311984234],
            [0.0],
            [(0.0, 1.0)],
        ),
        _p(
            "Costabile06 Example Fifteen",
            lambda x: (5.0 * x - 1.0) / (4.0 * x),
            lambda x: 1.0 / (4.0 * x * x),
            lambda x: -1.0 / (2.0 * x**3),
            [0.2],
            [0.375],
            [(0.01, 1.0)],
        ),
        _p(
            "Costabile06 Example Sixteen",
            lambda x: x - 3.0 * log(x),
            lambda x: 1.0 - 3.0 / x,
            lambda x: 3.0 / (x * x),
            [1.8571838602078353365],
            [0.5],
            [(0.5, 2.0)],
        ),
        _p(
            "Costabile06 Example Seventeen",
            lambda x: x**3 - 2.0 * x + cos(x),
            lambda x: 3.0 * x * x - 2.0 - sin(x),
            lambda x: 6.0 * x - cos(x),
            [1.3581687638286110480],
            [2.0],
            [(1.0, 2.0)],
        ),
        _p(
            "Costabile06 Example Eighteen",
            lambda x: x * x + 5.0 * x + exp(x),
            lambda x: 2.0 * x + 5.0 + exp(x),
            lambda x: 2.0 + exp(x),
            [-0.17410431211597044503],
            [-1.0],
            [(-1.0, 2.0)],
        ),
        _p(
            "Costabile06 Examples Nineteen to Twenty One",
            lambda x: exp(x) - 4.0 * x * x,
            lambda x: exp(x) - 8.0 * x,
            lambda x: exp(x) - 8.0,
            [-0.40777670940448032889, 0.7148059123627778061, 4.3065847282206992983],
            [-1.0, 0.5, 4.5],
            [(-1.0, 0.0), (0.5, 1.0), (4.0, 4.5)],
        ),
        # Newton-Raphson has a narrower basin than Halley here
        _p(
            "Costabile06 Examples Twenty Two and Twenty Eight",
            lambda x: x**20 - 1.0,
            lambda x: 20.0 * x**19,
            lambda x: 380.0 * x**18,
            [1.0, -1.0],
            [0.7, -0.7],
            [(0.5, 2.0), (-2.0, 0.5)],
        ),
        # triple root; derivative methods take tiny steps
        _p(
            "Costabile06 Example Twenty Three",
            lambda x: (x - 1.0) ** 3 * exp(x),
            lambda x: (x - 1.0) ** 2 * exp(x) * (x + 2.0),
            lambda x: exp(x) * (x**3 + 3.0 * x * x - 3.0 * x - 1.0),
            [1.0],
            [0.9999999995],
            [(0.5, 2.0)],
        ),
        _p(
            "Costabile06 Example Twenty Four",
            lambda x: (x - 1.0) ** 5 * exp(x),
            lambda x: (x - 1.0) ** 4 * exp(x) * (x + 4.0),
            lambda x: exp(x) * (x - 1.0) ** 3 * (x * x + 8.0 * x + 11.0),
            [1.0],
            [1.0000000005],
            [(0.5, 2.0)],
        ),
        # pole at 0; hard when approached from the right
        _p(
            "Costabile06 Example Twenty Five",
            lambda x: (10.0 * x - 1.0) / (9.0 * x),
            lambda x: 1.0 / (9.0 * x * x),
            lambda x: -2.0 / (9.0 * x**3),
            [0.1],
            [0.01],
            [(0.01, 1.0)],
        ),
        _p(
            "Costabile06 Example Twenty Six",
            lambda x: (20.0 * x - 1.0) / (19.0 * x),
            lambda x: 1.0 / (19.0 * x * x),
            lambda x: -2.0 / (19.0 * x**3),
            [0.05],
            [0.06],
            [(0.01, 1.0)],
        ),
        _p(
            "Costabile06 Example Twenty Seven",
            lambda x: exp(-x) + cos(x),
            lambda x: -exp(-x) - sin(x),
            lambda x: exp(-x) - cos(x),
            [1.74613953040801241765070309],
            [1.746139531],
            [(1.0, 2.0)],
        ),
    ]


def misc_problems() -> list[RootProblem]:
    return [
        _p(
            "Factored Parabola",
            lambda x: (x - 5.0) * (x - 4.0),
            lambda x: 2.0 * x - 9.0,
            lambda x: 2.0,
            [5.0, 4.0],
            [5.8, 3.8],
            [(4.5, 100.0), (-100000.0, 4.01)],
        ),
        _p(
            "Wikipedia NR Parabola",
            lambda x: x * x - 612.0,
            lambda x: 2.0 * x,
            lambda x: 2.0,
            [-24.7386337537, 24.7386337537],
            [-10.0, 10.0],
            [(-30.0, 10.0), (10.0, 30.0)],
        ),
        _p(
            "Wikipedia NR Trigonometry",
            lambda x: cos(x) - x**3,
            lambda x: -sin(x) - 3.0 * x * x,
            lambda x: -cos(x) - 6.0 * x,
            [0.865474033102],
            [0.5],
            [(0.0, 1.0)],
        ),
        _p(
            "Wikipedia Bisection Cubic",
            lambda x: x**3 - x - 2.0,
            lambda x: 3.0 * x * x - 1.0,
            lambda x: 6.0 * x,
            [1.52137970680457],
            [1.0],
            [(1.0, 2.0)],
        ),
        _p(
            "Newton's Secant Example",
            lambda x: x**3 + 10.0 * x * x - 7.0 * x - 44.0,
            lambda x: 3.0 * x * x + 20.0 * x - 7.0,
            lambda x: 6.0 * x + 20.0,
            [2.20681731724844],
            [2.2],
            [(2.0, 2.3)],
        ),
    ]


def all_problems() -> list[RootProblem]:
    return ford95_problems() + costabile06_problems() + misc_problems()
