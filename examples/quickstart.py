from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    import math

    from rootfind import (
        Bounds,
        BracketGenerator,
        FunctionTolerance,
        RealFnD2,
        StepTolerance,
        bisection,
        false_position_illinois_result,
        find_roots,
        halley_naive_result,
        newton_raphson_naive_result,
    )

    bounds = Bounds(-0.1, 6.3)
    for bracket in BracketGenerator(math.sin, bounds, 0.1):
        print("bracket:", bracket.as_tuple(), "->", bisection(math.sin, bracket))

    print("all roots:", find_roots(math.sin, bounds, 0.1))

    sqrt2 = RealFnD2(lambda x: x * x - 2.0, lambda x: 2.0 * x, lambda x: 2.0)
    policy = StepTolerance(1e-14) | FunctionTolerance(0.0)

    for solve in (newton_raphson_naive_result, halley_naive_result):
        res = solve(sqrt2, 1.0, policy=policy)
        print(f"{res.method}: {res.root!r} in {res.iterations} iterations")

    res = false_position_illinois_result(sqrt2, (0.0, 2.0), policy=policy)
    print(f"{res.method}: {res.root!r} in {res.iterations} iterations")
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
