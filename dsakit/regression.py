"""Least-squares regression line through paired samples, with its R² report."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Regression:
    """Sums, the fitted line y = a + b·x and the coefficient of determination."""

    n: int
    sum_x: float
    sum_y: float
    sum_xy: float
    sum_xx: float
    a: float
    b: float
    numerator: float
    denominator: float
    r_squared: float


def fit_line(xs: Sequence[float], ys: Sequence[float]) -> Regression:
    """Fit y = a + b·x to the pairs by least squares."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    n = len(xs)
    if n == 0:
        raise ValueError("at least one pair is required")
    xs = [float(x) for x in xs]
    ys = [float(y) for y in ys]
    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_xx = sum(x * x for x in xs)

    divisor = sum_x * sum_x - sum_xx * n
    if divisor == 0:
        raise ValueError("x values must not all be equal")
    b = (sum_x * sum_y - n * sum_xy) / divisor
    a = (sum_y - sum_x * b) / n

    y_mean = sum_y / n
    denominator = sum((y - y_mean) ** 2 for y in ys)
    numerator = sum((a + b * x - y_mean) ** 2 for x in xs)
    if denominator == 0:
        r_squared = math.nan if numerator == 0 else math.inf
    else:
        r_squared = numerator / denominator
    return Regression(n, sum_x, sum_y, sum_xy, sum_xx, a, b, numerator, denominator, r_squared)


def format_report(result: Regression) -> str:
    """Return the normal equations, the fitted line and R² as text."""
    sign = "  + " if result.sum_x > 0 else "  "
    lines = [
        f" The sum of Xi is ::{result.sum_x:g}",
        f" The Sum of Yi is ::{result.sum_y:g}",
        " The Equation 1 is ::",
        f" {result.sum_y:.6f} = a{result.n}{sign}{result.sum_x:.6f}b ",
        f" The Sum of Xi*Yi is ::{result.sum_xy:.6f}",
        f" The sum of Xi*Xi is ::{result.sum_xx:.6f}",
        " The Equation 2 is ::",
        f" {result.sum_xy:.6f} = a{result.sum_x:.6f} +  b{result.sum_xx:.6f}",
        "For regression line :-",
        f" a = {result.a:.6f} and b = {result.b:.6f}",
        f" Equation of line :: y = {result.a:.6f} + {result.b:.6f}x",
        "For Coefficient of Determination (R2) :-",
        f" The numerator for R^2 = {result.numerator:.6f}",
        f" The denominator for R^2 = {result.denominator:.6f}",
        f" R^2 = {result.r_squared:.6f}",
    ]
    return "\n".join(lines)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _collect(tokens: Iterator[str], heading: str) -> list[int]:
    print(heading)
    print(" Enter the 1 to enter data and 0 to exit :")
    values: list[int] = []
    while True:
        print("Enter your choice : ", end="", flush=True)
        token = next(tokens, None)
        if token is None or token == "0":
            return values
        if token != "1":
            print("Invalid input !!")
            continue
        print("Enter data : ", end="", flush=True)
        data = next(tokens, None)
        if data is None:
            return values
        try:
            values.append(int(data))
        except ValueError:
            print("Invalid input !!")


def main(argv: list[str] | None = None) -> int:
    """Read X and Y samples from standard input and print the regression report."""
    parser = argparse.ArgumentParser(
        prog="regression", description="Fit a least-squares line to entered samples."
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    xs = _collect(tokens, " Enter the Xi elements ::")
    ys = _collect(tokens, " Enter Yi elements ::")
    try:
        result = fit_line(xs, ys)
    except ValueError as error:
        print(f"regression: {error}", file=sys.stderr)
        return 1
    print()
    print(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())