"""Problems whose answer is a fixed verdict word chosen from a few integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass


def _yes_no(condition: bool) -> str:
    if condition:
        return "YES"
    return "NO"


def btryhlth(x: int) -> str:
    """Battery health is good at 80 or more."""
    return _yes_no(x >= 80)


def bullbear(x: int, y: int) -> str:
    """Outcome of buying at x and selling at y."""
    if y > x:
        return "PROFIT"
    if y < x:
        return "LOSS"
    return "NEUTRAL"


def candivide(n: int) -> str:
    """Whether n splits evenly into three."""
    return _yes_no(n % 3 == 0)


def cbspeed(x: int, y: int) -> str:
    """Whether speed y beats x."""
    return _yes_no(y > x)


def chefondate(x: int, y: int) -> str:
    """Whether the bill y fits the budget x."""
    if y <= x:
        return "yes"
    return "no"


def enspace(n: int, x: int, y: int) -> str:
    """Whether x single and y double items fit in n slots."""
    return _yes_no(2 * y + x <= n)


def fourtickets(x: int) -> str:
    """Whether four tickets at x cost at most 1000."""
    return _yes_no(4 * x <= 1000)


def giant(x: int) -> str:
    """Whether x reaches 60."""
    if x >= 60:
        return "Yes"
    return "No"


def jerrychase(x: int, y: int) -> str:
    """Whether the chaser at speed y is faster than x."""
    return _yes_no(x < y)


def minheight(x: int, h: int) -> str:
    """Whether height x meets the minimum h."""
    return _yes_no(x >= h)


def morningrun(x: int, y: int) -> str:
    """Whether a lap round an x by y field covers at least 1000."""
    return _yes_no(2 * (x + y) >= 1000)


def mvr(a: int, b: int, x: int, y: int) -> str:
    """Compare 2a + b against 2x + y."""
    messi = 2 * a + b
    ronaldo = 2 * x + y
    if messi > ronaldo:
        return "Messi"
    if messi < ronaldo:
        return "Ronaldo"
    return "Equal"


def octathon(x: int) -> str:
    """Medal for finishing position index x."""
    if x < 3:
        return "GOLD"
    if x < 6:
        return "SILVER"
    return "BRONZE"


def par2(n: int) -> str:
    """Whether n is even."""
    if n % 2 == 0:
        return "Yes"
    return "No"


def r5s(x: int, y: int) -> str:
    """Whether x and y together reach 2000."""
    return _yes_no(x + y >= 2000)


def rcbcsk(x: int, y: int) -> str:
    """Which side wins: RCB when x leads y by at least 18."""
    margin = x - y
    if margin >= 18:
        return "RCB"
    return "CSK"


def rightthere(n: int, x: int) -> str:
    """Whether n is within reach x."""
    return _yes_no(n <= x)


def subscribe(x: int) -> str:
    """Whether x exceeds 30."""
    return _yes_no(x > 30)


def summ(a: int, b: int, c: int) -> str:
    """Whether a + b equals c."""
    return _yes_no(a + b == c)


def val114(n: int) -> str:
    """Whether n is exactly 121."""
    if n == 121:
        return "Likely"
    return "Unlikely"


@dataclass(frozen=True)
class _Problem:
    solve: Callable[..., str]
    arity: int
    multi: bool = True
    end: str = "\n"


_PROBLEMS: dict[str, _Problem] = {
    "btryhlth": _Problem(btryhlth, 1),
    "bullbear": _Problem(bullbear, 2),
    "candivide": _Problem(candivide, 1),
    "cbspeed": _Problem(cbspeed, 2, multi=False, end=""),
    "chefondate": _Problem(chefondate, 2),
    "enspace": _Problem(enspace, 3),
    "fourtickets": _Problem(fourtickets, 1),
    "giant": _Problem(giant, 1, multi=False, end=""),
    "jerrychase": _Problem(jerrychase, 2),
    "minheight": _Problem(minheight, 2),
    "morningrun": _Problem(morningrun, 2, multi=False),
    "mvr": _Problem(mvr, 4, multi=False, end=""),
    "octathon": _Problem(octathon, 1, multi=False, end=""),
    "par2": _Problem(par2, 1),
    "r5s": _Problem(r5s, 2, multi=False),
    "rcbcsk": _Problem(rcbcsk, 2, multi=False, end=""),
    "rightthere": _Problem(rightthere, 2),
    "subscribe": _Problem(subscribe, 1),
    "summ": _Problem(summ, 3),
    "val114": _Problem(val114, 1, multi=False, end=""),
}


def _answers(problem: _Problem, tokens: Sequence[str]) -> list[str]:
    stream = iter(tokens)
    try:
        cases = int(next(stream)) if problem.multi else 1
        return [
            problem.solve(*(int(next(stream)) for _ in range(problem.arity)))
            for _ in range(cases)
        ]
    except StopIteration:
        raise ValueError("input ended early") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the named problem on standard input and print the verdicts."""
    parser = argparse.ArgumentParser(prog="judgekit-verdicts")
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    problem = _PROBLEMS[args.problem]
    try:
        answers = _answers(problem, sys.stdin.read().split())
    except ValueError as exc:
        parser.error(str(exc))
    sys.stdout.write("".join(answer + problem.end for answer in answers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())