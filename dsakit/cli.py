"""Small console tools: temperature conversion, an hourglass pattern, ASCII codes and a guessing game."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum

_KELVIN_OFFSET = 274.15


class Feedback(Enum):
    """What a guess in the guessing game is told."""

    LOWER = "LOWER NUMBER PLEASE"
    HIGHER = "GREATER NUMBER PLEASE"
    CORRECT = "CONGRATULATIONS! YOU GUESSED THE RIGHT NUMBER."


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert a Kelvin reading to Celsius."""
    return kelvin - _KELVIN_OFFSET


def celsius_to_kelvin(celsius: float) -> float:
    """Convert a Celsius reading to Kelvin."""
    return celsius + _KELVIN_OFFSET


def double_triangle(rows: int) -> list[str]:
    """Lines of an hourglass of stars that is ``rows`` lines tall; ``rows`` must be odd."""
    if rows < 1 or rows % 2 == 0:
        raise ValueError("rows must be a positive odd number")
    half = (rows + 1) // 2
    top = [" " * (half - i) + "*" * (2 * i - 1) for i in range(half, 0, -1)]
    bottom = [" " * (half - i) + "*" * (2 * i - 1) for i in range(2, half + 1)]
    return top + bottom


def ascii_code(char: str) -> int:
    """Character code of a single character."""
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    return ord(char)


def guess_feedback(guess: int, secret: int) -> Feedback:
    """Tell the player whether to go lower, higher, or that the guess is right."""
    if guess > secret:
        return Feedback.LOWER
    if guess < secret:
        return Feedback.HIGHER
    return Feedback.CORRECT


def _play(secret: int) -> int:
    attempts = 0
    while True:
        try:
            reply = input("Guess the right number between 1 to 100: ")
        except EOFError:
            print()
            return 1
        try:
            guess = int(reply)
        except ValueError:
            print("Please enter a whole number.")
            continue
        attempts += 1
        feedback = guess_feedback(guess, secret)
        print(feedback.value)
        if feedback is Feedback.CORRECT:
            print(f"YOU GUESSED THE RIGHT NUMBER IN {attempts} ATTEMPTS")
            return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dsakit", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    to_celsius = commands.add_parser("to-celsius", help="convert Kelvin to Celsius")
    to_celsius.add_argument("value", type=float)

    to_kelvin = commands.add_parser("to-kelvin", help="convert Celsius to Kelvin")
    to_kelvin.add_argument("value", type=float)

    triangle = commands.add_parser("triangle", help="print an hourglass of stars")
    triangle.add_argument("rows", type=int)

    code = commands.add_parser("ascii", help="print the code of a character")
    code.add_argument("char", nargs="?", default="A")

    guess = commands.add_parser("guess", help="play the number guessing game")
    guess.add_argument("--secret", type=int, help="number to guess (random if omitted)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "to-celsius":
            result = kelvin_to_celsius(args.value)
            print(f"The temperature in Celsius is: {result:g}C")
            print(f"The approximate whole value is: {int(result)}C")
        elif args.command == "to-kelvin":
            result = celsius_to_kelvin(args.value)
            print(f"The temperature in Kelvin is: {result:g}K")
            print(f"The approximate whole value is: {int(result)}K")
        elif args.command == "triangle":
            print("\n".join(double_triangle(args.rows)))
        elif args.command == "ascii":
            print(f"The ASCII value of {args.char} is {ascii_code(args.char)}")
        else:
            secret = args.secret if args.secret is not None else random.randint(1, 100)
            return _play(secret)
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())