"""Random quiz on binary, decimal and hexadecimal conversions."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Callable

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_BANNER = (
    "\n"
    "===========================================\n"
    "   🔢 Number Conversion Quiz Game 🔢\n"
    "===========================================\n"
    " Test your skills on binary, decimal, hex\n"
    " conversions and arithmetic operations!\n"
    "-------------------------------------------"
)


def binary_to_decimal(binary: str) -> int:
    """Value of a string of binary digits; an empty string is zero."""
    value = 0
    for digit in binary:
        if digit not in "01":
            raise ValueError(f"invalid binary digit {digit!r}")
        value = value * 2 + int(digit)
    return value


def decimal_to_binary(n: int) -> str:
    """Binary digits of a non-negative integer, without leading zeros."""
    if n < 0:
        raise ValueError("only non-negative numbers can be converted")
    return format(n, "b")


@dataclass(frozen=True)
class Question:
    """One quiz question with the reply that counts as correct."""

    text: str
    expected: str
    numeric: bool


@dataclass
class Quiz:
    """Running score of a quiz session."""

    score: int = 0
    total: int = 0

    def answer(self, question: Question, reply: str) -> bool:
        """Record a reply to *question* and say whether it was correct."""
        correct = _is_correct(question, reply)
        self.total += 1
        if correct:
            self.score += 1
        return correct


def _is_correct(question: Question, reply: str) -> bool:
    if question.numeric:
        match = _LEADING_INT.match(reply)
        return match is not None and int(match.group(1)) == int(question.expected)
    tokens = reply.split()
    return bool(tokens) and tokens[0] == question.expected


def make_question(rng: random.Random) -> Question:
    """Draw one of the four kinds of question at random."""
    kind = rng.randrange(4)
    if kind == 0:
        num = rng.randrange(64)
        return Question(
            f"Q: What is {decimal_to_binary(num)} (binary) in decimal? ", str(num), True
        )
    if kind == 1:
        num = rng.randrange(64)
        return Question(
            f"Q: What is {num} (decimal) in binary? ", decimal_to_binary(num), False
        )
    if kind == 2:
        num = rng.randrange(256)
        return Question(f"Q: What is {num:X} (hex) in decimal? ", str(num), True)
    a = rng.randrange(16)
    b = rng.randrange(16)
    return Question(
        f"Q: What is {decimal_to_binary(a)} + {decimal_to_binary(b)} (binary)? ",
        decimal_to_binary(a + b),
        False,
    )


def _ask_continue(input_fn: InputFn, output_fn: OutputFn) -> bool:
    while True:
        tokens = input_fn("Do you want to continue? (y/n): ").split()
        choice = tokens[0][:1] if tokens else ""
        if choice in ("y", "Y"):
            return True
        if choice in ("n", "N"):
            return False
        output_fn("⚠️  Invalid input. Please enter 'y' or 'n'.")


def run_quiz_module(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    rng: random.Random | None = None,
) -> Quiz:
    """Ask questions until the player stops, and return the final score."""
    rng = rng if rng is not None else random.Random()
    quiz = Quiz()
    output_fn(_BANNER)
    while True:
        question = make_question(rng)
        reply = input_fn(question.text)
        output_fn("✅ Correct!" if quiz.answer(question, reply) else "❌ Incorrect.")
        output_fn(f"Score: {quiz.score}/{quiz.total}")
        if not _ask_continue(input_fn, output_fn):
            break
    output_fn(f"\nFinal Score: {quiz.score}/{quiz.total}")
    return quiz