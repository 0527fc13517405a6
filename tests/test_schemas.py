"""
Testing request validation.
"""

import pytest
from pydantic import ValidationError

from equatle.row import Row
from equatle.schemas import GuessRequest
from equatle.types import Operator


def test_guess_request_builds_a_row():
    request = GuessRequest(guess="5+5=10")
    assert request.to_row() == Row(5, Operator.ADD, 5, 10)


def test_guess_request_allows_every_operator():
    for symbol in "+-*/^%":
        GuessRequest(guess=f"8{symbol}2=4")


@pytest.mark.parametrize("text", ["", "   ", "5x5=25", "2+2=four", "1.5+1=2"])
def test_guess_request_rejects_bad_text(text):
    with pytest.raises(ValidationError):
        GuessRequest(guess=text)


def test_guess_request_leaves_arithmetic_to_the_store():
    # alphabet is fine, equation is false: that is not a schema error
    request = GuessRequest(guess="2+2=5")
    assert request.to_row() == Row(2, Operator.ADD, 2, 5)
