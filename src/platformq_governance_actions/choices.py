"""
Vote choice normalization.

Choices are entered 1-indexed (against, for, abstain) but the protocol
encodes them as For=0, Against=1, Abstain=2.
"""

from typing import Any, Dict

from .types import Choice, InvalidChoiceError

CHOICE_ENCODING: Dict[Choice, int] = {
    Choice.AGAINST: 1,
    Choice.FOR: 0,
    Choice.ABSTAIN: 2,
}


def validate_choice(choice: Any) -> Choice:
    """Return the choice as a Choice, raising InvalidChoiceError outside 1..3"""
    if isinstance(choice, bool) or not isinstance(choice, int):
        raise InvalidChoiceError(choice)
    try:
        return Choice(choice)
    except ValueError:
        raise InvalidChoiceError(choice) from None


def map_choice(choice: int) -> int:
    """Map a validated user-facing choice to its protocol encoding"""
    return CHOICE_ENCODING[Choice(choice)]
