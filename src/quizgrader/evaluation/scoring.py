"""
Score Calculator

Derives a question's base point value from its type and difficulty and the
awarded score from the base value and the judged accuracy.
"""

import math
from fractions import Fraction
from numbers import Rational
from typing import Optional, Union

from ..core.config import GradingConfig
from .types import QuestionType, normalize_difficulty


# Accuracies are ratios of line or token counts, far below this bound
MAX_RATIO_DENOMINATOR = 10 ** 6


def round_half_up(value: Union[float, Rational]) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3).

    Works on the exact value of ``value``; pass a Fraction when the operand is
    a ratio, since float products such as 45 * 0.7 land just below the half.
    """
    return math.floor(Fraction(value) + Fraction(1, 2))


def exact_ratio(accuracy: float) -> Fraction:
    """Recover the count ratio behind a float accuracy (0.7 -> 7/10)."""
    return Fraction(accuracy).limit_denominator(MAX_RATIO_DENOMINATOR)


class ScoreCalculator:
    """Computes base and awarded scores from the grading configuration."""

    def __init__(self, config: Optional[GradingConfig] = None):
        self.config = config or GradingConfig()

    def base_score(self, question_type: QuestionType, difficulty: Optional[int] = None) -> int:
        """Points a fully correct answer is worth; unknown types are worth ``difficulty``."""
        difficulty = normalize_difficulty(difficulty)
        question_type = QuestionType.parse(question_type)

        multiplier = self.config.type_multipliers.get(question_type.value)
        if multiplier is None:
            return difficulty
        return int(multiplier) * difficulty

    def awarded_score(self, question_type: QuestionType, base_score: int,
                      is_correct: bool, accuracy: float) -> int:
        if not is_correct:
            return 0
        if QuestionType.parse(question_type).is_partial_credit:
            return round_half_up(base_score * exact_ratio(accuracy))
        return base_score
