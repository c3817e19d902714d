"""
Answer Matching System

Matching strategies for comparing a submitted answer to the canonical answer,
one per question type. Every strategy is a pure function returning a
MatchResult with an accuracy ratio in [0, 1] and a correctness flag.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Any, Optional

from ..core.config import GradingConfig
from .types import QuestionType

# Fill-blank token separators: ASCII comma, full-width comma, ideographic comma, whitespace
TOKEN_SEPARATORS = re.compile(r'[,，、\s]+')

# Keyword separators: commas, colons, ideographic punctuation, whitespace
KEYWORD_SEPARATORS = re.compile(r'[,，:：、。；\s]+')

LINE_SEPARATORS = re.compile(r'\r?\n|\r')


class MatchType(str, Enum):
    """Types of answer matching strategies."""
    EXACT = "exact"
    TOKEN_OVERLAP = "token_overlap"
    KEYWORD_LINES = "keyword_lines"


@dataclass(frozen=True)
class MatchResult:
    """Result of answer matching."""
    is_match: bool
    accuracy: float
    match_type: MatchType
    details: Dict[str, Any] = field(default_factory=dict)


def split_tokens(text: str) -> List[str]:
    """Split a fill-blank answer into its non-empty tokens."""
    if not text:
        return []
    return [token for token in TOKEN_SEPARATORS.split(text) if token]


def split_lines(text: str) -> List[str]:
    """Split a reference answer into its non-blank lines."""
    if not text:
        return []
    return [line for line in LINE_SEPARATORS.split(text) if line.strip()]


def extract_keywords(line: str, min_length: int = 2) -> List[str]:
    """Keywords of one reference line, dropping tokens shorter than ``min_length``."""
    return [token for token in KEYWORD_SEPARATORS.split(line) if len(token) >= min_length]


def match_single_choice(submitted: str, correct: str,
                        config: Optional[GradingConfig] = None) -> MatchResult:
    """Exact, case-sensitive comparison; accuracy is 1.0 or 0.0."""
    # An unanswered question never matches, even against a blank reference
    is_match = bool(submitted) and submitted == correct

    return MatchResult(
        is_match=is_match,
        accuracy=1.0 if is_match else 0.0,
        match_type=MatchType.EXACT,
        details={'exact_match': is_match},
    )


def match_fill_blank(submitted: str, correct: str,
                     config: Optional[GradingConfig] = None) -> MatchResult:
    """
    Token overlap for fill-in-the-blank answers.

    A submitted token counts as matched when it contains, or is contained in,
    any reference token. Accuracy is matched submitted tokens over reference
    tokens, capped at 1.0.
    """
    config = config or GradingConfig()
    correct_tokens = split_tokens(correct)
    submitted_tokens = split_tokens(submitted)

    if not correct_tokens or not submitted_tokens:
        return _no_match(MatchType.TOKEN_OVERLAP, correct_tokens=correct_tokens,
                         submitted_tokens=submitted_tokens)

    # NOTE: containment is bidirectional, so a one-character token matches
    # any reference token that includes that character.
    matched = [
        token for token in submitted_tokens
        if any(token in expected or expected in token for expected in correct_tokens)
    ]

    accuracy = min(len(matched) / len(correct_tokens), 1.0)
    is_match = accuracy >= config.fill_blank_threshold

    return MatchResult(
        is_match=is_match,
        accuracy=accuracy,
        match_type=MatchType.TOKEN_OVERLAP,
        details={
            'correct_tokens': correct_tokens,
            'submitted_tokens': submitted_tokens,
            'matched_tokens': matched,
        },
    )


def match_keyword_lines(submitted: str, correct: str,
                        config: Optional[GradingConfig] = None) -> MatchResult:
    """
    Keyword coverage for short-answer and calculation questions.

    Each line of the reference answer is a scoring point. A line is covered
    when any of its keywords occurs in the submitted text.
    """
    config = config or GradingConfig()
    lines = split_lines(correct)

    if not lines or not submitted:
        return _no_match(MatchType.KEYWORD_LINES, total_lines=len(lines))

    matched_lines = []
    for index, line in enumerate(lines):
        keywords = extract_keywords(line, config.min_keyword_length)
        if any(keyword in submitted for keyword in keywords):
            matched_lines.append(index)

    accuracy = len(matched_lines) / len(lines)
    is_match = accuracy > config.keyword_threshold

    return MatchResult(
        is_match=is_match,
        accuracy=accuracy,
        match_type=MatchType.KEYWORD_LINES,
        details={
            'total_lines': len(lines),
            'matched_lines': matched_lines,
        },
    )


def _no_match(match_type: MatchType, **details) -> MatchResult:
    details['empty_input'] = True
    return MatchResult(is_match=False, accuracy=0.0, match_type=match_type, details=details)


MatchStrategy = Callable[[str, str, Optional[GradingConfig]], MatchResult]

STRATEGIES: Dict[QuestionType, MatchStrategy] = {
    QuestionType.SINGLE_CHOICE: match_single_choice,
    QuestionType.FILL_BLANK: match_fill_blank,
    QuestionType.SHORT_ANSWER: match_keyword_lines,
    QuestionType.CALCULATION: match_keyword_lines,
    QuestionType.UNKNOWN: match_single_choice,
}


def get_strategy(question_type: QuestionType) -> MatchStrategy:
    """Matching strategy for a question type."""
    return STRATEGIES[QuestionType.parse(question_type)]


def match_answer(question_type: QuestionType, submitted: Optional[str], correct: Optional[str],
                 config: Optional[GradingConfig] = None) -> MatchResult:
    """Match ``submitted`` against ``correct`` with the strategy for ``question_type``."""
    strategy = get_strategy(question_type)
    return strategy(submitted or "", correct or "", config)
