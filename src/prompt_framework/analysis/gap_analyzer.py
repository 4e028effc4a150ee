"""
Gap Analyzer - Scan prompts for clarity gaps and score them.

Four independent keyword tables are matched against the text:

- context references ("it", "this", "the system", ...) without an antecedent
- ambiguous requirements ("should", "good", "quickly", ...)
- unclear outputs ("something", "data", "report", ...)
- missing constraints ("any", "all", "unlimited", ...)

The clarity score is a rough heuristic, not a calibrated measure:

- Base score starts at 100
- Each unique finding: -15
- Each high severity finding: additional -10
- More than 20 words: +5, more than 50 words: a further +10
- Result is clamped to 0-100
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple
import logging
import re

logger = logging.getLogger(__name__)


class GapCategory(str, Enum):
    """Kinds of clarity gap."""
    MISSING_CONTEXT = "missing_context"
    AMBIGUOUS_REQUIREMENT = "ambiguous_requirement"
    UNCLEAR_OUTPUT = "unclear_output"
    MISSING_CONSTRAINTS = "missing_constraints"


class GapSeverity(str, Enum):
    """How much a gap hurts the prompt."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Pronouns, demonstratives and generic nouns that need an antecedent
CONTEXT_INDICATORS: Tuple[str, ...] = (
    'it', 'this', 'that', 'they', 'them', 'those', 'here', 'there',
    'the system', 'the app', 'the website', 'the platform',
)

# Modal verbs and subjective qualifiers
AMBIGUITY_INDICATORS: Tuple[str, ...] = (
    'maybe', 'possibly', 'might', 'could', 'should', 'would',
    'better', 'best', 'good', 'nice', 'pretty', 'cool',
    'soon', 'quickly', 'fast', 'efficient', 'user-friendly',
)

# Vague nouns standing in for a deliverable
OUTPUT_INDICATORS: Tuple[str, ...] = (
    'something', 'stuff', 'things', 'data', 'information',
    'report', 'summary', 'analysis', 'results',
)

# Unbounded quantifiers
CONSTRAINT_INDICATORS: Tuple[str, ...] = (
    'any', 'all', 'every', 'always', 'never',
    'unlimited', 'infinite', 'maximum', 'minimum',
)

# A reference this close to the start of its sentence has no antecedent yet
ANTECEDENT_MIN_CHARS = 10

BASE_SCORE = 100
PENALTY_PER_GAP = 15
PENALTY_PER_HIGH_SEVERITY = 10
DETAIL_BONUS_WORDS = 20
DETAIL_BONUS = 5
LONG_DETAIL_BONUS_WORDS = 50
LONG_DETAIL_BONUS = 10

CATEGORY_SUGGESTIONS: Tuple[Tuple[GapCategory, str], ...] = (
    (GapCategory.MISSING_CONTEXT, "Add specific context and background information"),
    (GapCategory.AMBIGUOUS_REQUIREMENT, "Use specific, measurable criteria instead of subjective terms"),
    (GapCategory.UNCLEAR_OUTPUT, "Specify exact output format, structure, and content requirements"),
    (GapCategory.MISSING_CONSTRAINTS, "Define clear boundaries, limits, and constraints"),
)

_SENTENCE_SPLIT = re.compile(r'[.!?]+')
_WHITESPACE_SPLIT = re.compile(r'\s+')


@dataclass(frozen=True)
class Finding:
    """A single clarity issue detected in a prompt."""

    category: GapCategory
    description: str
    suggestion: str
    severity: GapSeverity

    def to_dict(self) -> Dict[str, str]:
        """Convert to the JSON shape used in tool responses."""
        return {
            "category": self.category.value,
            "description": self.description,
            "suggestion": self.suggestion,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class GapAnalysis:
    """Result of gap analysis."""

    gaps: Tuple[Finding, ...] = field(default_factory=tuple)
    overall_clarity_score: int = BASE_SCORE

    @property
    def categories(self) -> List[GapCategory]:
        """Categories present, in first-seen order."""
        seen: List[GapCategory] = []
        for gap in self.gaps:
            if gap.category not in seen:
                seen.append(gap.category)
        return seen

    def has_category(self, category: GapCategory) -> bool:
        return any(gap.category == category for gap in self.gaps)

    @property
    def descriptions(self) -> List[str]:
        return [gap.description for gap in self.gaps]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gaps": [gap.to_dict() for gap in self.gaps],
            "overall_clarity_score": self.overall_clarity_score,
        }


def split_sentences(text: str) -> List[str]:
    """Split on runs of sentence terminators, dropping blank pieces.

    Pieces are returned untrimmed.
    """
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def count_words(text: str) -> int:
    return len(_WHITESPACE_SPLIT.split(text))


def _scan_indicators(
    text: str,
    indicators: Iterable[str],
    category: GapCategory,
    severity: GapSeverity,
    description: str,
    suggestion: str,
) -> List[Finding]:
    """Emit one finding per indicator occurring anywhere in the text."""
    text_lower = text.lower()
    return [
        Finding(
            category=category,
            description=description.format(indicator=indicator),
            suggestion=suggestion.format(indicator=indicator),
            severity=severity,
        )
        for indicator in indicators
        if indicator.lower() in text_lower
    ]


def find_missing_context(text: str) -> List[Finding]:
    """Find references like "it" or "the system" that open a sentence."""
    gaps = []

    for index, sentence in enumerate(split_sentences(text), start=1):
        sentence_lower = sentence.lower()
        for indicator in CONTEXT_INDICATORS:
            if indicator.lower() not in sentence_lower:
                continue
            words_before = sentence.split(indicator)[0].strip()
            if len(words_before) < ANTECEDENT_MIN_CHARS:
                gaps.append(Finding(
                    category=GapCategory.MISSING_CONTEXT,
                    description=f'Unclear reference to "{indicator}" in sentence {index}',
                    suggestion=f'Specify what "{indicator}" refers to',
                    severity=GapSeverity.MEDIUM,
                ))

    return gaps


def find_ambiguous_requirements(text: str) -> List[Finding]:
    return _scan_indicators(
        text,
        AMBIGUITY_INDICATORS,
        GapCategory.AMBIGUOUS_REQUIREMENT,
        GapSeverity.HIGH,
        'Vague requirement: "{indicator}"',
        'Replace "{indicator}" with specific, measurable criteria',
    )


def find_unclear_outputs(text: str) -> List[Finding]:
    return _scan_indicators(
        text,
        OUTPUT_INDICATORS,
        GapCategory.UNCLEAR_OUTPUT,
        GapSeverity.MEDIUM,
        'Unclear output: "{indicator}"',
        'Specify the exact format, structure, and content of the "{indicator}"',
    )


def find_missing_constraints(text: str) -> List[Finding]:
    return _scan_indicators(
        text,
        CONSTRAINT_INDICATORS,
        GapCategory.MISSING_CONSTRAINTS,
        GapSeverity.MEDIUM,
        'Missing constraint: "{indicator}"',
        'Specify limits, boundaries, or specific criteria for "{indicator}"',
    )


def deduplicate_findings(gaps: Iterable[Finding]) -> List[Finding]:
    """Drop findings whose description was already seen, keeping order."""
    seen = set()
    unique = []
    for gap in gaps:
        if gap.description in seen:
            continue
        seen.add(gap.description)
        unique.append(gap)
    return unique


def calculate_clarity_score(text: str, gaps: Iterable[Finding]) -> int:
    """
    Derive the 0-100 clarity score from findings and prompt length.

    Args:
        text: The analyzed prompt
        gaps: Deduplicated findings for that prompt

    Returns:
        Integer score, clamped to 0-100
    """
    gaps = list(gaps)
    score = BASE_SCORE
    score -= len(gaps) * PENALTY_PER_GAP

    high_severity = [gap for gap in gaps if gap.severity == GapSeverity.HIGH]
    score -= len(high_severity) * PENALTY_PER_HIGH_SEVERITY

    word_count = count_words(text)
    if word_count > DETAIL_BONUS_WORDS:
        score += DETAIL_BONUS
    if word_count > LONG_DETAIL_BONUS_WORDS:
        score += LONG_DETAIL_BONUS

    return max(0, min(BASE_SCORE, round(score)))


def analyze_text_for_gaps(text: str) -> GapAnalysis:
    """
    Run all four detectors, deduplicate, and score.

    Args:
        text: Prompt to analyze

    Returns:
        GapAnalysis with unique findings and the clarity score
    """
    gaps = [
        *find_missing_context(text),
        *find_ambiguous_requirements(text),
        *find_unclear_outputs(text),
        *find_missing_constraints(text),
    ]
    unique_gaps = deduplicate_findings(gaps)
    score = calculate_clarity_score(text, unique_gaps)

    logger.debug(
        "Gap analysis: %d finding(s) (%d before dedup), score=%d",
        len(unique_gaps), len(gaps), score
    )

    return GapAnalysis(gaps=tuple(unique_gaps), overall_clarity_score=score)


def generate_clarity_suggestions(gaps: Iterable[Finding]) -> List[str]:
    """One improvement hint per gap category present."""
    present = {gap.category for gap in gaps}
    return [suggestion for category, suggestion in CATEGORY_SUGGESTIONS if category in present]


class GapAnalyzer:
    """
    Analyze prompts for clarity gaps.

    Stateless; one instance can be shared by any number of callers.
    """

    def analyze(self, text: str) -> GapAnalysis:
        """
        Analyze a prompt and return its findings and clarity score.

        Args:
            text: Prompt to analyze

        Returns:
            GapAnalysis
        """
        return analyze_text_for_gaps(text)

    def suggest(self, text: str) -> List[str]:
        """Category-level suggestions for a prompt."""
        return generate_clarity_suggestions(self.analyze(text).gaps)


# Convenience function for simple usage
def analyze_text(text: str) -> GapAnalysis:
    """
    Quick gap analysis for a prompt.

    Args:
        text: Prompt to analyze

    Returns:
        GapAnalysis
    """
    return GapAnalyzer().analyze(text)
