"""
Prompt clarity analysis.

Rule-based detection of clarity gaps and a heuristic clarity score.
"""

from .gap_analyzer import (
    Finding,
    GapAnalysis,
    GapAnalyzer,
    GapCategory,
    GapSeverity,
    analyze_text,
    analyze_text_for_gaps,
    calculate_clarity_score,
    find_ambiguous_requirements,
    find_missing_constraints,
    find_missing_context,
    find_unclear_outputs,
    generate_clarity_suggestions,
)

__all__ = [
    'Finding',
    'GapAnalysis',
    'GapAnalyzer',
    'GapCategory',
    'GapSeverity',
    'analyze_text',
    'analyze_text_for_gaps',
    'calculate_clarity_score',
    'find_ambiguous_requirements',
    'find_missing_constraints',
    'find_missing_context',
    'find_unclear_outputs',
    'generate_clarity_suggestions',
]
