"""
Prompt Processor - Convert free-form prompts to structured records and refine them.

Extraction is rule-based: fixed vocabularies and regular expressions over the
raw text, no model calls. Refinement reuses the gap analysis and applies up to
four template edits, one per gap category present.
"""

import logging
import re
import time
from typing import List, Tuple

from ..analysis.gap_analyzer import GapCategory, analyze_text_for_gaps, split_sentences
from ..schemas import (
    ConvertPromptResponse,
    Improvement,
    PromptInputs,
    PromptOutputs,
    PromptRecord,
    RefinePromptResponse,
)

logger = logging.getLogger(__name__)

ACTION_VERBS: Tuple[str, ...] = (
    'generate', 'create', 'build', 'make', 'develop', 'design', 'implement',
    'write', 'produce', 'construct', 'assemble', 'compile', 'organize',
)

INTENT_INDICATORS: Tuple[str, ...] = (
    'to', 'for', 'so that', 'in order to', 'because', 'since',
    'as', 'while', 'when', 'if', 'although',
)

DEFAULT_INTENT = "To fulfill the specified requirements and deliver the requested output"

DATA_PATTERNS = tuple(
    re.compile(rf'\b(\w+)\s+{noun}', re.IGNORECASE)
    for noun in ('data', 'information', 'details', 'specifications')
)
PARAM_PATTERNS = tuple(
    re.compile(rf'\b(\w+)\s+{noun}', re.IGNORECASE)
    for noun in ('parameters', 'criteria', 'requirements')
)
GENERIC_REQUIRED_INPUTS: Tuple[str, ...] = (
    "Input text or prompt",
    "Context or background information",
)

OPTIONAL_PATTERNS = (
    re.compile(r'optional\s+(\w+)', re.IGNORECASE),
    re.compile(r'if\s+available\s+(\w+)', re.IGNORECASE),
    re.compile(r'\b(\w+)\s+\(optional\)', re.IGNORECASE),
)
GENERIC_OPTIONAL_INPUTS: Tuple[str, ...] = (
    "Additional context",
    "Preferences or style guidelines",
)

CONSTRAINT_KEYWORDS: Tuple[str, ...] = (
    'within', 'limit', 'maximum', 'minimum', 'only', 'must', 'should',
)
CONSTRAINT_PATTERNS = tuple(
    (keyword, re.compile(rf'{keyword}\s+(\w+)', re.IGNORECASE))
    for keyword in CONSTRAINT_KEYWORDS
)
GENERIC_CONSTRAINTS: Tuple[str, ...] = (
    "Available time and resources",
    "Technical limitations",
)

FORMAT_PATTERN = re.compile(r'\b(\w+)\s+(?:format|file|output)', re.IGNORECASE)
DEFAULT_FORMAT = "JSON"

OUTPUT_TYPES: Tuple[str, ...] = (
    'report', 'summary', 'analysis', 'list', 'catalog', 'database',
    'dashboard', 'interface', 'document', 'presentation',
)
DEFAULT_PRIMARY_OUTPUT = "Structured data or information"
SECONDARY_OUTPUTS: Tuple[str, ...] = (
    "Documentation or instructions",
    "Quality assurance metrics",
)

# Refinement templates
CONTEXT_PREFIX = "Context: This request is for [specify context]. "
SUBJECTIVE_TERMS = re.compile(r'\b(good|better|best|nice|pretty|cool)\b', re.IGNORECASE)
MEASURABLE_PHRASE = "specific and measurable"
OUTPUT_SUFFIX = (
    " The output should be in [specific format] with [specific structure] "
    "and include [specific content]."
)
CONSTRAINTS_SUFFIX = " Constraints: [specify time limits, resource constraints, technical limitations]."


def extract_task(text: str) -> str:
    """First sentence opening with an action verb, else the first sentence."""
    sentences = [s.strip() for s in split_sentences(text)]
    if not sentences:
        return text.strip()

    for sentence in sentences:
        sentence_lower = sentence.lower()
        if any(sentence_lower.startswith(verb) for verb in ACTION_VERBS):
            return sentence

    return sentences[0]


def extract_intent(text: str) -> str:
    """
    Text after the first purpose connective found, sentence by sentence.

    A connective is detected case-insensitively but split on as written, so
    the result runs up to its next lowercase occurrence. A sentence where it
    only appears capitalized moves on to the next connective.
    """
    for sentence in split_sentences(text):
        sentence_lower = sentence.lower()
        for indicator in INTENT_INDICATORS:
            if indicator not in sentence_lower:
                continue
            parts = sentence.split(indicator)
            if len(parts) > 1:
                return parts[1].strip()

    return DEFAULT_INTENT


def extract_required_inputs(text: str) -> List[str]:
    """
    Extract required inputs.

    Falls back to generic inputs only when no pattern matched.
    """
    required = []

    for pattern in DATA_PATTERNS:
        match = pattern.search(text)
        if match:
            required.append(f"{match.group(1)} data/information")

    for pattern in PARAM_PATTERNS:
        match = pattern.search(text)
        if match:
            required.append(f"{match.group(1)} parameters/criteria")

    if not required:
        required.extend(GENERIC_REQUIRED_INPUTS)

    return required


def extract_optional_inputs(text: str) -> List[str]:
    """Every optional-input match, followed by the generic optional inputs."""
    optional = [
        match.group(1)
        for pattern in OPTIONAL_PATTERNS
        for match in pattern.finditer(text)
    ]
    optional.extend(GENERIC_OPTIONAL_INPUTS)
    return optional


def extract_constraints(text: str) -> List[str]:
    """Every constraint match as "<keyword> <word>", followed by the generic constraints."""
    constraints = [
        f"{keyword} {match.group(1)}"
        for keyword, pattern in CONSTRAINT_PATTERNS
        for match in pattern.finditer(text)
    ]
    constraints.extend(GENERIC_CONSTRAINTS)
    return constraints


def extract_outputs(text: str) -> PromptOutputs:
    format_match = FORMAT_PATTERN.search(text)
    output_format = format_match.group(1) if format_match else DEFAULT_FORMAT

    text_lower = text.lower()
    primary = next(
        (output_type.capitalize() for output_type in OUTPUT_TYPES if output_type in text_lower),
        DEFAULT_PRIMARY_OUTPUT,
    )

    return PromptOutputs(
        primary=primary,
        secondary=list(SECONDARY_OUTPUTS),
        format=output_format,
    )


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def convert_prompt_to_json(text: str) -> ConvertPromptResponse:
    """
    Convert a prompt to a structured PromptRecord.

    Args:
        text: Free-form prompt

    Returns:
        ConvertPromptResponse; success=False with the exception message if
        extraction raised
    """
    start = time.perf_counter()

    try:
        record = PromptRecord(
            task=extract_task(text),
            intent=extract_intent(text),
            inputs=PromptInputs(
                required=extract_required_inputs(text),
                optional=extract_optional_inputs(text),
                constraints=extract_constraints(text),
            ),
            outputs=extract_outputs(text),
            clarity_gaps=analyze_text_for_gaps(text).descriptions,
        )
    except Exception as e:
        logger.error(f"Prompt conversion failed: {e}", exc_info=True)
        return ConvertPromptResponse(
            success=False,
            error=str(e),
            processing_time_ms=_elapsed_ms(start),
        )

    processing_time_ms = _elapsed_ms(start)
    logger.debug(f"Converted prompt ({len(text)} chars) in {processing_time_ms}ms")

    return ConvertPromptResponse(
        success=True,
        data=record,
        processing_time_ms=processing_time_ms,
    )


def refine_prompt(text: str) -> RefinePromptResponse:
    """
    Rewrite a prompt to address its clarity gaps.

    Steps run in fixed order (context, ambiguity, output, constraints), each
    only when the analysis of the original text found a gap of that category.
    Each step works on the output of the previous one.

    Args:
        text: Free-form prompt

    Returns:
        RefinePromptResponse with one Improvement per step that fired
    """
    analysis = analyze_text_for_gaps(text)

    refined = text
    improvements: List[Improvement] = []

    def apply(improvement_type: str, description: str, new_text: str) -> None:
        nonlocal refined
        improvements.append(Improvement(
            type=improvement_type,
            description=description,
            before=refined,
            after=new_text,
        ))
        refined = new_text

    if analysis.has_category(GapCategory.MISSING_CONTEXT):
        apply('clarity', 'Added context section', f"{CONTEXT_PREFIX}{refined}")

    if analysis.has_category(GapCategory.AMBIGUOUS_REQUIREMENT):
        apply(
            'specificity',
            'Replaced subjective terms with objective criteria',
            SUBJECTIVE_TERMS.sub(MEASURABLE_PHRASE, refined),
        )

    if analysis.has_category(GapCategory.UNCLEAR_OUTPUT):
        apply('structure', 'Added specific output requirements', f"{refined}{OUTPUT_SUFFIX}")

    if analysis.has_category(GapCategory.MISSING_CONSTRAINTS):
        apply('completeness', 'Added constraints section', f"{refined}{CONSTRAINTS_SUFFIX}")

    logger.debug(f"Refined prompt with {len(improvements)} improvement(s)")

    return RefinePromptResponse(
        success=True,
        original_prompt=text,
        refined_prompt=refined,
        improvements=improvements,
    )
