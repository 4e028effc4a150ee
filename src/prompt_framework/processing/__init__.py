"""
Prompt conversion and refinement.
"""

from .prompt_processor import (
    convert_prompt_to_json,
    extract_constraints,
    extract_intent,
    extract_optional_inputs,
    extract_outputs,
    extract_required_inputs,
    extract_task,
    refine_prompt,
)

__all__ = [
    'convert_prompt_to_json',
    'extract_constraints',
    'extract_intent',
    'extract_optional_inputs',
    'extract_outputs',
    'extract_required_inputs',
    'extract_task',
    'refine_prompt',
]
