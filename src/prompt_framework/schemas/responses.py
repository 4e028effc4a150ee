"""
Pydantic schemas for tool requests and responses.

Every operation response is validated against one of these models before it
leaves the dispatcher.
"""

from typing import Any, Dict, List, Literal, Optional, Type

from pydantic import BaseModel, Field, ValidationError, field_validator

from .prompt import PromptRecord

GapCategoryLiteral = Literal[
    "missing_context", "ambiguous_requirement", "unclear_output", "missing_constraints"
]
SeverityLiteral = Literal["low", "medium", "high"]
ImprovementTypeLiteral = Literal["clarity", "specificity", "structure", "completeness"]


class TextInput(BaseModel):
    """Request schema shared by all text operations."""

    text: str = Field(..., min_length=1, description="Prompt text to process")

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text input cannot be empty")
        return v


class ClarityGap(BaseModel):
    """A single clarity gap as reported to callers."""

    category: GapCategoryLiteral
    description: str
    suggestion: str
    severity: SeverityLiteral


class Improvement(BaseModel):
    """One refinement step that fired."""

    type: ImprovementTypeLiteral
    description: str
    before: str
    after: str


class ConvertPromptResponse(BaseModel):
    """Response schema for convertPromptToJson."""

    success: bool
    data: Optional[PromptRecord] = None
    error: Optional[str] = None
    processing_time_ms: int = Field(0, ge=0)


class ClarityGapsResponse(BaseModel):
    """Response schema for findClarityGaps."""

    success: bool
    gaps: List[ClarityGap] = Field(default_factory=list)
    overall_clarity_score: int = Field(..., ge=0, le=100)
    error: Optional[str] = None


class RefinePromptResponse(BaseModel):
    """Response schema for refinePrompt."""

    success: bool
    original_prompt: str
    refined_prompt: str
    improvements: List[Improvement] = Field(default_factory=list)
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for the health check."""

    status: Literal["healthy"] = "healthy"
    timestamp: str
    version: str


def validate_input(schema: Type[BaseModel], payload: Any) -> Dict[str, Any]:
    """
    Validate a payload against a schema without raising.

    Args:
        schema: Pydantic model class
        payload: Raw input (usually a dict of tool parameters)

    Returns:
        {"success": True, "data": model} or
        {"success": False, "error": message, "errors": pydantic error list}
    """
    try:
        return {"success": True, "data": schema.model_validate(payload)}
    except ValidationError as e:
        errors = e.errors()
        message = "; ".join(err["msg"] for err in errors) or "Invalid input"
        return {"success": False, "error": message, "errors": errors}
