"""
Pydantic schemas for the structured prompt record.

Defines the fixed JSON shape produced by prompt conversion.
"""

from pydantic import BaseModel, Field
from typing import List


class PromptInputs(BaseModel):
    """Inputs a prompt needs."""

    required: List[str] = Field(
        default_factory=list,
        description="Essential information or parameters needed"
    )
    optional: List[str] = Field(
        default_factory=list,
        description="Helpful but not critical information"
    )
    constraints: List[str] = Field(
        default_factory=list,
        description="Limitations, requirements, or boundaries"
    )


class PromptOutputs(BaseModel):
    """Deliverables a prompt asks for."""

    primary: str = Field(..., description="The main deliverable or result expected")
    secondary: List[str] = Field(
        default_factory=list,
        description="Additional outputs or side effects"
    )
    format: str = Field(..., description="Expected output format (e.g., JSON, CSV, HTML)")


class PromptRecord(BaseModel):
    """Structured view of a free-form prompt."""

    task: str = Field(..., description="A clear, concise description of what needs to be accomplished")
    intent: str = Field(..., description="The underlying goal or purpose of the request")
    inputs: PromptInputs
    outputs: PromptOutputs
    clarity_gaps: List[str] = Field(
        default_factory=list,
        description="Areas where the prompt lacks detail or could be more specific"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "task": "Generate a product catalog for corrugated boxes with pricing and specs",
                    "intent": "corrugated boxes with pricing and specs",
                    "inputs": {
                        "required": ["Input text or prompt", "Context or background information"],
                        "optional": ["Additional context", "Preferences or style guidelines"],
                        "constraints": ["Available time and resources", "Technical limitations"],
                    },
                    "outputs": {
                        "primary": "Catalog",
                        "secondary": ["Documentation or instructions", "Quality assurance metrics"],
                        "format": "JSON",
                    },
                    "clarity_gaps": [],
                }
            ]
        }
    }
