"""LangGraph state schema for the report analysis workflow."""

from typing import TypedDict, Annotated, Optional, List
from operator import add


class ReportAnalysisState(TypedDict):
    """State schema for the report analysis workflow."""

    # Input - ReportInput.model_dump()
    report: dict

    # File preparation
    content_kind: str  # "document" or "image"
    mime_type: str

    # Prompt and model output
    prompt: str
    raw_response: Optional[str]

    # Final AnalysisResult, keyed by wire names
    result: dict
    succeeded: bool

    # Errors (using add operator to accumulate errors)
    errors: Annotated[List[str], add]
