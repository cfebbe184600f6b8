"""Recover a validated analysis result from free-form model output."""

import json

from pydantic import ValidationError

from app.core.logging import logger
from app.schemas.analysis import AnalysisResult, build_fallback_result
from app.shared.exceptions import (
    AnalysisError,
    ExtractionError,
    ResponseParseError,
    ResponseValidationError,
)


def extract_json_span(text: str) -> str:
    """
    Return the text between the first "{" and the last "}" inclusive.
    Prose the model writes around the JSON is dropped.
    """
    if not text:
        raise ExtractionError("Empty model response")

    start_idx = text.find("{")
    end_idx = text.rfind("}")
    if start_idx == -1 or end_idx < start_idx:
        raise ExtractionError("No JSON object in model response")

    return text[start_idx:end_idx + 1]


def parse_analysis_response(text: str) -> AnalysisResult:
    """
    Extract, parse and validate a model response.

    Raises ExtractionError, ResponseParseError or ResponseValidationError.
    A valid result is returned as the model wrote it; list lengths and
    string contents are not adjusted.
    """
    span = extract_json_span(text)

    try:
        data = json.loads(span)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Malformed JSON: {e.msg}") from e

    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "<root>" for err in e.errors())
        raise ResponseValidationError(f"Schema mismatch in: {fields}") from e


def analyze_raw_response(text: str) -> tuple[AnalysisResult, bool]:
    """
    Parse a model response, substituting the fallback result on failure.

    Returns (result, ok) where ok is False when the fallback was used.
    """
    try:
        result = parse_analysis_response(text)
    except AnalysisError as e:
        logger.warning(f"Analysis response rejected at {e.stage} stage: {e}")
        logger.debug(f"Rejected model output: {text[:500] if text else text!r}")
        return build_fallback_result(), False

    if result.reviewed and result.pending:
        logger.warning("Model marked report as both reviewed and pending")

    return result, True
