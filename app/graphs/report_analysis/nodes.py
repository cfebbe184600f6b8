"""LangGraph nodes for the report analysis workflow."""

from typing import Literal

from app.core.logging import logger
from app.schemas.analysis import ContentKind, ReportInput, build_fallback_result
from app.services.inference_service import InferenceService
from app.services.ingestion_service import IngestionService
from app.services.prompt_builder import build_analysis_prompt
from app.services.response_parser import analyze_raw_response
from app.shared.exceptions import IngestionError
from app.graphs.report_analysis.state import ReportAnalysisState


# ============ NODE 1: PREPARE FILE ============

def prepare_file(state: ReportAnalysisState) -> dict:
    """
    Decide the content kind from the file name and the MIME type to send.
    """
    report = ReportInput.model_validate(state["report"])
    content_kind = IngestionService.get_content_kind(report.file_name)

    # Bytes are only needed to sniff image types
    data = None
    if content_kind == ContentKind.IMAGE:
        try:
            data = IngestionService.decode_payload(report.encoded_file)
        except IngestionError as e:
            logger.warning(f"Could not decode {report.file_name} for type detection: {e}")

    mime_type = IngestionService.get_mime_type(content_kind, data)

    logger.info(f"Prepared {report.file_name} as {content_kind.value} ({mime_type})")
    return {"content_kind": content_kind.value, "mime_type": mime_type}


# ============ NODE 2: BUILD PROMPT ============

def build_prompt(state: ReportAnalysisState) -> dict:
    report = ReportInput.model_validate(state["report"])
    content_kind = ContentKind(state["content_kind"])
    return {"prompt": build_analysis_prompt(report, content_kind)}


# ============ NODE 3: INVOKE MODEL ============

def invoke_model(state: ReportAnalysisState) -> dict:
    """
    Call the inference service once. Any failure is recorded and routed
    to the fallback node.
    """
    report = ReportInput.model_validate(state["report"])

    try:
        inference_service = InferenceService()
        raw_response = inference_service.generate(
            prompt=state["prompt"],
            file_name=report.file_name,
            mime_type=state["mime_type"],
            encoded_file=report.encoded_file,
        )
    except Exception as e:
        logger.error(f"Inference call failed for {report.file_name}: {e}")
        return {
            "raw_response": None,
            "errors": [f"invocation: {e}"],
        }

    return {"raw_response": raw_response}


# ============ NODE 4: VALIDATE RESPONSE ============

def validate_response(state: ReportAnalysisState) -> dict:
    """
    Extract and validate the structured result from the model output.
    """
    result, ok = analyze_raw_response(state["raw_response"])

    if not ok:
        return {
            "result": result.model_dump(by_alias=True),
            "succeeded": False,
            "errors": ["response: model output did not match the analysis schema"],
        }

    logger.info(f"Analysis complete: reviewed={result.reviewed}, pending={result.pending}, "
                f"{len(result.highlights)} highlights")
    return {"result": result.model_dump(by_alias=True), "succeeded": True}


# ============ NODE 5: USE FALLBACK ============

def use_fallback(state: ReportAnalysisState) -> dict:
    """Substitute the fixed fallback result after a failed invocation."""
    return {
        "result": build_fallback_result().model_dump(by_alias=True),
        "succeeded": False,
    }


# ============ ROUTING FUNCTIONS ============

def route_after_invoke(state: ReportAnalysisState) -> Literal["validate_response", "use_fallback"]:
    """Route based on whether the model produced any output."""
    if state.get("raw_response") is None:
        return "use_fallback"
    return "validate_response"
