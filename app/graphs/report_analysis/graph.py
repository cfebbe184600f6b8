"""LangGraph workflow definition for report analysis."""

from langgraph.graph import StateGraph, START, END

from app.core.logging import logger
from app.schemas.analysis import AnalysisResult, ReportInput, build_fallback_result
from app.graphs.report_analysis.state import ReportAnalysisState
from app.graphs.report_analysis.nodes import (
    prepare_file,
    build_prompt,
    invoke_model,
    validate_response,
    use_fallback,
    route_after_invoke,
)


def build_report_analysis_graph() -> StateGraph:
    """Build the report analysis workflow graph."""

    graph = StateGraph(ReportAnalysisState)

    graph.add_node("prepare_file", prepare_file)
    graph.add_node("build_prompt", build_prompt)
    graph.add_node("invoke_model", invoke_model)
    graph.add_node("validate_response", validate_response)
    graph.add_node("use_fallback", use_fallback)

    # Start -> Prepare File -> Build Prompt -> Invoke Model
    graph.add_edge(START, "prepare_file")
    graph.add_edge("prepare_file", "build_prompt")
    graph.add_edge("build_prompt", "invoke_model")

    # Invoke Model -> (Validate Response | Use Fallback)
    graph.add_conditional_edges(
        "invoke_model",
        route_after_invoke,
        {
            "validate_response": "validate_response",
            "use_fallback": "use_fallback",
        }
    )

    graph.add_edge("validate_response", END)
    graph.add_edge("use_fallback", END)

    return graph


# Single run per submission, nothing to resume, so no checkpointer
report_analysis_graph = build_report_analysis_graph().compile()


def initial_state(report: ReportInput) -> ReportAnalysisState:
    return {
        "report": report.model_dump(),
        "content_kind": "",
        "mime_type": "",
        "prompt": "",
        "raw_response": None,
        "result": {},
        "succeeded": False,
        "errors": [],
    }


async def run_report_analysis(report: ReportInput) -> tuple[AnalysisResult, bool]:
    """
    Run the whole pipeline for one report.

    Always returns a schema-valid result. The flag is False when the
    fallback result was substituted.
    """
    try:
        final_state = await report_analysis_graph.ainvoke(initial_state(report))
        result = AnalysisResult.model_validate(final_state["result"])
    except Exception as e:
        logger.exception(f"Report analysis workflow crashed for {report.file_name}: {e}")
        return build_fallback_result(), False

    if final_state.get("errors"):
        logger.warning(f"Analysis of {report.file_name} fell back: {'; '.join(final_state['errors'])}")

    return result, final_state["succeeded"]
