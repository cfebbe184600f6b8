"""Report analysis workflow."""

from app.graphs.report_analysis.graph import report_analysis_graph, run_report_analysis
from app.graphs.report_analysis.state import ReportAnalysisState

__all__ = ["report_analysis_graph", "run_report_analysis", "ReportAnalysisState"]
