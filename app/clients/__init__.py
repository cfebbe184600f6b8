"""Clients for talking to a running HealthMate API."""

from app.clients.analysis_client import AnalysisClient

__all__ = ["AnalysisClient"]
