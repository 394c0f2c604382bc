"""AI agents."""

from .analysis_agent import BetAnalysisAgent

__all__ = ["BetAnalysisAgent"]
