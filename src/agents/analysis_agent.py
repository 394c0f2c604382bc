"""Pydantic AI agent explaining individual bets."""

from typing import Optional

from pydantic_ai import Agent
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from rich.console import Console

from config import get_settings
from src.models.schemas import BetRecord


console = Console(stderr=True)

MISSING_KEY_MESSAGE = "The AI API key is not configured. A detailed analysis cannot be generated."
CONNECTION_ERROR_MESSAGE = "Error connecting to the AI service for analysis."
EMPTY_OUTPUT_MESSAGE = "Could not generate the analysis."


class BetAnalysisAgent:
    """AI agent that explains a single bet from the sheet."""

    SYSTEM_PROMPT = """You are a senior sports betting analyst.
You review individual entries from a bettor's tracking spreadsheet and explain them
to the bettor in plain, professional language.

Keep answers to at most 3 sentences of running text, without markdown."""

    def __init__(self):
        self.settings = get_settings()
        self._agent: Optional[Agent] = None

    @property
    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return bool(self.settings.openrouter_api_key)

    def _get_agent(self) -> Agent:
        if self._agent is None:
            model = OpenAIChatModel(
                self.settings.openrouter_model,
                provider=OpenAIProvider(
                    base_url=self.settings.openrouter_base_url,
                    api_key=self.settings.openrouter_api_key,
                ),
            )
            self._agent = Agent(model=model, system_prompt=self.SYSTEM_PROMPT)
        return self._agent

    def format_bet_context(self, bet: BetRecord, kpi_context: str) -> str:
        """Format a bet and the portfolio KPIs for AI analysis."""
        return f"""
Analyze the following bet entry (the data comes from a spreadsheet):
Competition: {bet.competition}
Match: {bet.home} vs {bet.away}
Market: {bet.market}
Date: {bet.date}
Odds: {bet.odds}
Units staked: {bet.units}
Result: {bet.result.value}
Profit/Loss: {bet.profit_units} units

Portfolio context: {kpi_context}

Explain briefly:
1. What happened (mathematically).
2. The impact on the bankroll.
3. A short remark on the odds (risky or conservative for the result).
"""

    async def explain(self, bet: BetRecord, kpi_context: str) -> str:
        """Generate a short natural-language explanation of a bet."""
        if not self.is_configured:
            return MISSING_KEY_MESSAGE

        prompt = self.format_bet_context(bet, kpi_context)
        try:
            result = await self._get_agent().run(prompt)
        except Exception as e:
            console.print(f"[red]AI analysis failed: {e}[/red]")
            return CONNECTION_ERROR_MESSAGE

        return (result.output or "").strip() or EMPTY_OUTPUT_MESSAGE
