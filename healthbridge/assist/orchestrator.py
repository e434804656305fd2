"""Orchestrates: diagnosis prompt → LLM → recommendation prompt → LLM."""
import logging

from openai import AuthenticationError

from healthbridge.assist.llm import LLMClient
from healthbridge.assist.prompt import build_diagnosis_prompt, build_recommendation_prompt
from healthbridge.models import AnalysisResult, Coordinate

logger = logging.getLogger(__name__)

DIAGNOSIS_PLACEHOLDER = "Could not determine diagnosis"
RECOMMENDATIONS_PLACEHOLDER = "No recommendations available"
INVALID_API_KEY_MESSAGE = "Invalid API key. Please check your configuration."


def sanitize_error(exc: BaseException) -> str:
    """Turn an exception from the AI calls into the message shown to the user."""
    message = f"Error: {str(exc).replace('Exception:', '').strip()}"
    if "API_KEY" in message or isinstance(exc, AuthenticationError):
        return INVALID_API_KEY_MESSAGE
    return message


class SymptomAnalyzer:
    """Runs the two prompts against the same model, one after the other."""

    def __init__(self, llm: LLMClient | None = None):
        self.llm = llm or LLMClient()

    async def analyze(self, symptoms: str, coordinate: Coordinate | None = None) -> AnalysisResult:
        # Sequential: the recommendation call never runs if diagnosis raises.
        diagnosis = await self.llm.generate_text(build_diagnosis_prompt(symptoms))
        logger.info("Diagnosis received.")

        recommendations = await self.llm.generate_text(
            build_recommendation_prompt(symptoms, coordinate)
        )
        logger.info("Recommendations received.")

        return AnalysisResult(
            diagnosis=diagnosis or DIAGNOSIS_PLACEHOLDER,
            recommendations=recommendations or RECOMMENDATIONS_PLACEHOLDER,
        )

    async def close(self) -> None:
        await self.llm.close()
