"""Prompt templates for the diagnosis and recommendation calls."""
from healthbridge.models import Coordinate

DIAGNOSIS_PROMPT = """Act as a medical expert. Based on these symptoms: {symptoms}

Provide:
1. Possible conditions (list 2-3 most likely)
2. Brief explanation in simple terms
3. Red flags to watch for

Keep response under 150 words and format with bullet points."""

RECOMMENDATION_PROMPT = """For someone with these symptoms: {symptoms}
{location_context}

Provide:
1. Immediate self-care advice
2. When to seek medical help
3. Recommended healthcare facilities
4. Prevention tips

Format with clear sections and keep under 200 words."""

LOCATION_CONTEXT = "User is located at {latitude:.4f}, {longitude:.4f}. "


def build_location_context(coordinate: Coordinate | None) -> str:
    if coordinate is None:
        return ""
    return LOCATION_CONTEXT.format(
        latitude=coordinate.latitude,
        longitude=coordinate.longitude,
    )


def build_diagnosis_prompt(symptoms: str) -> str:
    """Prompt asking for likely conditions, a plain explanation and red flags."""
    return DIAGNOSIS_PROMPT.format(symptoms=symptoms)


def build_recommendation_prompt(symptoms: str, coordinate: Coordinate | None = None) -> str:
    """Prompt asking for self-care and referral advice, with location when known."""
    return RECOMMENDATION_PROMPT.format(
        symptoms=symptoms,
        location_context=build_location_context(coordinate),
    )
