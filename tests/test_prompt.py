from healthbridge.assist.prompt import (
    build_diagnosis_prompt,
    build_location_context,
    build_recommendation_prompt,
)
from healthbridge.models import Coordinate


def test_diagnosis_prompt_embeds_symptoms():
    prompt = build_diagnosis_prompt("fever and cough")
    assert prompt.startswith("Act as a medical expert. Based on these symptoms: fever and cough\n\n")
    assert "1. Possible conditions (list 2-3 most likely)" in prompt
    assert prompt.endswith("Keep response under 150 words and format with bullet points.")


def test_recommendation_prompt_without_location():
    prompt = build_recommendation_prompt("sore throat")
    assert prompt.startswith("For someone with these symptoms: sore throat\n\n\nProvide:")
    assert "User is located" not in prompt
    assert "3. Recommended healthcare facilities" in prompt


def test_recommendation_prompt_formats_location_to_four_places():
    coordinate = Coordinate(latitude=6.5244, longitude=3.3792)
    prompt = build_recommendation_prompt("rash", Coordinate(latitude=6.52441234, longitude=-3.37921))
    assert "User is located at 6.5244, -3.3792. " in prompt
    assert build_location_context(coordinate) == "User is located at 6.5244, 3.3792. "


def test_symptoms_with_braces_are_kept_verbatim():
    prompt = build_recommendation_prompt("pain {left side}")
    assert "pain {left side}" in prompt


def test_location_context_empty_without_coordinate():
    assert build_location_context(None) == ""
