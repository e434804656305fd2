"""HealthBridge AI: symptom analysis backed by a hosted generative model."""

__version__ = "1.0.0"
