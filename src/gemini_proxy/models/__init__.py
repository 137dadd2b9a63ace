"""Models module exposing the Gemini embedding model catalog."""

from .schemas import ModelResponse, ModelResponseData

__all__ = ["ModelResponse", "ModelResponseData"]
