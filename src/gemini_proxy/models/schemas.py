"""Model list response models cloning the OpenAI API."""

from typing import Literal

from pydantic import BaseModel

__all__ = ["ModelResponse", "ModelResponseData"]


class ModelResponseData(BaseModel):
    """Single model entry. Gemini reports neither owner nor creation time."""

    object: Literal["model"] = "model"
    id: str
    created: int = 0
    owned_by: Literal["google"] = "google"


class ModelResponse(BaseModel):
    """OpenAI-compatible model list."""

    object: Literal["list"] = "list"
    data: list[ModelResponseData]
