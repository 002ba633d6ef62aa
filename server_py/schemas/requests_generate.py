"""Request model for the requirements generation endpoint."""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class GenerateRequest(BaseModel):
    """Inputs for generating a requirements bundle. Every field is optional."""
    model_config = ConfigDict(extra="ignore")

    figmaUrl: Optional[str] = None
    brief: Optional[str] = None
    rules: Optional[str] = None
    model: Optional[str] = None
    detail: Optional[str] = None
    imageDataUrl: Optional[str] = None
