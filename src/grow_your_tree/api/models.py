"""Pydantic models for API request bodies."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Display name for the local session."""

    name: str


class WaterRequest(BaseModel):
    """Water to add; negative values subtract."""

    delta_ml: float = Field(allow_inf_nan=False)


class StepsRequest(BaseModel):
    """Step count for today."""

    steps: float = Field(allow_inf_nan=False)


class FoodLogRequest(BaseModel):
    """Food portion to log."""

    food_key: str
    grams: float = Field(default=100, allow_inf_nan=False)


class JournalRequest(BaseModel):
    """Journal text for today."""

    text: str
