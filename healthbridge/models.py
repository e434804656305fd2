from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def format(self) -> str:
        """Decimal text with four places, e.g. '51.5074, -0.1278'."""
        return f"{self.latitude:.4f}, {self.longitude:.4f}"


class ScreenState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class AnalyzeRequest(BaseModel):
    symptoms: Optional[str] = ""


class AnalysisResult(BaseModel):
    diagnosis: str
    recommendations: str


class ScreenView(BaseModel):
    state: ScreenState
    symptoms: str = ""
    diagnosis: str = ""
    recommendations: str = ""
    error_message: str = ""
    is_loading: bool = False
    show_diagnosis: bool = False
    show_recommendations: bool = False
    location: Optional[Coordinate] = None
    location_text: Optional[str] = None


class AboutInfo(BaseModel):
    title: str
    content: str
