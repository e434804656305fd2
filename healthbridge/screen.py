"""The symptom input screen: state transitions and what it renders."""
import logging

from healthbridge.assist.location import LocationProvider
from healthbridge.assist.orchestrator import SymptomAnalyzer, sanitize_error
from healthbridge.errors import CoordinateAlreadySetError, SubmissionInProgressError
from healthbridge.models import AboutInfo, Coordinate, ScreenState, ScreenView

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter your symptoms"

ABOUT = AboutInfo(
    title="About HealthBridge AI",
    content=(
        "This app helps users in underserved communities get preliminary "
        "health assessments and find nearby healthcare solutions.\n\n"
        "Note: This is not a substitute for professional medical advice."
    ),
)


class SymptomScreen:
    """Idle → Loading → Success | Error, then back to Loading on the next submit."""

    def __init__(self, analyzer: SymptomAnalyzer | None = None, location: LocationProvider | None = None):
        self.analyzer = analyzer or SymptomAnalyzer()
        self.location = location or LocationProvider()
        self.state = ScreenState.IDLE
        self.symptoms = ""
        self.diagnosis = ""
        self.recommendations = ""
        self.error_message = ""
        self.show_diagnosis = False
        self.show_recommendations = False

    @property
    def is_loading(self) -> bool:
        return self.state == ScreenState.LOADING

    @property
    def coordinate(self) -> Coordinate | None:
        return self.location.coordinate

    async def init_state(self) -> None:
        await self.location.acquire()

    def set_coordinate(self, coordinate: Coordinate) -> None:
        """Accept a client-reported position, only if none was acquired yet."""
        if self.location.coordinate is not None:
            raise CoordinateAlreadySetError()
        self.location.coordinate = coordinate
        logger.info(f"Location reported by client: {coordinate.format()}")

    async def submit(self, symptoms: str) -> ScreenView:
        if self.is_loading:
            raise SubmissionInProgressError()

        self.symptoms = symptoms
        if not symptoms:
            self.error_message = EMPTY_INPUT_MESSAGE
            return self.view()

        self.state = ScreenState.LOADING
        self.diagnosis = ""
        self.recommendations = ""
        self.error_message = ""
        self.show_diagnosis = False
        self.show_recommendations = False

        try:
            result = await self.analyzer.analyze(symptoms, self.coordinate)
        except Exception as e:
            self.error_message = sanitize_error(e)
            self.state = ScreenState.ERROR
            logger.error(f"API Error: {e}")
        else:
            self.diagnosis = result.diagnosis
            self.recommendations = result.recommendations
            self.show_diagnosis = True
            self.show_recommendations = True
            self.state = ScreenState.SUCCESS
        finally:
            # Cancelled mid-call: leave Loading so the next submit is accepted.
            if self.state == ScreenState.LOADING:
                self.state = ScreenState.IDLE
        return self.view()

    def view(self) -> ScreenView:
        coordinate = self.coordinate
        return ScreenView(
            state=self.state,
            symptoms=self.symptoms,
            diagnosis=self.diagnosis,
            recommendations=self.recommendations,
            error_message=self.error_message,
            is_loading=self.is_loading,
            show_diagnosis=self.show_diagnosis,
            show_recommendations=self.show_recommendations,
            location=coordinate,
            location_text=f"Location: {coordinate.format()}" if coordinate else None,
        )

    def dispose(self) -> None:
        """Release the text and coordinate. The analyzer may be shared and is closed by its owner."""
        self.symptoms = ""
        self.location.coordinate = None
        self.state = ScreenState.IDLE
