import pytest

from healthbridge.assist.location import GeolocationService, LocationPermission, LocationProvider
from healthbridge.assist.orchestrator import SymptomAnalyzer
from healthbridge.models import Coordinate
from healthbridge.screen import SymptomScreen


class FakeLLM:
    """Records prompts; answers from a queue of strings, None or exceptions."""

    def __init__(self, *replies):
        self.replies = list(replies) or ["diagnosis text", "recommendation text"]
        self.prompts: list[str] = []
        self.closed = False

    async def generate_text(self, prompt: str):
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    async def close(self):
        self.closed = True


class FakeGeolocation(GeolocationService):
    def __init__(
        self,
        enabled=True,
        permission=LocationPermission.WHILE_IN_USE,
        requested=LocationPermission.WHILE_IN_USE,
        position=Coordinate(latitude=12.345678, longitude=-98.765432),
    ):
        self.enabled = enabled
        self.permission = permission
        self.requested = requested
        self.position = position
        self.requests = 0
        self.position_calls = 0

    async def is_service_enabled(self):
        return self.enabled

    async def check_permission(self):
        return self.permission

    async def request_permission(self):
        self.requests += 1
        return self.requested

    async def get_current_position(self):
        self.position_calls += 1
        if isinstance(self.position, BaseException):
            raise self.position
        return self.position


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def geolocation():
    return FakeGeolocation()


@pytest.fixture
def make_screen():
    def _make(llm=None, geolocation=None):
        llm = llm or FakeLLM()
        geo = geolocation or FakeGeolocation(enabled=False)
        return SymptomScreen(analyzer=SymptomAnalyzer(llm=llm), location=LocationProvider(geo))

    return _make
