"""One symptom screen per browser session, created on first use."""
import logging
from collections import OrderedDict
from typing import Callable

from healthbridge.assist.orchestrator import SymptomAnalyzer
from healthbridge.config import settings
from healthbridge.screen import SymptomScreen

logger = logging.getLogger(__name__)


class ScreenSessions:
    """Maps session ids to screens; least recently used idle screens are dropped past the cap."""

    def __init__(self, factory: Callable[[], SymptomScreen] | None = None, max_sessions: int | None = None):
        self._analyzer: SymptomAnalyzer | None = None
        self.factory = factory or self._default_screen
        self.max_sessions = max_sessions or settings.max_sessions
        self._screens: OrderedDict[str, SymptomScreen] = OrderedDict()

    def _default_screen(self) -> SymptomScreen:
        # All sessions share one analyzer (and its HTTP connection pool).
        if self._analyzer is None:
            self._analyzer = SymptomAnalyzer()
        return SymptomScreen(analyzer=self._analyzer)

    def __len__(self) -> int:
        return len(self._screens)

    async def get(self, session_id: str) -> SymptomScreen:
        screen = self._screens.get(session_id)
        if screen is not None:
            self._screens.move_to_end(session_id)
            return screen

        screen = self.factory()
        self._screens[session_id] = screen
        self._evict()
        logger.info(f"New session ({len(self._screens)} active).")
        await screen.init_state()
        return screen

    def _evict(self) -> None:
        for session_id in list(self._screens)[:-1]:
            if len(self._screens) <= self.max_sessions:
                break
            screen = self._screens[session_id]
            if screen.is_loading:
                continue
            del self._screens[session_id]
            screen.dispose()

    async def close(self) -> None:
        analyzers = {id(s.analyzer): s.analyzer for s in self._screens.values()}
        if self._analyzer is not None:
            analyzers[id(self._analyzer)] = self._analyzer
        for screen in self._screens.values():
            screen.dispose()
        self._screens.clear()
        for analyzer in analyzers.values():
            await analyzer.close()
