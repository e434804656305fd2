"""FastAPI application: a symptom screen per session over HTTP + serves the static page."""
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from healthbridge import __version__
from healthbridge.config import settings
from healthbridge.errors import CoordinateAlreadySetError, SubmissionInProgressError
from healthbridge.models import AboutInfo, AnalyzeRequest, Coordinate, ScreenView
from healthbridge.screen import ABOUT, SymptomScreen
from healthbridge.sessions import ScreenSessions

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

SESSION_COOKIE = "healthbridge_session"
SESSION_HEADER = "X-Session-ID"


async def get_screen(request: Request, response: Response) -> SymptomScreen:
    """Screen of the caller's session: id header first, then cookie, else a new cookie."""
    session_id = request.headers.get(SESSION_HEADER) or request.cookies.get(SESSION_COOKIE)
    if not session_id:
        session_id = uuid.uuid4().hex
        response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return await request.app.state.sessions.get(session_id)


def create_app(screen_factory: Callable[[], SymptomScreen] | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        t0 = time.time()
        if not settings.gemini_api_key and not settings.mock_llm:
            logger.warning("GEMINI_API_KEY is not set — analysis requests will fail.")
        logger.info(f"Startup complete in {time.time() - t0:.1f}s")
        yield
        await app.state.sessions.close()
        logger.info("Shutting down.")

    app = FastAPI(
        title="HealthBridge AI",
        description="Preliminary symptom assessment with nearby care recommendations",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.sessions = ScreenSessions(screen_factory)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        return {"status": "ok", "sessions": len(app.state.sessions)}

    @app.get("/screen", response_model=ScreenView)
    async def get_screen_view(screen: SymptomScreen = Depends(get_screen)):
        return screen.view()

    @app.post("/analyze", response_model=ScreenView)
    async def analyze(request: AnalyzeRequest, screen: SymptomScreen = Depends(get_screen)):
        """Submit symptoms; returns the screen in its success or error state."""
        try:
            return await screen.submit(request.symptoms or "")
        except SubmissionInProgressError as e:
            raise HTTPException(status_code=409, detail=str(e))

    @app.post("/location", response_model=ScreenView)
    async def report_location(coordinate: Coordinate, screen: SymptomScreen = Depends(get_screen)):
        """Client-reported position, accepted once when none is known."""
        try:
            screen.set_coordinate(coordinate)
        except CoordinateAlreadySetError as e:
            raise HTTPException(status_code=409, detail=str(e))
        return screen.view()

    @app.get("/about", response_model=AboutInfo)
    async def about():
        return ABOUT

    static_dir = settings.static_dir
    index = static_dir / "index.html"
    if index.exists():
        @app.get("/", include_in_schema=False)
        async def serve_frontend():
            return FileResponse(str(index))
    else:
        logger.warning(f"Static page not found at {static_dir}.")

        @app.get("/", include_in_schema=False)
        async def root():
            return {"message": "Backend running. Static page not found."}

    return app


app = create_app()
