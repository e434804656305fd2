"""
check_symptoms.py — Run one symptom analysis from the terminal, without the web page.

    python scripts/check_symptoms.py "fever, headache, cough for 3 days" [--lat 51.5 --lon -0.12]

Uses the same settings (.env / environment) as the server.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Allow imports from the repo root
sys.path.insert(0, str(Path(__file__).parent.parent))

from healthbridge.assist.location import LocationProvider, NullGeolocationService, StaticGeolocationService
from healthbridge.models import Coordinate, ScreenState
from healthbridge.screen import SymptomScreen

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger(__name__)


def build_location(args: argparse.Namespace) -> LocationProvider:
    if args.no_location:
        return LocationProvider(NullGeolocationService())
    if args.lat is not None and args.lon is not None:
        return LocationProvider(StaticGeolocationService(Coordinate(latitude=args.lat, longitude=args.lon)))
    return LocationProvider()


async def run(args: argparse.Namespace) -> int:
    screen = SymptomScreen(location=build_location(args))
    await screen.init_state()
    try:
        view = await screen.submit(args.symptoms)
    finally:
        screen.dispose()
        await screen.analyzer.close()

    if view.state != ScreenState.SUCCESS:
        print(view.error_message, file=sys.stderr)
        return 1

    print("== Possible Diagnosis ==")
    print(view.diagnosis)
    print("\n== Recommendations ==")
    print(view.recommendations)
    if view.location_text:
        print(f"\n{view.location_text}")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Analyze symptoms with HealthBridge AI")
    parser.add_argument("symptoms", help="Free-text symptom description")
    parser.add_argument("--lat", type=float, default=None, help="Latitude to use as location context")
    parser.add_argument("--lon", type=float, default=None, help="Longitude to use as location context")
    parser.add_argument("--no-location", action="store_true", help="Skip location lookup")
    args = parser.parse_args()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
