"""run_dev.py — Start the Smart City Events API in development mode.

Equivalent CLI command (run from backend/):
    uvicorn api.main:app --reload --host 0.0.0.0 --port 8000

Pass --seed path/to/events.json to load sample events before serving.
"""

import argparse

import uvicorn

from core.config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the events API with auto-reload")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--seed", metavar="JSON", help="Load events from a JSON file first")
    args = parser.parse_args()

    if args.seed:
        from db.seed import seed_from_file

        seed_from_file(args.seed)

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=True,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
