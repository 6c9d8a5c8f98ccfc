"""Initialize the configured store, seeding the demo runs if it is empty.

Uses DATABASE_URL (or .env) like the server does:
    DATABASE_URL=sqlite:///ski.db python backend/scripts/seed_demo_runs.py
"""

from skitrack import repository
from skitrack.core.config import settings
from skitrack.core.logging import configure_logging
from skitrack.init_db import initialize


def main():
    configure_logging(settings.log_level)
    engine = initialize(settings)
    try:
        runs = repository.get_runs(engine)
        turns = sum(len(repository.get_turns_for_run(engine, r.id)) for r in runs)
    finally:
        engine.dispose()

    print(f"Store ready: {len(runs)} runs, {turns} turns")


if __name__ == "__main__":
    main()
