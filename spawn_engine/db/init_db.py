#!/usr/bin/env python3
"""Initialize the database for spawn-engine."""

import time

from .connection import db
from .queries import SpawnQueries


def main():
    """Initialize the database and sweep expired reservations."""
    try:
        print("Initializing database...")
        db.initialize()
        print("✓ Database initialized successfully!")
        print("✓ Tables created")

        with db.get_session() as session:
            removed = SpawnQueries(session).purge_expired_reservations(int(time.time()))
        print(f"✓ {removed} expired spawn reservations removed")

    except Exception as e:
        print(f"✗ Database initialization failed: {e}")
        import traceback
        traceback.print_exc()
        return False

    return True


if __name__ == "__main__":
    main()
