"""
Initialize the SQLite database for the development notes API.

Usage:
    python scripts/init_db.py
"""

from pathlib import Path

from notes_api import create_app
from notes_api import database


def main() -> None:
    create_app()
    db_path = Path(database.engine.url.database or "notes.db")
    print(f"Database initialized at {db_path.resolve()}")


if __name__ == "__main__":
    main()
