#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the database connection is working and the tables exist.
Usage: python scripts/test_connections.py [--create-tables]
"""
import sys

from sqlalchemy import inspect

from alumni_portal.core.config import get_settings
from alumni_portal.core.logging_config import setup_logging
from alumni_portal.db.session import engine, init_db, test_database_connection

EXPECTED_TABLES = ["users", "professional_information", "interview_experiences", "society_members"]


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level)

    print("=" * 50)
    print("ALUMNI PORTAL - CONNECTION TEST")
    print("=" * 50)

    print("\n[1] Testing database...")
    print(f"    URL: {engine.url.render_as_string(hide_password=True)}")
    if not test_database_connection():
        print("    FAILED")
        return 1
    print("    CONNECTED")

    if "--create-tables" in sys.argv:
        init_db()

    print("\n[2] Checking tables...")
    present = set(inspect(engine).get_table_names())
    missing = [name for name in EXPECTED_TABLES if name not in present]
    for name in EXPECTED_TABLES:
        print(f"    {name}: {'ok' if name in present else 'missing'}")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)
    return 1 if missing else 0


if __name__ == "__main__":
    sys.exit(main())
