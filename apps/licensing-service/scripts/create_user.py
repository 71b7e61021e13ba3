#!/usr/bin/env python3
"""
Seed a user account so the first login through the gateway is possible.

Usage:
  python scripts/create_user.py --username admin --email admin@example.com --role Admin
  (password read from --password, $SEED_USER_PASSWORD or an interactive prompt)

Reads the database URL the same way the services do (DATABASE_URL or
POSTGRES_* env vars, `.env` honoured).
"""
from __future__ import annotations

import argparse
import getpass
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Allow running from the service directory without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from licensing.errors import LicensingError  # noqa: E402


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create a license-management user")
    p.add_argument("--username", required=True)
    p.add_argument("--email", required=True)
    p.add_argument("--password", default=None)
    p.add_argument("--role", default="User")
    p.add_argument("--tenant-id", type=int, default=None)
    return p.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv()
    args = parse_args(argv)
    password = args.password or os.getenv("SEED_USER_PASSWORD") or getpass.getpass("Password: ")

    from licensing.db.database import SessionLocal, init_sqlite_schema
    from licensing.services import UserService

    init_sqlite_schema()
    db = SessionLocal()
    try:
        user = UserService(db).create_user(
            args.username,
            args.email,
            password,
            role=args.role,
            tenant_id=args.tenant_id,
        )
    except LicensingError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"Created user {user.username} (id={user.user_id}, role={user.role})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
