#!/usr/bin/env python3
"""
Grant or revoke admin access for an existing account.

Run: python scripts/grant_admin.py someone@example.com
     python scripts/grant_admin.py someone@example.com --revoke
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


def main() -> int:
    parser = argparse.ArgumentParser(description="Toggle the admin flag on a user account.")
    parser.add_argument("email", help="Account email")
    parser.add_argument("--revoke", action="store_true", help="Remove admin access instead of granting it")
    args = parser.parse_args()

    from cringeshield.config import SessionLocal, create_db
    from cringeshield.utils.auth import get_user_by_email

    create_db()
    db = SessionLocal()
    try:
        user = get_user_by_email(args.email, db)
        if user is None:
            print(f"No account for {args.email}", file=sys.stderr)
            return 1
        user.is_admin = not args.revoke
        db.commit()
        print(f"{user.email}: is_admin={user.is_admin}")
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
