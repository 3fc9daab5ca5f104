#!/usr/bin/env python3
"""
Reset an operator's password in the Event Registry SQLite database.

This script does not read or reveal any existing password.  It sets a
new PBKDF2-HMAC-SHA256 hash (format ``salthex$hashhex``) for the given
username.

Usage:
    python reset_password.py --db ./event_registry.db --username admin --password "NewStrongPass!234"

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import asyncio
import getpass
import os
import sys

from event_registry_api.app.core.db import Database
from event_registry_api.app.services.user_service import UserService


async def reset_password(db_path: str, username: str, password: str) -> bool:
    db = Database(db_path)
    db.open()
    try:
        db.init_db()
        return await UserService.set_password(db, username, password)
    finally:
        db.close()


def main():
    ap = argparse.ArgumentParser(description="Reset an Event Registry operator password (SQLite).")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (e.g., ./event_registry.db)")
    ap.add_argument("--username", required=True, help="Operator username to update")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    args = ap.parse_args()

    if not os.path.exists(args.db):
        print(f"[!] DB not found: {args.db}", file=sys.stderr)
        sys.exit(1)

    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)

    if not asyncio.run(reset_password(os.path.abspath(args.db), args.username, new_password)):
        print(f"[!] No operator found with username: {args.username}", file=sys.stderr)
        sys.exit(2)
    print(f"[+] Password updated for {args.username}")


if __name__ == "__main__":
    main()
