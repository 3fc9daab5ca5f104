#!/usr/bin/env python3
"""
Mint a token for an operator without going through ``POST /api/login``.

Useful for integrations that need a long-lived credential.  The token
is signed with ``SECRET_KEY`` from the environment, so run this with
the same environment as the server.

Usage:
    python create_token.py --username admin --days 365
"""

import argparse

from event_registry_api.app.core.security import create_access_token


def main() -> None:
    ap = argparse.ArgumentParser(description="Issue an Event Registry API token.")
    ap.add_argument("--username", default="admin", help="Operator name embedded in the token")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days")
    args = ap.parse_args()

    token = create_access_token({"username": args.username}, expires_delta=args.days * 24 * 60 * 60)
    print(token)


if __name__ == "__main__":
    main()
