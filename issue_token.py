"""
Issue a bearer token for an identity.

Example:
    python issue_token.py alice --expires-minutes 60
"""
import argparse
from datetime import timedelta

from asset_registry.core.security import create_access_token


def main() -> None:
    parser = argparse.ArgumentParser(description="Issue a registry bearer token")
    parser.add_argument("identity", help="Identity placed in the token subject")
    parser.add_argument("--expires-minutes", type=int, default=None, help="Token lifetime override")
    args = parser.parse_args()

    expires = timedelta(minutes=args.expires_minutes) if args.expires_minutes else None
    print(create_access_token(args.identity, expires_delta=expires))


if __name__ == "__main__":
    main()
