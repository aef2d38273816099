"""Storefront management CLI.

Creates and drops the database schema and bootstraps the first admin account,
which cannot be created through the API.

Usage:
    python src/manage.py setup-db
    python src/manage.py drop-db
    python src/manage.py create-admin --name Ada --email ada@example.com --password secret1
"""

import argparse
import sys


def _storefront():
    from storefront.domain import storefront

    storefront.init()
    return storefront


def setup_database():
    """Create tables for every aggregate and entity."""
    from storefront.utils.db import setup_db

    domain = _storefront()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop the tables created by setup-db."""
    from storefront.utils.db import drop_db

    domain = _storefront()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def create_admin(name, email, password):
    """Register an admin account directly, bypassing the HTTP API."""
    from storefront.user.registration import CreateAdminUser

    domain = _storefront()
    with domain.domain_context():
        user_id = domain.process(
            CreateAdminUser(name=name, email=email, password=password),
            asynchronous=False,
        )
    print(f"Created admin {email} ({user_id}).")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Create an admin account")
    admin_parser.add_argument("--name", required=True)
    admin_parser.add_argument("--email", required=True)
    admin_parser.add_argument("--password", required=True)

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "create-admin":
        create_admin(args.name, args.email, args.password)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
