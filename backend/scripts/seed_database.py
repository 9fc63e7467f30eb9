#!/usr/bin/env python
"""Idempotent seed script for roles & the initial administrator.

Usage:
    python backend/scripts/seed_database.py               # seed normally
    python backend/scripts/seed_database.py --show-roles  # print role -> user counts (after ensuring seed)
    python backend/scripts/seed_database.py --dry-run     # run logic then rollback (no DB changes)

Admin credentials come from INITIAL_ADMIN_EMAIL / INITIAL_ADMIN_PASSWORD.
"""
from __future__ import annotations
import os, sys, argparse
from sqlalchemy import select, func

# Allow running from repo root
sys.path.append(os.path.abspath('backend'))

from backoffice import create_app, get_db  # type: ignore
from backoffice.models.authz import Base, Role, UserRole
from backoffice.services.seeding import seed_database


def show_roles(session):
    rows = session.execute(
        select(Role.name, func.count(UserRole.id)).outerjoin(UserRole, UserRole.role_id == Role.id).group_by(Role.name).order_by(Role.name)
    ).all()
    for name, count in rows:
        print(f"{name}: {count} user(s)")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Seed roles and the initial administrator')
    parser.add_argument('--dry-run', action='store_true', help='rollback instead of commit')
    parser.add_argument('--show-roles', action='store_true', help='print role membership counts')
    parser.add_argument('--create-tables', action='store_true', help='create missing tables first (dev databases without migrations)')
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        session = get_db()
        if args.create_tables:
            Base.metadata.create_all(session.get_bind(), checkfirst=True)
        admin = seed_database(session, app.config['INITIAL_ADMIN_EMAIL'], app.config['INITIAL_ADMIN_PASSWORD'], commit=not args.dry_run)
        print(f"[OK] admin user: {admin.email}")
        if args.show_roles:
            show_roles(session)
        if args.dry_run:
            session.rollback()
            print('[DRY-RUN] changes rolled back')
    return 0


if __name__ == '__main__':
    sys.exit(main())
