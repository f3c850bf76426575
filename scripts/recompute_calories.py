"""
scripts/recompute_calories.py
────────────────────────────────────────────────────────────────────────
Re-run the calorie engine over stored activities, e.g. after a user fixes
their weight or the MET table changes.

    python -m scripts.recompute_calories              # every user
    python -m scripts.recompute_calories --user 123   # one user
    python -m scripts.recompute_calories --dry-run    # report only
"""
from __future__ import annotations

import asyncio
from argparse import ArgumentParser

from dotenv import load_dotenv
load_dotenv()

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.calorie_calc import CalorieCalculator
from services.db import Activity, User, session_factory

calc = CalorieCalculator()


async def recompute_for_user(db: AsyncSession, user: User, dry_run: bool = False) -> int:
    """Return how many of `user`'s activities changed."""
    if not user.weight_kg:
        print(f"· user {user.id}: no weight on profile – skipped")
        return 0

    rows = (
        await db.execute(select(Activity).where(Activity.user_id == user.id))
    ).scalars().all()

    changed = 0
    for act in rows:
        res = calc.estimate_activity_calories(
            act.type, user.weight_kg, act.duration, act.distance
        )
        if (res.calories_burned, res.met_value) == (act.calories_burned, act.met_value):
            continue
        changed += 1
        if not dry_run:
            act.calories_burned = res.calories_burned
            act.met_value = res.met_value

    if not dry_run:
        await db.commit()
    print(f"✓ user {user.id}: {changed}/{len(rows)} activities updated{' (dry run)' if dry_run else ''}")
    return changed


async def main(user_id: int | None = None, dry_run: bool = False) -> int:
    total = 0
    async with session_factory()() as db:
        stmt = select(User)
        if user_id is not None:
            stmt = stmt.where(User.id == user_id)
        users = (await db.execute(stmt)).scalars().all()
        if not users:
            print("No matching users")
            return 0
        for u in users:
            total += await recompute_for_user(db, u, dry_run=dry_run)
    return total


if __name__ == "__main__":
    ap = ArgumentParser(description="Recompute MET and calories for stored activities")
    ap.add_argument("--user", type=int, help="only this user id")
    ap.add_argument("--dry-run", action="store_true", help="report without writing")
    args = ap.parse_args()
    asyncio.run(main(args.user, args.dry_run))
