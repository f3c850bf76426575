#!/usr/bin/env python3
"""
Create the `users` / `activities` tables if they don't exist yet.
Usage:
    python -m scripts.init_db
"""
import asyncio

from dotenv import load_dotenv
load_dotenv()

from services.db import engine, init_models


async def _run() -> None:
    await init_models()
    await engine().dispose()
    print("✓ tables ready")


if __name__ == "__main__":
    asyncio.run(_run())
