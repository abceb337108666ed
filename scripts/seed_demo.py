#!/usr/bin/env python3
"""Seed the database with a demo user who has asked for support.

Usage:
    python scripts/seed_demo.py
"""

import asyncio
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from hintline.common.config import get_settings
from hintline.common.database import DatabaseManager
from hintline.common.security import Role, create_access_token
from hintline.support.models import ProgressStatus, UserModel
from hintline.support.store import SupportRecordStore

DEMO_USER_ID = "demo-user"
DEMO_SPECIALIST_ID = "demo-specialist"


async def seed_demo() -> None:
    settings = get_settings()
    db = DatabaseManager(settings)
    await db.init()
    await db.create_all()

    store = SupportRecordStore()

    async with db.get_session() as session:
        if await session.get(UserModel, DEMO_USER_ID):
            print(f"  [skip] {DEMO_USER_ID} already exists")
        else:
            await store.create_user(session, "demo", user_id=DEMO_USER_ID)
            await store.record_progress(
                session, DEMO_USER_ID, "step-1", ProgressStatus.DONE,
            )
            await store.record_progress(
                session, DEMO_USER_ID, "step-2", ProgressStatus.DONE,
            )
            await store.record_progress(
                session, DEMO_USER_ID, "step-3", ProgressStatus.STUCK,
                puzzle_id="lever-room", details={"attempts": 4},
            )
            await store.open_support_request(session, DEMO_USER_ID)
            print(f"  [created] {DEMO_USER_ID} with an open support request")

    await db.close()

    print("\nTokens:")
    print(f"  user:       {create_access_token(DEMO_USER_ID, Role.USER, settings)}")
    print(f"  specialist: {create_access_token(DEMO_SPECIALIST_ID, Role.SUPPORT_SPECIALIST, settings)}")


if __name__ == "__main__":
    asyncio.run(seed_demo())
