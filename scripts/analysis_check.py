#!/usr/bin/env python3
"""
Analysis API verification script.

Steps:
1. Check /health on a running API.
2. Post a journal entry to /analyze with remote inference requested.
3. Post the same entry with remote inference disabled and compare moods.
"""

import asyncio
import json
import os
from typing import Any, Dict

import httpx

API_BASE = os.getenv("API_BASE", "http://localhost:8000").rstrip("/")
ENTRY_TEXT = os.getenv(
    "ANALYSIS_CHECK_TEXT",
    "Work has been a lot this week and I'm worried about the deadline tomorrow. "
    "I did manage a short walk after dinner, which helped me feel a bit calmer.",
)
HTTP_TIMEOUT = float(os.getenv("ANALYSIS_CHECK_HTTP_TIMEOUT", "90"))


def banner(label: str) -> None:
    print("\n" + "=" * 80)
    print(label)
    print("=" * 80)


async def check_health(client: httpx.AsyncClient) -> None:
    banner("STEP 1 → /health")
    response = await client.get(f"{API_BASE}/health")
    print(f"/health status: {response.status_code} {response.text}")
    if response.status_code != 200:
        raise SystemExit("API is not healthy.")


async def analyze(client: httpx.AsyncClient, use_remote: bool) -> Dict[str, Any]:
    banner(f"STEP → /analyze useHuggingFace={use_remote}")
    response = await client.post(
        f"{API_BASE}/analyze",
        json={"text": ENTRY_TEXT, "useHuggingFace": use_remote},
    )
    print(f"/analyze status: {response.status_code}")
    payload = response.json()
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    if response.status_code != 200 or not payload.get("success"):
        raise SystemExit("Analysis request failed.")
    return payload["data"]


async def main() -> None:
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT) as client:
        await check_health(client)
        remote = await analyze(client, use_remote=True)
        local = await analyze(client, use_remote=False)

    banner("STEP 3 → Comparison")
    print(f"remote mood: {remote['mood']}  |  local mood: {local['mood']}")
    print(f"remote summary length: {len(remote['summary'])}  |  local summary length: {len(local['summary'])}")


if __name__ == "__main__":
    asyncio.run(main())
