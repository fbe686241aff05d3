#!/usr/bin/env python3
"""run_demo.py — Drive a running FraudGuard server through one full session.

Usage:
    python scripts/run_demo.py              # default: http://localhost:8000
    python scripts/run_demo.py --base-url http://localhost:8000
"""

from __future__ import annotations

import argparse
import sys

import httpx

DEMO_SCENARIOS = [
    {
        "name": "Manual entry — deposit request",
        "path": "analyze/manual",
        "payload": {
            "title": "Remote Data Entry Assistant",
            "company": "Global Solutions Ltd",
            "salary": "$4,500 / week",
            "location": "Remote",
            "recruiter_email": "hiring.globalsolutions@gmail.com",
            "website": "http://global-solutions-careers.biz",
            "description": (
                "You have been selected! Pay a refundable $150 equipment deposit "
                "and send your bank details today. Interview on Telegram only."
            ),
        },
    },
    {
        "name": "Pasted e-mail — ordinary invitation",
        "path": "analyze/email",
        "payload": {
            "content": (
                "Hello, thank you for applying to the Backend Engineer role at Acme. "
                "We'd like to schedule a video interview with our team next week. "
                "Please pick a slot on careers.acme.com/schedule."
            ),
        },
    },
]


def run_demo(base_url: str) -> None:
    api = f"{base_url}/api/v1"
    print("═" * 60)
    print(" FraudGuard — Demo")
    print("═" * 60)
    print(f"Target: {base_url}\n")

    try:
        resp = httpx.get(f"{api}/health", timeout=5)
        resp.raise_for_status()
        print(f"✅ Health check: {resp.json()}\n")
    except Exception as exc:
        print(f"❌ Health check failed: {exc}")
        print("   Make sure the server is running: uvicorn fraudguard.main:app --reload")
        sys.exit(1)

    session_id = httpx.post(f"{api}/sessions", timeout=5).json()["session_id"]
    print(f"Session: {session_id}\n")

    completed = 0
    for scenario in DEMO_SCENARIOS:
        print(f"─── {scenario['name']} {'─' * max(0, 40 - len(scenario['name']))}")
        try:
            resp = httpx.post(
                f"{api}/sessions/{session_id}/{scenario['path']}",
                json=scenario["payload"],
                timeout=60,
            )
            resp.raise_for_status()
            state = resp.json()["state"]
            if state["error"]:
                print(f"  ⚠️  Error:     {state['error']}")
            else:
                result = state["result"]
                print(f"  → Verdict:    {result['result']}")
                print(f"  → Confidence: {result['confidence_score']}%")
                print(f"  → Risk:       {result['risk_rate']}% ({result['risk_level']})")
                for line in result["explanations"]:
                    print(f"    • {line}")
            completed += 1
        except Exception as exc:
            print(f"  ❌ Error: {exc}")
        httpx.post(f"{api}/sessions/{session_id}/retry", timeout=5)
        print()

    resp = httpx.post(
        f"{api}/sessions/{session_id}/chat",
        json={"message": "Is it normal to pay for training before starting a job?"},
        timeout=60,
    )
    print(f"💬 Assistant: {resp.json()['reply']}\n")

    print("═" * 60)
    print(f" Results: {completed}/{len(DEMO_SCENARIOS)} analyses completed")
    print("═" * 60)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run FraudGuard demo scenarios")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    args = parser.parse_args()
    run_demo(args.base_url)
