#!/usr/bin/env python3
"""Smoke script for the reservations API against a running server."""

import sys

import httpx


BASE_URL = "http://127.0.0.1:8001"


def check_add_location(name: str) -> bool:
    """Add a destination and print the resulting table."""
    print("=" * 60)
    print("Testing POST /api/v1/locations")
    print("=" * 60)

    try:
        response = httpx.post(
            f"{BASE_URL}/api/v1/locations",
            json={"location_name": name},
            timeout=10.0
        )
        response.raise_for_status()

        data = response.json()
        print(f"✅ Success! {data['summary']['destination_count']} destinations:\n")
        for item in data["locations"]:
            slots = ", ".join(
                f"{s['time']}{' (booked)' if s['booked'] else ''}" for s in item["time_slots"]
            )
            print(f"  {item['location_name']}: {slots}")
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False
    except Exception as e:
        print(f"❌ Error: {e}")
        return False


def check_toggle(name: str, slot_time: str) -> bool:
    """Toggle one slot and print the booked destinations."""
    print("\n" + "=" * 60)
    print(f"Testing POST /api/v1/locations/{name}/slots/toggle")
    print("=" * 60)

    try:
        response = httpx.post(
            f"{BASE_URL}/api/v1/locations/{name}/slots/toggle",
            json={"time": slot_time},
            timeout=10.0
        )
        response.raise_for_status()

        data = response.json()
        print(f"✅ Success! Booked destinations ({data['summary']['booked_count']}):")
        for row in data["booked"]:
            print(f"  {row['location_name']} - {row['time']}")
        return True
    except httpx.HTTPStatusError as e:
        print(f"❌ HTTP Error: {e.response.status_code}")
        print(f"Response: {e.response.text}")
        return False
    except Exception as e:
        print(f"❌ Error: {e}")
        return False


def main():
    """Run all checks."""
    print("\n🚀 Testing Reservations API\n")

    # Check if server is running
    try:
        httpx.get(f"{BASE_URL}/health", timeout=5.0)
        print("✅ Server is running\n")
    except Exception:
        print("❌ Server is not running!")
        print(f"   Please start it with: uvicorn app.main:app --reload --port 8001")
        sys.exit(1)

    name = sys.argv[1] if len(sys.argv) > 1 else "Banff"
    if check_add_location(name):
        check_toggle(name, "9am-12pm")

    print("\n" + "=" * 60)
    print("✅ Checks complete!")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
