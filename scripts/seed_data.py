#!/usr/bin/env python3
"""
Seed script: registers users and posts ads through the public API (no direct DB).
Run with the API up:
  python scripts/seed_data.py
  python scripts/seed_data.py --users 50 --ads-per-user 20
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000/api/v1"

TITLES = [
    "Mountain bike", "Road bike", "Mechanical keyboard", "Wireless mouse", "Bluetooth headphones",
    "Monitor 27 inch", "HD webcam", "Bluetooth speaker", "Phone charger", "USB C cable",
    "Laptop stand", "Water filter", "Coffee maker", "Sewing machine", "Blender",
    "Python book", "Web design book", "Smart watch", "Tablet", "Power bank",
    "External drive", "Memory card", "Backpack", "Laptop bag", "Drawing tablet",
    "Ring light", "Tripod", "Green screen", "Streaming mic", "Webcam 4K",
]

DESCRIPTIONS = [
    "Good for work and study. Great condition.",
    "Works with Windows and Mac. Light and sturdy.",
    "Barely used, original box included.",
    "Ergonomic and comfortable for long sessions.",
    "Long battery life and fast charging.",
    "Great for home office and remote work.",
    "High quality build and reliable performance.",
]

PRICES = [5, 19.99, 49, 99, 199, 499, 999, 1999]


def random_title() -> str:
    return random.choice(TITLES) + (" " + str(random.randint(1, 999)) if random.random() > 0.5 else "")


def random_ad() -> dict:
    title = random_title()
    return {
        "title": title,
        "description": random.choice(DESCRIPTIONS),
        "image_url": f"https://images.example.com/{title.lower().replace(' ', '-')}.jpg",
        "price": random.choice(PRICES),
    }


def main():
    ap = argparse.ArgumentParser(description="Seed users and ads via API")
    ap.add_argument("--users", type=int, default=20, help="Number of users to create")
    ap.add_argument("--ads-per-user", type=int, default=10, help="Ads per user")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created_ads = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Registering {args.users} users...")
        logins = []
        for i in range(args.users):
            login, password = f"seeduser{i + 1}", "password123"
            r = client.post("/auth/register", json={"login": login, "password": password})
            if r.status_code in (201, 409):
                # 409: already seeded earlier, same credentials still work
                logins.append((login, password))
            else:
                errors.append(f"Register {login}: {r.status_code} {r.text[:80]}")

        print(f"Posting ~{len(logins) * args.ads_per_user} ads...")
        for login, password in logins:
            r = client.post("/auth/login", json={"login": login, "password": password})
            if r.status_code != 200:
                errors.append(f"Login {login}: {r.status_code}")
                continue
            headers = {"Authorization": f"Bearer {r.json()['token']}"}
            for _ in range(args.ads_per_user):
                r2 = client.post("/ads", headers=headers, json=random_ad())
                if r2.status_code == 201:
                    created_ads += 1
                else:
                    errors.append(f"Ad for {login}: {r2.status_code} {r2.text[:80]}")

    print(f"\nDone. Users: {len(logins)}, Ads created: {created_ads}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
