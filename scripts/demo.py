#!/usr/bin/env python3
"""
Demo script for the people API.

Walks through every endpoint against a running instance:

    python -m people_api.api.app      # in another terminal
    python scripts/demo.py [base_url]
"""

import sys

import httpx

DEFAULT_BASE_URL = "http://localhost:8000"


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def show(response: httpx.Response) -> None:
    """Print status and body of a response."""
    body = response.text or "<empty>"
    print(f"  {response.request.method} {response.request.url.path} -> {response.status_code}: {body}")


def demo_save(client: httpx.Client) -> list[int]:
    """Store a few people, including invalid ones."""
    print_section("Saving people")

    ids = []
    for name in ["Name", "Sabo", "Luffy"]:
        response = client.post("/api/people", json={"name": name})
        show(response)
        ids.append(response.json()["id"])

    print("\n  Invalid payloads are rejected with every violation:")
    for name in ["", None, "Name___greater___30___characters"]:
        show(client.post("/api/people", json={"name": name}))

    return ids


def demo_read(client: httpx.Client, ids: list[int]) -> None:
    """List and look people up."""
    print_section("Reading people")

    show(client.get("/api/people"))
    show(client.get(f"/api/people/{ids[0]}"))
    show(client.get("/api/people/firstByName/Sabo"))
    show(client.get("/api/people/1000000"))
    show(client.get("/api/people/not-a-number"))


def demo_delete(client: httpx.Client, ids: list[int]) -> None:
    """Delete what was stored."""
    print_section("Deleting people")

    for person_id in ids:
        show(client.delete(f"/api/people/{person_id}"))
    show(client.delete(f"/api/people/{ids[0]}"))


def main() -> None:
    """Run all demos."""
    base_url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BASE_URL

    with httpx.Client(base_url=base_url, timeout=10.0) as client:
        try:
            show(client.get("/health"))
        except httpx.ConnectError:
            print(f"Cannot reach {base_url}. Start it with: python -m people_api.api.app")
            sys.exit(1)

        ids = demo_save(client)
        demo_read(client, ids)
        demo_delete(client, ids)

    print_section("Demo complete")


if __name__ == "__main__":
    main()
