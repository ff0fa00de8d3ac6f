"""Lightweight REST client for the cricketroster API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


PLAYER_FIELDS = ("ID", "NAME", "ROLE", "MATCHES", "STAT")


def build_player(values: list[str]) -> dict[str, object]:
    player_id, name, role, matches, stat = values
    try:
        return {
            "player_id": int(player_id),
            "name": name,
            "role": role,
            "matches_played": int(matches),
            "stat_value": int(stat),
        }
    except ValueError as exc:
        raise SystemExit("Please enter valid numeric values.") from exc


def _print_roster(payload: dict) -> None:
    print(f"Players (top -> bottom): {payload['matched']}/{payload['total']}")
    for player in payload["players"]:
        print(
            f"{player['player_id']:>5}  {player['name']:<24} {player['role']:<14} "
            f"{player['matches_played']:>4}  {player['stat_value']} {player['stat_label']}"
        )


def _report(resp: httpx.Response) -> None:
    if resp.status_code in (404, 409, 422):
        detail = resp.json().get("detail")
        raise SystemExit(detail if isinstance(detail, str) else json.dumps(detail))
    resp.raise_for_status()
    print(resp.json()["message"])


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the cricketroster REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--list", action="store_true", help="Print the roster top to bottom")
    parser.add_argument("--search", metavar="QUERY", help="Print players whose id or name contains QUERY")
    parser.add_argument("--add", nargs=5, metavar=PLAYER_FIELDS, help="Push a player onto the roster")
    parser.add_argument("--pop", action="store_true", help="Remove the most recently added player")
    parser.add_argument("--reset", action="store_true", help="Remove every player from the roster")
    parser.add_argument("--update", nargs=5, metavar=PLAYER_FIELDS, help="Update the player with ID")
    parser.add_argument("--delete", type=int, metavar="ID", help="Delete the player with ID")
    parser.add_argument("--export", type=Path, metavar="PATH", help="Save the roster as CSV")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.reset:
            _report(client.delete("/players"))
        if args.add:
            _report(client.post("/players", json=build_player(args.add)))
        if args.update:
            body = build_player(args.update)
            player_id = body.pop("player_id")
            _report(client.put(f"/players/{player_id}", json=body))
        if args.delete is not None:
            _report(client.delete(f"/players/{args.delete}"))
        if args.pop:
            _report(client.post("/players/pop"))
        if args.export:
            resp = client.get("/players/export.csv", params={"q": args.search} if args.search else None)
            resp.raise_for_status()
            args.export.write_text(resp.text, encoding="utf-8")
            print(f"CSV export saved to {args.export}")
        if args.list or args.search:
            resp = client.get("/players", params={"q": args.search} if args.search else None)
            resp.raise_for_status()
            _print_roster(resp.json())


if __name__ == "__main__":
    main()
