"""Lightweight REST client for the orgcheck API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the orgcheck REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("employees", type=Path, nargs="?", help="Employees CSV")
    parser.add_argument("--max-managers", type=int, default=None, help="Override the reporting-line limit")
    parser.add_argument("--min-factor", type=float, default=None, help="Override the minimum salary factor")
    parser.add_argument("--max-factor", type=float, default=None, help="Override the maximum salary factor")
    parser.add_argument("--show-config", action="store_true", help="Print the server configuration and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.show_config:
            resp = client.get("/config")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if not args.employees:
            raise SystemExit("employees CSV is required unless --show-config is given")

        data: dict[str, str] = {}
        if args.max_managers is not None:
            data["max_managers_to_root"] = str(args.max_managers)
        if args.min_factor is not None:
            data["min_salary_factor"] = str(args.min_factor)
        if args.max_factor is not None:
            data["max_salary_factor"] = str(args.max_factor)

        with args.employees.open("rb") as f:
            files = {"employees": (args.employees.name, f, "text/csv")}
            resp = client.post("/analyze", data=data, files=files)
        if resp.status_code in (400, 422):
            raise SystemExit(f"analysis failed: {json.dumps(resp.json().get('detail'), indent=2)}")
        resp.raise_for_status()
        print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
