#!/usr/bin/env python3
"""Print a subject's effective permissions from a running service.

Usage:
  export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
  export KEYCLOAK_USERNAME=... KEYCLOAK_PASSWORD=...
  python scripts/show_permissions.py <tenant_id> <subject_id> [--only-granted]

Without KEYCLOAK_USERNAME the request is sent anonymously (service running
without Keycloak).
"""
from __future__ import annotations

import argparse
import os
import sys

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def main() -> int:
    parser = argparse.ArgumentParser(description="Show effective permissions")
    parser.add_argument("tenant_id")
    parser.add_argument("subject_id")
    parser.add_argument("--only-granted", action="store_true", help="Hide denied permissions")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    headers = {}
    username = os.environ.get("KEYCLOAK_USERNAME")
    if username:
        token = get_token(
            os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
            os.environ.get("KEYCLOAK_REALM", "gdpr"),
            os.environ.get("KEYCLOAK_CLIENT_ID", "gdpr-authz"),
            os.environ.get("KEYCLOAK_CLIENT_SECRET", ""),
            username,
            os.environ.get("KEYCLOAK_PASSWORD", ""),
        )
        headers["Authorization"] = f"Bearer {token}"

    url = f"{api_url}/v1/tenants/{args.tenant_id}/subjects/{args.subject_id}/effective-permissions"
    try:
        r = httpx.get(url, headers=headers, timeout=30.0)
        r.raise_for_status()
    except httpx.HTTPError as e:
        print(f"Request failed: {e}", file=sys.stderr)
        return 1

    data = r.json()
    role = data["role"] or "(no membership)"
    print(f"subject={data['subject']} tenant={data['tenant']} role={role} wildcard={data['wildcard']}")
    for pid, granted in sorted(data["permissions"].items()):
        if args.only_granted and not granted:
            continue
        print(f"  {'+' if granted else '-'} {pid}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
