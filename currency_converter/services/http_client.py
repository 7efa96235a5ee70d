from __future__ import annotations

"""Thin HTTP helper around httpx.

Focus: one GET returning decoded JSON. No retries; callers decide what a
failure means for them.
"""
from typing import Any, Mapping, Optional

import httpx


class HttpError(Exception):
    pass


def make_client(timeout: Optional[float] = None) -> httpx.Client:
    # timeout=None disables every httpx timeout
    return httpx.Client(timeout=timeout)


def get_json(
    client: httpx.Client,
    url: str,
    *,
    params: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Any:
    try:
        resp = client.get(url, params=params, headers=headers)
    except httpx.HTTPError as e:
        raise HttpError(f"Request to {url} failed: {e}") from e
    if resp.status_code >= 400:
        raise HttpError(f"HTTP {resp.status_code} for {resp.request.url}")
    try:
        return resp.json()
    except ValueError as e:  # JSON decode
        raise HttpError(f"Invalid JSON from {resp.request.url}: {e}") from e
