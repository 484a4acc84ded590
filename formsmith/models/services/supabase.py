"""
Supabase collaborators over plain HTTP.

Auth goes through GoTrue (/auth/v1/user), rows through PostgREST (/rest/v1/*).
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

import httpx

from .base import AuthService, FormStore, AuthError, StoreError
from formsmith.pipeline.generation.types import Identity, QuestionRow

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """PostgREST and GoTrue both put a human readable message in the JSON body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            if isinstance(body.get(key), str) and body[key]:
                return body[key]
    return response.text or f"HTTP {response.status_code}"


class _SupabaseHTTP:
    def __init__(self, base_url: str, api_key: str, timeout: float = 20.0, client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.client = client or httpx.Client(timeout=timeout)

    def _headers(self, bearer: str, **extra: str) -> Dict[str, str]:
        return {"apikey": self.api_key, "Authorization": f"Bearer {bearer}", **extra}


class SupabaseAuth(_SupabaseHTTP, AuthService):
    def verify_identity(self, credential: str) -> Identity:
        try:
            response = self.client.get(
                f"{self.base_url}/auth/v1/user",
                headers=self._headers(credential),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise AuthError(f"Auth request failed: {e}") from e

        if response.status_code != 200:
            raise AuthError(_error_message(response))

        try:
            user = response.json()
        except ValueError as e:
            raise AuthError(f"Undecodable auth response: {e}") from e

        user_id = user.get("id") if isinstance(user, dict) else None
        if not user_id:
            raise AuthError("No user returned for credential")
        return Identity(id=str(user_id), email=user.get("email"))


class SupabaseStore(_SupabaseHTTP, FormStore):
    """
    forms/questions tables via PostgREST.

    Requests authenticate as access_token when bound to a user (row level
    security applies), otherwise as the api key itself.
    """

    def __init__(self, base_url: str, api_key: str, access_token: Optional[str] = None, timeout: float = 20.0, client: Optional[httpx.Client] = None):
        super().__init__(base_url, api_key, timeout=timeout, client=client)
        self.access_token = access_token

    def bind(self, credential: str) -> SupabaseStore:
        return SupabaseStore(self.base_url, self.api_key, access_token=credential, timeout=self.timeout, client=self.client)

    def _post(self, table: str, payload: Any, prefer: str, params: Optional[Dict[str, str]] = None) -> httpx.Response:
        try:
            response = self.client.post(
                f"{self.base_url}/rest/v1/{table}",
                json=payload,
                params=params,
                headers=self._headers(self.access_token or self.api_key, Prefer=prefer),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise StoreError(f"Store request failed: {e}") from e

        if response.status_code >= 400:
            raise StoreError(_error_message(response))
        return response

    def insert_form(self, title: str, owner_id: str) -> str:
        response = self._post(
            "forms",
            {"title": title, "user_id": owner_id},
            prefer="return=representation",
            params={"select": "id"},
        )
        try:
            rows = response.json()
        except ValueError as e:
            raise StoreError(f"Undecodable insert response: {e}") from e

        row = rows[0] if isinstance(rows, list) and rows else rows
        form_id = row.get("id") if isinstance(row, dict) else None
        if form_id is None:
            raise StoreError("Insert failed.")
        return str(form_id)

    def insert_questions(self, rows: List[QuestionRow]) -> None:
        self._post("questions", [row.to_record() for row in rows], prefer="return=minimal")
        logger.debug(f"Inserted {len(rows)} question rows")
