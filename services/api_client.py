"""
Client for the shop's REST backend.

Each method performs exactly one HTTP request and never raises for backend
or network trouble: every outcome comes back as an ApiResult, with a
human-readable message on failure.
"""
from dataclasses import dataclass, field
from typing import Optional

import requests

GENERIC_ERROR = 'error_generic'


@dataclass
class ApiResult:
    """Outcome of one backend call."""
    ok: bool
    data: dict = field(default_factory=dict)
    message: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, data, status_code=200):
        return cls(ok=True, data=data, status_code=status_code)

    @classmethod
    def failure(cls, message, status_code=None):
        return cls(ok=False, message=message, status_code=status_code)


class BackendClient:
    def __init__(self, base_url, token=None, timeout=15, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {'Accept': 'application/json'}
        if token:
            self.headers['Authorization'] = f"Bearer {token}"

    def submit(self, kind, payload, record_id=None):
        """Create a new record, or update record_id when given"""
        if record_id:
            return self.update(kind, record_id, payload)
        return self.create(kind, payload)

    def create(self, kind, payload):
        return self._request('POST', kind.endpoint, kind.message('submit_failed'), json=payload)

    def update(self, kind, record_id, payload):
        return self._request('PUT', f"{kind.endpoint}/{record_id}", kind.message('submit_failed'),
                             json=payload)

    def list_records(self, kind, admin=False, page=1, **filters):
        """Fetch one page of records; empty filters are left out of the query"""
        endpoint = kind.list_endpoints['all' if admin else 'mine']
        params = {'page': page}
        params.update({name: value for name, value in filters.items() if value not in (None, '')})
        return self._request('GET', endpoint, kind.message('fetch_failed'), params=params)

    def delete_record(self, kind, record_id, admin=False):
        if not kind.deletable:
            raise PermissionError(f"{kind.name} records cannot be deleted from the portal")
        endpoint = kind.delete_endpoints['all' if admin else 'mine'].format(id=record_id)
        return self._request('DELETE', endpoint, kind.message('delete_failed'))

    def _request(self, method, path, fallback_message=GENERIC_ERROR, **kwargs):
        url = f"{self.base_url}{path}"
        print(f"[Backend] {method} {path}")

        try:
            response = self.session.request(method, url, headers=self.headers,
                                            timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            print(f"[Backend] {method} {path} failed: {e}")
            return ApiResult.failure(fallback_message)

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.ok:
            print(f"[Backend] {method} {path} -> {response.status_code}")
            return ApiResult.failure(extract_message(body) or fallback_message,
                                     status_code=response.status_code)

        if not isinstance(body, dict):
            print(f"[Backend] {method} {path} returned a malformed body")
            return ApiResult.failure(fallback_message, status_code=response.status_code)

        if body.get('success') is False:
            return ApiResult.failure(extract_message(body) or fallback_message,
                                     status_code=response.status_code)

        return ApiResult.success(body, status_code=response.status_code)


def extract_message(body):
    if isinstance(body, dict):
        message = body.get('message')
        if isinstance(message, str) and message.strip():
            return message
    return None
