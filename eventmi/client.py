"""Form-encoded HTTP client for the /Event pages.

Works against the in-process app (FastAPI TestClient, or httpx with an
ASGITransport) and against a running server:

    with EventmiClient.connect("https://localhost:7236", verify=False) as client:
        response = client.add(form)
        assert response.status_code == 200
"""
from typing import Any, Mapping, Union

import httpx

from .forms import EventFormModel

FormPayload = Union[EventFormModel, Mapping[str, Any]]


def encode_form(form: FormPayload) -> dict[str, str]:
    """Turn a form model or a mapping of wire fields into POST data.

    Mappings are sent as given (None values dropped), which allows
    deliberately partial or invalid payloads.
    """
    if isinstance(form, EventFormModel):
        return form.to_form_data()
    return {key: str(value) for key, value in form.items() if value is not None}


class EventmiClient:
    """Synchronous client over an httpx.Client.

    Redirects are followed by default, so a successful Add/Edit/Delete
    reports the status of the page it lands on.
    """

    def __init__(self, http: httpx.Client, follow_redirects: bool = True):
        self.http = http
        self.follow_redirects = follow_redirects

    @classmethod
    def connect(cls, base_url: str, verify: bool = True, timeout: float = 30.0) -> "EventmiClient":
        """Create a client for a running server."""
        return cls(httpx.Client(base_url=base_url, verify=verify, timeout=timeout))

    def _get(self, path: str) -> httpx.Response:
        return self.http.get(path, follow_redirects=self.follow_redirects)

    def _post(self, path: str, data: dict | None = None) -> httpx.Response:
        return self.http.post(path, data=data, follow_redirects=self.follow_redirects)

    def list_events(self) -> httpx.Response:
        return self._get("/Event/All")

    def add_form(self) -> httpx.Response:
        return self._get("/Event/Add")

    def add(self, form: FormPayload) -> httpx.Response:
        return self._post("/Event/Add", encode_form(form))

    def details(self, event_id: int) -> httpx.Response:
        return self._get(f"/Event/Details/{event_id}")

    def edit_form(self, event_id: int) -> httpx.Response:
        return self._get(f"/Event/Edit/{event_id}")

    def edit(self, event_id: int, form: FormPayload) -> httpx.Response:
        return self._post(f"/Event/Edit/{event_id}", encode_form(form))

    def delete(self, event_id: int) -> httpx.Response:
        return self._post(f"/Event/Delete/{event_id}")

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "EventmiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncEventmiClient:
    """Asynchronous client over an httpx.AsyncClient.

    Each call awaits a single request; nothing is batched.
    """

    def __init__(self, http: httpx.AsyncClient, follow_redirects: bool = True):
        self.http = http
        self.follow_redirects = follow_redirects

    @classmethod
    def connect(cls, base_url: str, verify: bool = True, timeout: float = 30.0) -> "AsyncEventmiClient":
        """Create a client for a running server."""
        return cls(httpx.AsyncClient(base_url=base_url, verify=verify, timeout=timeout))

    async def _get(self, path: str) -> httpx.Response:
        return await self.http.get(path, follow_redirects=self.follow_redirects)

    async def _post(self, path: str, data: dict | None = None) -> httpx.Response:
        return await self.http.post(path, data=data, follow_redirects=self.follow_redirects)

    async def list_events(self) -> httpx.Response:
        return await self._get("/Event/All")

    async def add_form(self) -> httpx.Response:
        return await self._get("/Event/Add")

    async def add(self, form: FormPayload) -> httpx.Response:
        return await self._post("/Event/Add", encode_form(form))

    async def details(self, event_id: int) -> httpx.Response:
        return await self._get(f"/Event/Details/{event_id}")

    async def edit_form(self, event_id: int) -> httpx.Response:
        return await self._get(f"/Event/Edit/{event_id}")

    async def edit(self, event_id: int, form: FormPayload) -> httpx.Response:
        return await self._post(f"/Event/Edit/{event_id}", encode_form(form))

    async def delete(self, event_id: int) -> httpx.Response:
        return await self._post(f"/Event/Delete/{event_id}")

    async def close(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "AsyncEventmiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
