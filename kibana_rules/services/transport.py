"""Synchronous HTTP transport for the Kibana API."""

import logging

import httpx

from kibana_rules.config import Settings

log = logging.getLogger(__name__)


class HttpTransport:
    """Sends raw POST/DELETE requests to Kibana and returns (status, body).

    Transport failures propagate as ``httpx.HTTPError``; status codes are
    returned as-is and left for the caller to classify.
    """

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        password: str | None = None,
        api_key: str | None = None,
        space: str | None = None,
        verify_ssl: bool = True,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        headers = {"kbn-xsrf": "true"}
        auth = None
        if api_key:
            headers["Authorization"] = f"ApiKey {api_key}"
        elif username is not None:
            auth = (username, password or "")

        self.space = space
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            auth=auth,
            verify=verify_ssl,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpTransport":
        return cls(
            settings.url,
            username=settings.username,
            password=settings.password,
            api_key=settings.api_key,
            space=settings.space,
            verify_ssl=settings.verify_ssl,
            timeout=settings.timeout,
        )

    def _path(self, path: str) -> str:
        path = path.lstrip("/")
        if self.space:
            return f"s/{self.space}/{path}"
        return path

    def _send(self, method: str, path: str, body: bytes | None) -> tuple[int, bytes]:
        headers = {"Content-Type": "application/json"} if body is not None else None
        url = self._path(path)
        log.debug("%s %s (%d bytes)", method, url, len(body or b""))
        resp = self._client.request(method, url, content=body, headers=headers)
        return resp.status_code, resp.content

    def post(self, path: str, body: bytes | None = None) -> tuple[int, bytes]:
        return self._send("POST", path, body)

    def delete(self, path: str, body: bytes | None = None) -> tuple[int, bytes]:
        return self._send("DELETE", path, body)

    def close(self):
        if not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info):
        self.close()
