from __future__ import annotations

from typing import Optional

import requests
from typing_extensions import Protocol, override

from ._errors import FetchFailedError


class Transport(Protocol):
    def fetch(self, url: str) -> str:
        """GET `url` and return the response body as text.

        Raises:
            FetchFailedError: On connection errors, timeouts, and non-2xx
                responses.
        """
        ...


class RequestsTransport(Transport):
    """Transport backed by `requests`.

    Args:
        timeout: Seconds to wait for the connection and for each read. Icon
            resolution blocks until the request finishes, so this should
            always be bounded.
        session: Optional session to reuse connections across fetches.
    """

    def __init__(
        self, timeout: float = 30.0, session: Optional[requests.Session] = None
    ) -> None:
        self.timeout = timeout
        self._session = session

    @override
    def fetch(self, url: str) -> str:
        get = self._session.get if self._session is not None else requests.get
        try:
            response = get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise FetchFailedError(url, f"timed out after {self.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            raise FetchFailedError(
                url, f"status {e.response.status_code} from {url}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise FetchFailedError(url, str(e)) from e

        # The API serves SVG as UTF-8 but doesn't always declare a charset, in
        # which case `requests` would guess ISO-8859-1.
        if response.encoding is None or "charset" not in response.headers.get(
            "Content-Type", ""
        ):
            response.encoding = "utf-8"
        return response.text
