import requests
from loguru import logger

from kubesite.errors import FetchError

USER_AGENT = "kubesite-sync"


class UpstreamClient:
    """Downloads raw files over HTTP, following redirects and failing on error status."""

    def __init__(self, timeout: float = 30.0, session=None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", USER_AGENT)

    def fetch(self, url: str) -> str:
        """Return the body of url as text."""
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, timeout=self.timeout, allow_redirects=True)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise FetchError(url, f"HTTP {status}") from e
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e
        # raw.githubusercontent.com serves text/plain without a charset
        response.encoding = "utf-8"
        return response.text

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
