"""Outbound call from App2 to App1."""

import requests


class DependencyCallError(Exception):
    """Raised when App1 could not be reached or returned an unusable response."""


class App1Client:
    """Fetches App1's identity payload from a fixed base URL.

    One GET per call. No retries and no timeout beyond the requests default.
    """

    def __init__(self, base_url):
        self.base_url = base_url

    def fetch_identity(self):
        """Return App1's decoded JSON object.

        Raises:
            DependencyCallError: On connection errors, unparseable target
                URLs, non-2xx statuses and bodies that are not a JSON object.
        """
        try:
            response = requests.get(self.base_url)
            response.raise_for_status()
            body = response.json()
        # urllib3 raises LocationParseError, a ValueError, for malformed host names
        except (requests.RequestException, ValueError) as error:
            raise DependencyCallError(str(error) or type(error).__name__) from error

        if not isinstance(body, dict):
            raise DependencyCallError(f"Expected a JSON object from App1, got {body!r}")
        return body
