"""Look up the latest published goi release.

Wraps the GitHub "latest release" endpoint with httpx.  Only the release tag
is read; downloading and installing binaries is left to the user.
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel, Field

from goi import __version__
from goi.config import DEFAULT_RELEASE_API_URL
from goi.errors import ReleaseCheckError


class ReleaseInfo(BaseModel):
    """Result of comparing the running version with the latest release."""

    current: str = Field(default=__version__)
    latest: str
    url: str = Field(default="", description="Release page, if the API returned one")

    @property
    def update_available(self) -> bool:
        return _normalise(self.latest) != _normalise(self.current)


def _normalise(version: str) -> str:
    return version.strip().removeprefix("v")


async def fetch_latest_release(
    api_url: str = DEFAULT_RELEASE_API_URL,
    timeout: int = 10,
    current: str = __version__,
) -> ReleaseInfo:
    """Fetch the ``tag_name`` of the latest release.

    Raises:
        ReleaseCheckError: On connection errors, timeouts, non-2xx responses
            or a payload without ``tag_name``.
    """
    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=5.0),
            headers={"Accept": "application/vnd.github+json"},
            follow_redirects=True,
        ) as client:
            response = await client.get(api_url)
            response.raise_for_status()
            data = response.json()
    except httpx.TimeoutException as exc:
        raise ReleaseCheckError(f"release lookup timed out after {timeout}s") from exc
    except httpx.HTTPStatusError as exc:
        raise ReleaseCheckError(
            f"release lookup returned HTTP {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        raise ReleaseCheckError(f"cannot reach {api_url}: {exc}") from exc
    except ValueError as exc:
        raise ReleaseCheckError(f"failed to parse the JSON response: {exc}") from exc

    tag = data.get("tag_name") if isinstance(data, dict) else None
    if not tag:
        raise ReleaseCheckError("release response has no tag_name")
    return ReleaseInfo(current=current, latest=tag, url=data.get("html_url") or "")
