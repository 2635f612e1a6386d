from __future__ import annotations

import logging
from collections.abc import Iterator
from urllib.parse import urlparse

import requests
from django.conf import settings

from ..exceptions import GitHubAPIError
from .parsers import parse_commit
from .types import CommitRecord, RepositoryRef

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_SERVER_URL = "https://github.com"
API_VERSION = "2022-11-28"


def get_noreply_host(server_url: str | None = None) -> str:
    """Host used in ``<login>@users.noreply.<host>`` commit emails."""
    if server_url is None:
        server_url = getattr(settings, "GITHUB_SERVER_URL", DEFAULT_SERVER_URL)
    return urlparse(server_url).hostname or urlparse(DEFAULT_SERVER_URL).hostname


class GitHubClient:
    """Client for the pull request endpoints of the GitHub REST API."""

    def __init__(
        self,
        token: str,
        *,
        api_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.api_url = (api_url or getattr(settings, "GITHUB_API_URL", DEFAULT_API_URL)).rstrip("/")
        self.timeout = timeout or getattr(settings, "GITHUB_REQUEST_TIMEOUT", 30)
        self.per_page = getattr(settings, "GITHUB_COMMITS_PER_PAGE", 100)
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": "botreview-autoapprove",
            }
        )

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            detail = ""
            if e.response is not None:
                try:
                    body = e.response.json()
                    detail = body.get("message", "") if isinstance(body, dict) else e.response.text
                except ValueError:
                    detail = e.response.text
            message = f"GitHub API {method} {url} failed with status {status_code}"
            if detail:
                message = f"{message}: {detail}"
            raise GitHubAPIError(message, status_code=status_code) from e
        except requests.RequestException as e:
            raise GitHubAPIError(f"GitHub API {method} {url} failed: {e}") from e
        return response

    def _paginate(self, url: str, params: dict | None = None) -> Iterator[dict]:
        """Yield items from every page, following ``Link: rel="next"`` headers."""
        next_url: str | None = url
        next_params = params
        while next_url:
            response = self._request("GET", next_url, params=next_params)
            try:
                items = response.json()
            except ValueError as e:
                raise GitHubAPIError(f"GitHub API returned invalid JSON for {next_url}") from e
            if not isinstance(items, list):
                raise GitHubAPIError(f"GitHub API returned an unexpected payload for {next_url}")
            yield from items
            next_url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            next_params = None

    def list_pull_request_commits(self, repository: RepositoryRef, number: int) -> list[CommitRecord]:
        """Fetch every commit of a pull request in the API's order."""
        url = f"{self.api_url}/repos/{repository.owner}/{repository.name}/pulls/{number}/commits"
        commits = [parse_commit(entry) for entry in self._paginate(url, {"per_page": self.per_page})]
        logger.debug("Fetched %d commit(s) for %s#%s", len(commits), repository.full_name, number)
        return commits

    def approve_pull_request(self, repository: RepositoryRef, number: int, body: str) -> dict:
        """Submit an approving review."""
        url = f"{self.api_url}/repos/{repository.owner}/{repository.name}/pulls/{number}/reviews"
        response = self._request("POST", url, json={"event": "APPROVE", "body": body})
        logger.info("Submitted approving review on %s#%s", repository.full_name, number)
        try:
            return response.json()
        except ValueError:
            return {}
