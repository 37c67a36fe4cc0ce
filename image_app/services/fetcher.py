from __future__ import annotations

import random
from typing import Optional, Sequence

import requests

from core.exceptions import UpstreamFetchFailure
from core.logging import configure_logger

from ..common.constants import (
    BROWSER_EXTRA_HEADERS,
    SEARCH_PARAMS,
    SEARCH_QUALIFIER,
    SEARCH_URL,
    USER_AGENTS,
)

logger = configure_logger(__name__)


def download_html(url: str, *, params: dict, user_agent: str, timeout: Optional[float]) -> str:
    headers = dict(BROWSER_EXTRA_HEADERS)
    headers["User-Agent"] = user_agent

    try:
        response = requests.get(
            url,
            params=params,
            headers=headers,
            timeout=timeout,
            allow_redirects=True,
        )
    except requests.RequestException as exc:
        raise UpstreamFetchFailure(f"Request to {url} failed: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise UpstreamFetchFailure(f"Status: {response.status_code}")
    return response.text


class SearchPageFetcher:
    """Fetches the image-search results page for an item name."""

    def __init__(
        self,
        *,
        search_url: str = SEARCH_URL,
        qualifier: str = SEARCH_QUALIFIER,
        user_agents: Sequence[str] = USER_AGENTS,
        timeout: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.search_url = search_url
        self.qualifier = qualifier
        self.user_agents = tuple(user_agents)
        self.timeout = timeout
        self._rng = rng or random.Random()

    def build_query(self, name: str) -> str:
        return f"{name} {self.qualifier}".strip()

    def pick_user_agent(self) -> str:
        return self._rng.choice(self.user_agents)

    def fetch(self, name: str) -> Optional[str]:
        """Return the raw results HTML, or ``None`` on any upstream failure."""
        params = dict(SEARCH_PARAMS)
        params["q"] = self.build_query(name)
        user_agent = self.pick_user_agent()

        logger.info("[Fetching] %s q=%s", self.search_url, params["q"])
        logger.debug("[User-Agent] %s", user_agent)
        try:
            return download_html(
                self.search_url,
                params=params,
                user_agent=user_agent,
                timeout=self.timeout,
            )
        except UpstreamFetchFailure as exc:
            logger.error("[Fetch Error] %s: %s", name, exc)
            return None
