from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Union

import requests
from bs4 import BeautifulSoup, Tag

from .config import REQUEST_TIMEOUT
from .errors import UpstreamUnavailable


@dataclass
class FetchResult:
    url: str
    status_code: int
    content: bytes


def fetch(url: str, *, timeout: int = REQUEST_TIMEOUT) -> FetchResult:
    """Single GET, no retries. Transport and HTTP errors become UpstreamUnavailable."""
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise UpstreamUnavailable(f"{type(exc).__name__} fetching {url}") from exc
    if resp.status_code >= 400:
        raise UpstreamUnavailable(f"HTTP {resp.status_code} fetching {url}")
    return FetchResult(url=url, status_code=resp.status_code, content=resp.content)


def make_soup(markup: Union[str, bytes]) -> BeautifulSoup:
    return BeautifulSoup(markup, "lxml")


def get_soup(url: str) -> BeautifulSoup:
    return make_soup(fetch(url).content)


def norm_space(s: str) -> str:
    return re.sub(r"\s+", " ", s).strip()


def text_runs(el: Optional[Tag]) -> List[str]:
    # Every text node under the element, in document order, unmodified.
    if el is None:
        return []
    return [str(s) for s in el.strings]


def first_text(el: Optional[Tag]) -> Optional[str]:
    if el is None:
        return None
    return next((str(s) for s in el.strings), None)
