from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

from bs4 import Tag

from .config import LAUNCHES_URL, SELECTORS, Selectors
from .utils import first_text, get_soup, make_soup, norm_space, text_runs

logger = logging.getLogger(__name__)

# Upstream renders e.g. "Fri Oct 17, 2025 02:00 UTC". The trailing zone
# token is required but not applied: the clock time is taken as UTC.
# The weekday must agree with the date.
TIME_FORMAT = "%a %b %d, %Y %H:%M"

SUPPORTING_TEXT_RUNS = 4
TIME_RUN = 1
SITE_RUN = 3


@dataclass(frozen=True)
class LaunchRecord:
    name: str
    scheduled_at: datetime
    site: str
    details_path: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name.strip(),
            "scheduled_at": self.scheduled_at.isoformat(),
            "site": self.site,
            "details_path": self.details_path,
        }


def parse_time(value: str) -> Optional[datetime]:
    v = norm_space(value)
    stamp, _, zone = v.rpartition(" ")
    if not stamp or not zone:
        return None
    try:
        dt = datetime.strptime(stamp, TIME_FORMAT)
    except ValueError:
        return None
    if dt.strftime("%a").lower() != stamp.split(" ", 1)[0].lower():
        return None
    return dt.replace(tzinfo=timezone.utc)


def parse_card(card: Tag, selectors: Selectors = SELECTORS) -> Optional[LaunchRecord]:
    runs = text_runs(card.select_one(selectors.supporting_text))
    if len(runs) != SUPPORTING_TEXT_RUNS:
        return None

    scheduled_at = parse_time(runs[TIME_RUN])
    if scheduled_at is None:
        return None

    name = first_text(card.select_one(selectors.name))
    if not name or not name.strip():
        return None

    site = runs[SITE_RUN]
    if not site.strip():
        return None

    button = card.select_one(selectors.details_button)
    details_path = button.get("href") if button is not None else None
    if not details_path:
        return None

    return LaunchRecord(name=name, scheduled_at=scheduled_at, site=site, details_path=details_path)


def parse_launches(markup: Union[str, bytes], selectors: Selectors = SELECTORS) -> List[LaunchRecord]:
    soup = make_soup(markup)
    return _collect(soup.select(selectors.card), selectors)


def fetch_launches(url: str = LAUNCHES_URL) -> List[LaunchRecord]:
    soup = get_soup(url)
    return _collect(soup.select(SELECTORS.card), SELECTORS)


def _collect(cards: List[Tag], selectors: Selectors) -> List[LaunchRecord]:
    rows: List[LaunchRecord] = []
    for card in cards:
        record = parse_card(card, selectors)
        if record is not None:
            rows.append(record)
    dropped = len(cards) - len(rows)
    if dropped:
        logger.debug("Dropped %d of %d launch cards that did not parse", dropped, len(cards))
    logger.info("Parsed %d upcoming launches", len(rows))
    return rows


if __name__ == "__main__":
    data = fetch_launches()
    print(json.dumps([r.to_dict() for r in data], ensure_ascii=False, indent=2))
    print(f"Fetched {len(data)} upcoming launches")
