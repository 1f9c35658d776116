from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import MissingToken

ORIGIN = "https://nextspaceflight.com"
LAUNCHES_URL = f"{ORIGIN}/launches/"

COMMAND_PREFIX = "!"
INTERACTION_TIMEOUT = 3600
REQUEST_TIMEOUT = 20


@dataclass(frozen=True)
class Selectors:
    """CSS selectors mirroring the launches page layout.

    The page has no stable contract, so a layout change should only need
    edits here.
    """

    card: str = ".mdl-card"
    name: str = "h5.header-style"
    supporting_text: str = ".mdl-card__supporting-text"
    details_button: str = ".mdc-button"


SELECTORS = Selectors()


@dataclass(frozen=True)
class Settings:
    token: str
    prefix: str = COMMAND_PREFIX

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        token = (env.get("DISCORD_TOKEN") or "").strip()
        if not token:
            raise MissingToken("Expected a token in the environment (DISCORD_TOKEN)")
        return cls(token=token)
