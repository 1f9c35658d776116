from __future__ import annotations

import pytest

from launchbot.config import SELECTORS, Settings
from launchbot.errors import MissingToken


def test_from_env() -> None:
    settings = Settings.from_env({"DISCORD_TOKEN": " abc.def "})
    assert settings.token == "abc.def"
    assert settings.prefix == "!"


@pytest.mark.parametrize("env", [{}, {"DISCORD_TOKEN": ""}, {"DISCORD_TOKEN": "   "}])
def test_missing_token(env: dict) -> None:
    with pytest.raises(MissingToken):
        Settings.from_env(env)


def test_selectors() -> None:
    assert SELECTORS.card == ".mdl-card"
    assert SELECTORS.name == "h5.header-style"
    assert SELECTORS.supporting_text == ".mdl-card__supporting-text"
    assert SELECTORS.details_button == ".mdc-button"
