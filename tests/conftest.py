"""Shared fixtures -- HTML snippets shaped like the NextSpaceflight launches page."""

from __future__ import annotations

from typing import Iterable

import pytest


def launch_card(
    name: str,
    when: str = "Fri Oct 17, 2025 02:00 UTC",
    site: str = "SLC-4E, Vandenberg SFB, California, USA",
    href: str = "/launches/details/1",
    runs: Iterable[str] | None = None,
) -> str:
    if runs is None:
        runs = ["SpaceX", when, "Falcon 9 Block 5", site]
    supporting = "<br>".join(f"<span>{r}</span>" for r in runs)
    return (
        '<div class="mdl-card">'
        f'<div class="mdl-card__title"><h5 class="header-style"> {name} </h5></div>'
        f'<div class="mdl-card__supporting-text">{supporting}</div>'
        f'<div class="mdl-card__actions"><a class="mdc-button" href="{href}">Details</a></div>'
        "</div>"
    )


def page(*cards: str) -> str:
    return "<html><body><div class=\"launches\">" + "".join(cards) + "</div></body></html>"


@pytest.fixture()
def three_launches_html() -> str:
    return page(
        launch_card("Alpha", href="/launches/details/1"),
        launch_card("Bravo", when="Sat Oct 18, 2025 14:30 UTC", href="/launches/details/2"),
        launch_card("Charlie", when="Mon Oct 20, 2025 23:59 UTC", href="/launches/details/3"),
    )
