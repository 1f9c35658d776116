from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Optional, Sequence

import discord
from discord.ext import commands

from .config import INTERACTION_TIMEOUT
from .errors import NoLaunchesFound

logger = logging.getLogger(__name__)


def invocation_id(ctx: commands.Context) -> str:
    source = ctx.interaction if ctx.interaction is not None else ctx.message
    return str(source.id)


def navigation_view(previous_id: str, next_id: str) -> discord.ui.View:
    view = discord.ui.View(timeout=None)
    view.add_item(discord.ui.Button(label="Previous", custom_id=previous_id, style=discord.ButtonStyle.primary))
    view.add_item(discord.ui.Button(label="Next", custom_id=next_id, style=discord.ButtonStyle.primary))
    # Stopped views are never stored, so presses only reach the session loop.
    view.stop()
    return view


def _custom_id(interaction: discord.Interaction) -> str:
    data = interaction.data or {}
    return str(data.get("custom_id", ""))


class PaginationSession:
    """Carousel over pre-rendered cards, bound to one command invocation.

    Button ids are namespaced by the invocation id so concurrent sessions
    never see each other's presses. Presses are handled one at a time and
    the session ends quietly once ``timeout`` seconds pass without one.

    ``deadline`` is bookkeeping only: the monotonic instant the current
    wait gives up at, refreshed before every wait.
    """

    def __init__(self, invocation_id: str, cards: Sequence[discord.Embed], *, timeout: float = INTERACTION_TIMEOUT):
        if not cards:
            raise NoLaunchesFound()
        self.invocation_id = invocation_id
        self.cards = tuple(cards)
        self.timeout = timeout
        self.index = 0
        self.deadline: Optional[float] = None

    @property
    def previous_id(self) -> str:
        return f"{self.invocation_id}previous"

    @property
    def next_id(self) -> str:
        return f"{self.invocation_id}next"

    @property
    def current(self) -> discord.Embed:
        return self.cards[self.index]

    def owns(self, interaction: discord.Interaction) -> bool:
        if interaction.type is not discord.InteractionType.component:
            return False
        return _custom_id(interaction).startswith(self.invocation_id)

    def press(self, custom_id: str) -> discord.Embed:
        total = len(self.cards)
        if custom_id == self.next_id:
            self.index = (self.index + 1) % total
        elif custom_id == self.previous_id:
            self.index = (self.index - 1) % total
        return self.current

    async def run(self, ctx: commands.Context, bot: Any) -> None:
        await ctx.send(embed=self.current, view=navigation_view(self.previous_id, self.next_id))
        logger.info("Session %s started with %d cards", self.invocation_id, len(self.cards))

        while True:
            self.deadline = time.monotonic() + self.timeout
            try:
                interaction = await bot.wait_for("interaction", check=self.owns, timeout=self.timeout)
            except asyncio.TimeoutError:
                break
            embed = self.press(_custom_id(interaction))
            await interaction.response.edit_message(embed=embed)

        logger.info("Session %s closed after %ss idle", self.invocation_id, self.timeout)
