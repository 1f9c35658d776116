from __future__ import annotations

import asyncio
import logging

import discord
from discord.ext import commands

from .cards import render_all
from .config import LAUNCHES_URL, Settings
from .errors import LaunchBotError, NoLaunchesFound
from .launches import fetch_launches
from .paginator import PaginationSession, invocation_id

logger = logging.getLogger(__name__)

_WRAPPED_ERRORS = (
    commands.HybridCommandError,
    commands.CommandInvokeError,
    discord.app_commands.CommandInvokeError,
)


class Launches(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.hybrid_command(name="fetch", description="Browse upcoming rocket launches")
    async def fetch(self, ctx: commands.Context) -> None:
        await ctx.defer()
        launches = await asyncio.to_thread(fetch_launches, LAUNCHES_URL)
        if not launches:
            raise NoLaunchesFound()

        session = PaginationSession(invocation_id(ctx), render_all(launches))
        await session.run(ctx, self.bot)


class LaunchBot(commands.Bot):
    def __init__(self, settings: Settings):
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(command_prefix=settings.prefix, intents=intents)
        self.settings = settings

    async def setup_hook(self) -> None:
        await self.add_cog(Launches(self))
        synced = await self.tree.sync()
        logger.info("Registered %d application commands globally", len(synced))

    async def on_ready(self) -> None:
        logger.info("Logged in as %s", self.user)

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError) -> None:
        original = error
        while isinstance(original, _WRAPPED_ERRORS):
            original = original.original
        if isinstance(original, LaunchBotError):
            logger.warning("Command %s failed: %s", ctx.command, original)
            await ctx.send(str(original))
            return
        await super().on_command_error(ctx, error)
