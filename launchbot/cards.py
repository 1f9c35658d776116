from __future__ import annotations

from datetime import datetime
from typing import Iterable, List

import discord

from .config import ORIGIN
from .launches import LaunchRecord

CARD_COLOUR = 0xFFFFFF
FOOTER = "Via NextSpaceflight"


def timestamp_token(when: datetime) -> str:
    """Discord markup rendering ``when`` as a full date/time in the viewer's locale."""
    return f"<t:{int(when.timestamp())}:F>"


def render(record: LaunchRecord, index: int) -> discord.Embed:
    embed = discord.Embed(
        title=f"#{index} | {record.name.strip()}",
        url=f"{ORIGIN}{record.details_path}",
        colour=discord.Colour(CARD_COLOUR),
    )
    embed.set_footer(text=FOOTER)
    embed.add_field(name="Time", value=timestamp_token(record.scheduled_at), inline=False)
    embed.add_field(name="Launch Site", value=record.site, inline=False)
    return embed


def render_all(records: Iterable[LaunchRecord]) -> List[discord.Embed]:
    return [render(r, i) for i, r in enumerate(records, start=1)]
