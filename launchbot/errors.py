from __future__ import annotations


class LaunchBotError(Exception):
    """Base error; the message is safe to show to the invoking user."""


class UpstreamUnavailable(LaunchBotError):
    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__("NextSpaceflight is unavailable right now, try again later.")


class NoLaunchesFound(LaunchBotError):
    def __init__(self):
        super().__init__("No upcoming launches could be found.")


class MissingToken(LaunchBotError):
    pass
