from __future__ import annotations

import logging
from typing import Protocol

log = logging.getLogger("kitchen.ambient")


class AmbientCue(Protocol):
    """Background cue played while chefs cook (the kitchen sound loop)."""

    def start(self) -> None: ...

    def stop(self) -> None: ...


class LoggingCue:
    """Server-side stand-in: records the cue edges, plays nothing."""

    def __init__(self) -> None:
        self.playing = False

    def start(self) -> None:
        if not self.playing:
            self.playing = True
            log.info("ambient cue started")

    def stop(self) -> None:
        if self.playing:
            self.playing = False
            log.info("ambient cue stopped")
