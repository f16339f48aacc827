from __future__ import annotations

from .play import register as register_player_play
from .pause import register as register_player_pause
from .sync import register as register_player_sync
from .watching import register as register_player_watching

__all__ = [
    "register_socket_handlers",
]


def register_socket_handlers() -> None:
    register_player_play()
    register_player_pause()
    register_player_sync()
    register_player_watching()
