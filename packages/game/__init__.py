from .session import GameSession, GameStatus, MAX_GUESSES, new_session, submit
from .render import render_guess, render_keyboard

__all__ = [
    "GameSession", "GameStatus", "MAX_GUESSES", "new_session", "submit",
    "render_guess", "render_keyboard",
]
