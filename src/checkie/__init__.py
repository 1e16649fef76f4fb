"""Checkie — a checkers rule engine with a per-turn state machine."""

__version__ = "0.1.0"
