"""Senet: rules engine for the ancient Egyptian race game."""

from senet.engine import Player, SenetEngine

__version__ = "0.1.0"

__all__ = ["Player", "SenetEngine"]
