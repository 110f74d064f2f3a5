"""Gameplay core of a top-down survivor arcade game: geometry, events, stats, upgrades and progression."""

__version__ = "0.1.0"