"""Core engine utilities: hashing, names, GUIDs, delegates, durations, locks, logging, crash handling and subsystems."""

__version__ = "0.1.0"