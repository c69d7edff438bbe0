"""Set card game engine."""
