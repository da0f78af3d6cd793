"""Exceptions raised by motus."""


class MotusError(Exception):
    """Base class for motus errors."""


class InvalidArgument(MotusError, ValueError):
    """Counts don't fit in the text."""


class ClipLoadError(MotusError):
    """A sound clip could not be loaded. Fatal to the reveal."""

    def __init__(self, clip: str, reason: str = ""):
        self.clip = clip
        msg = f"failed to load {clip}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class NoSoundError(MotusError):
    """Playing a sound failed or timed out."""
