"""Exception types raised by the scene generator and editor."""


class MnemonicError(Exception):
    """Base class for errors surfaced to the user as a single message."""


class GenerationError(MnemonicError):
    """Scene generation failed: empty topic, incomplete plan, or no image returned."""


class EditError(MnemonicError):
    """Scene edit failed: empty instruction, bad image data, incomplete integration, or no image part."""
