"""
Say Exception Hierarchy.

SayError (base, Exception)
├── PresetNotFoundError(SayError, KeyError)          ← unknown template preset
├── InvalidJustificationError(SayError, ValueError)  ← unknown justify mode
└── TimeFormatNotFoundError(SayError, KeyError)      ← unknown timestamp preset
"""


class SayError(Exception):
    """Base exception for all say errors."""


class PresetNotFoundError(SayError, KeyError):
    """Requested interpolation template preset doesn't exist."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"key not found: {key!r}")

    def __str__(self):
        return self.args[0]


class InvalidJustificationError(SayError, ValueError):
    """Justification mode isn't one of left, center, right."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"invalid justification: {value!r} (expected 'left', 'center' or 'right')")


class TimeFormatNotFoundError(SayError, KeyError):
    """Requested timestamp format preset doesn't exist."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"key not found: {key!r}")

    def __str__(self):
        return self.args[0]
