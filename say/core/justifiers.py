"""Left, center and right justification of interpolation templates.

A justifier is built for a single render: it wraps the text with the
template's fills and spacers, pads the result to the target length with the
appropriate fill pattern, then adds the bookends outside of that length.
Text is never truncated; only the padding is dropped when there's no room.
"""
import math

from say.utils.config import MAX_COLUMNS

DEFAULT_FILL_PATTERN = " "


def pad_left(text, width, pattern):
    """Ruby-style `rjust`: repeat `pattern` (cut to fit) in front of `text`."""
    missing = width - len(text)
    if missing <= 0:
        return text
    return _repeat(pattern, missing) + text

def pad_right(text, width, pattern):
    """Ruby-style `ljust`: repeat `pattern` (cut to fit) after `text`."""
    missing = width - len(text)
    if missing <= 0:
        return text
    return text + _repeat(pattern, missing)

def _repeat(pattern, size):
    return (pattern * (size // len(pattern) + 1))[:size]


def justification_length(template, total_length):
    """Room left for the fill-padded body once bookends are set aside."""
    return max(0, total_length - len(template.left_bookend) - len(template.right_bookend))

def left_fill_pattern(template):
    return template.left_fill if template.has_left_fill else DEFAULT_FILL_PATTERN

def right_fill_pattern(template):
    return template.right_fill if template.has_right_fill else DEFAULT_FILL_PATTERN


class JustifierBehaviors:
    """Shared contract: subclasses only implement `justify(wrapped_text)`."""

    def __init__(self, template, length=MAX_COLUMNS):
        self.template = template
        self.total_length = int(length)
        if self.total_length < 0:
            raise ValueError(f"length must be >= 0, got {length!r}")

    def call(self, text="", fn=None) -> str:
        """Justify `text` (or the result of `fn()`) and add the bookends."""
        if fn is not None:
            text = str(fn())
        wrapped_text = self.template.wrap(text)
        return "".join((
            self.template.left_bookend,
            self.justify(wrapped_text),
            self.template.right_bookend,
        ))

    __call__ = call

    def justify(self, text):
        raise NotImplementedError(f"{type(self).__name__} must implement justify()")

    @property
    def justification_length(self):
        return justification_length(self.template, self.total_length)


class LeftJustifier(JustifierBehaviors):
    def justify(self, text):
        return pad_right(text, self.justification_length, right_fill_pattern(self.template))


class RightJustifier(JustifierBehaviors):
    def justify(self, text):
        return pad_left(text, self.justification_length, left_fill_pattern(self.template))


class CenterJustifier(JustifierBehaviors):
    # Odd padding puts the extra fill character on the left.
    def justify(self, text):
        left_padded = pad_left(text, self.left_justification_length(len(text)), left_fill_pattern(self.template))
        return pad_right(left_padded, self.justification_length, right_fill_pattern(self.template))

    def left_justification_length(self, text_length):
        return (
            math.ceil(self.total_length / 2)
            + math.ceil(text_length / 2)
            - len(self.template.left_bookend)
        )
