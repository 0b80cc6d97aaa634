from dataclasses import dataclass, fields

from say.core.justifiers import CenterJustifier, LeftJustifier, RightJustifier

TEXT_PLACEHOLDER = "{}"


@dataclass(frozen=True)
class InterpolationTemplate:
    """Six-part decoration scheme wrapped around a piece of text.

    Rendered left to right as::

        left_bookend + left_fill + left_spacer + TEXT
            + right_spacer + right_fill + right_bookend

    Fills are the repeatable patterns justifiers pad with; bookends are
    emitted verbatim and never count toward a justification length.
    """

    left_bookend: str = ""
    left_fill: str = ""
    left_spacer: str = ""
    right_spacer: str = ""
    right_fill: str = ""
    right_bookend: str = ""

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            object.__setattr__(self, field.name, "" if value is None else str(value))

    @property
    def has_left_fill(self) -> bool:
        return self.left_fill != ""

    @property
    def has_right_fill(self) -> bool:
        return self.right_fill != ""

    def interpolate(self, text) -> str:
        """Place `text` into the template. No length targeting."""
        return "".join((self.left_bookend, self.wrap(text), self.right_bookend))

    def wrap(self, text) -> str:
        """Fill + spacer on both sides of `text`; bookends excluded."""
        return "".join((
            self.left_fill,
            self.left_spacer,
            "" if text is None else str(text),
            self.right_spacer,
            self.right_fill,
        ))

    def left_justify(self, text=None, length=None) -> str:
        return LeftJustifier(self, **_length_kwargs(length))(text)

    def center_justify(self, text=None, length=None) -> str:
        return CenterJustifier(self, **_length_kwargs(length))(text)

    def right_justify(self, text=None, length=None) -> str:
        return RightJustifier(self, **_length_kwargs(length))(text)

    def __repr__(self):
        return "".join((
            self.left_bookend,
            _fill_repr(self.left_fill),
            self.left_spacer,
            TEXT_PLACEHOLDER,
            self.right_spacer,
            _fill_repr(self.right_fill),
            self.right_bookend,
        ))


def _fill_repr(fill):
    return f"[{fill!r}, ...]" if fill else ""

def _length_kwargs(length):
    return {} if length is None else {"length": length}
