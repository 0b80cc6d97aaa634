from say.core import template_builder
from say.exceptions import InvalidJustificationError
from say.utils.config import MAX_COLUMNS

JUSTIFY_MODES = ("left", "center", "right")


def generate(text=None, columns=MAX_COLUMNS, justify="left"):
    """Title banner around `text`, or a plain double line when text is None."""
    if justify not in JUSTIFY_MODES:
        raise InvalidJustificationError(justify)
    template = template_builder.build(banner_type(text))
    return getattr(template, f"{justify}_justify")(text, columns)

def banner_type(text):
    return "title" if text is not None else "hr"
