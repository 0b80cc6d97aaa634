from collections.abc import Mapping
from types import MappingProxyType

from say.core.interpolation_template import InterpolationTemplate
from say.exceptions import PresetNotFoundError

DEFAULT_TYPE = "title"

_DOUBLE_LINE = MappingProxyType({"left_fill": "=", "right_fill": "="})

TYPES = MappingProxyType({
    "title": MappingProxyType({
        "left_fill": "=", "left_spacer": " ",
        "right_spacer": " ", "right_fill": "=",
    }),
    "double_line": _DOUBLE_LINE,
    "hr": _DOUBLE_LINE,
    "wtf": MappingProxyType({
        "left_fill": "?", "left_spacer": " ",
        "right_spacer": " ", "right_fill": "?",
    }),
})


def build(type_or_attributes=None, template_class=InterpolationTemplate):
    """Resolve a preset name, attribute mapping, or template into a template.

    Templates already of `template_class` are returned as-is; `None` means
    the "title" preset.
    """
    if isinstance(type_or_attributes, template_class):
        return type_or_attributes
    if isinstance(type_or_attributes, Mapping):
        return template_class(**type_or_attributes)
    return template_class(**attributes_for(type_or_attributes or DEFAULT_TYPE))

def attributes_for(type_name):
    try:
        return TYPES[str(type_name)]
    except KeyError:
        raise PresetNotFoundError(type_name) from None

def title():
    return build("title")

def double_line():
    return build("double_line")

def hr():
    return build("hr")

def wtf():
    return build("wtf")
