from types import MappingProxyType

DEFAULT_TYPE = "success"
DEFAULT_MESSAGE = " ..."

TYPES = MappingProxyType({
    "debug": " >> ",
    "error": " ** ",
    "info": " -- ",
    "success": " -> ",
    "warn": " !¡ ",
    "warning": " !¡ ",
})


class Message:
    """A single status line: a type prefix followed by the text."""
    def __init__(self, text=None, type=None):
        self.text = text
        self.type = type or DEFAULT_TYPE

    @property
    def prefix(self):
        return TYPES.get(self.type, TYPES[DEFAULT_TYPE])

    def __str__(self):
        if self.text is None:
            return DEFAULT_MESSAGE
        return f"{self.prefix}{self.text}"

    def __repr__(self):
        return f"Message(text={self.text!r}, type={self.type!r})"
