"""Top-level status line and banner output.

Example::

    from say import default_say

    say = default_say()

    def work():
        say.line("Successfully did the thing!")
        say.debug("Debug details about this ...")
        say.warn("Maybe look into this thing ...")
        return "The Result!"

    result = say.call("Processor...", fn=work)

    = Processor... =================================================================
     -> Successfully did the thing!
     >> Debug details about this ...
     !¡ Maybe look into this thing ...
    = Done (0.0001s) ===============================================================
"""
import time

from say.core import banner_generator
from say.core.message import Message
from say.progress.tracker import Tracker
from say.utils import timestamps
from say.utils.config import MAX_COLUMNS, load_config
from say.utils.logger import ConsoleWriter

DEFAULT_HR_TEMPLATE = "\n%s\n"
DONE_MESSAGE = "Done"
START_MESSAGE = "Start"


class Say:
    def __init__(self, config=None, console=None):
        self.config = config if config is not None else load_config()
        self.columns = int(self.config.get("columns", MAX_COLUMNS))
        self.justify = self.config.get("justify", "left")
        self.time_format = self.config.get("time_format", timestamps.DEFAULT_TIMESTAMP_FORMAT_NAME)
        self.writer = ConsoleWriter(self.config, console=console)

    def call(self, text=None, type=None, fn=None, **with_block_kwargs):
        """With `fn`: header, run it, timed footer. Without: a single line."""
        if fn is not None:
            return self.with_block(fn, header=text, **with_block_kwargs)
        return self.line(text, type=type)

    __call__ = call

    def debug(self, text): return self.line(text, type="debug")
    def error(self, text): return self.line(text, type="error")
    def info(self, text): return self.line(text, type="info")
    def success(self, text): return self.line(text, type="success")
    def warn(self, text): return self.line(text, type="warn")

    def line(self, text=None, type=None):
        return self.write(Message(text, type=type))

    def with_block(self, fn=None, header=None, footer=DONE_MESSAGE, justify=None):
        if not callable(fn):
            raise TypeError("with_block expects a callable")
        self.header(header, justify=justify)
        result, footer_with_runtime = self._benchmark_run(footer, fn)
        self.footer(footer_with_runtime, justify=justify)
        return result

    def _benchmark_run(self, message, fn):
        started = time.perf_counter()
        result = fn()
        elapsed = time.perf_counter() - started
        return result, f"{message} ({elapsed:.4f}s)"

    def hr(self, fill="-", template=DEFAULT_HR_TEMPLATE, columns=None):
        """Horizontal rule of `fill`, sized so the rendered template spans `columns`."""
        columns = self.columns if columns is None else int(columns)
        filler = fill * columns
        if template == DEFAULT_HR_TEMPLATE:
            truncate_at = columns
        else:
            decoration = template.replace("\n", "").replace("%s", "")
            truncate_at = max(0, columns - len(decoration))
        result = self.write(template % filler[:truncate_at])
        if template.endswith("\n"):
            self.write("\n")
        return result.strip()

    def header(self, text=None, **banner_kwargs):
        return self.banner(text, **banner_kwargs)

    def footer(self, text=DONE_MESSAGE, **banner_kwargs):
        result = self.banner(text, **banner_kwargs)
        self.write("\n")
        return result

    def banner(self, text=None, columns=None, justify=None):
        return self.write(self._generate(text, columns, justify))

    def section(self, text=None, columns=None, justify=None):
        """Text banner sandwiched between two rules of the same width."""
        banner = self._generate(text, columns, justify)
        decorative_banner = banner_generator.generate(None, columns=len(banner), justify="left")
        lines = [
            self.write(decorative_banner),
            self.write(banner),
            self.write(decorative_banner),
        ]
        self.write("\n")
        return lines

    def _generate(self, text, columns, justify):
        return banner_generator.generate(
            text,
            columns=self.columns if columns is None else columns,
            justify=justify or self.justify,
        )

    def progress(self, text=START_MESSAGE, fn=None, interval=1, index=0):
        """Timed block whose `fn` receives an Interval for throttled progress lines."""
        tracker = Tracker(interval=interval, index=index)
        header = self.progress_message(text, index=tracker.index)
        if fn is None:
            fn = lambda interval: None
        return self.with_block(lambda: tracker.call(fn, speaker=self), header=header)

    def progress_line(self, text=None, type="info", index=None):
        message = Message(text, type=type)
        return self.write(self.progress_message(message, index=index))

    def progress_message(self, message, index=None):
        parts = [f"[{timestamps.timestamp(format=self.time_format)}]", str(message)]
        if index is not None:
            parts.append(f"(i={index})")
        return " ".join(parts)

    def write(self, *messages):
        return self.writer.write(*messages)

    def clear_esc(self):
        self.writer.clear_line()
        return self


_default_say = None

def default_say():
    """Process-wide Say instance, configured from ~/.config/say on first use."""
    global _default_say
    if _default_say is None:
        _default_say = Say()
    return _default_say
