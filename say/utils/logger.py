from rich.console import Console

CLEAR_OUTPUT_ESC_CODE = "\x1b[2K\r"

class ConsoleWriter:
    """The single text sink: writes lines verbatim to the rich console's file and remembers the last few."""
    def __init__(self, config=None, console=None):
        config = config or {}
        self.max_logs = config.get("max_logs", 100)
        self.console = console or Console()
        self.logs = []

    def write(self, *messages):
        """Write each message on its own line (like `puts`) and return them joined by newlines."""
        messages = [str(message) for message in messages]
        for message in messages:
            # A message that already ends in a newline doesn't get a second one
            end = "" if message.endswith("\n") else "\n"
            self._emit(message + end)
            self.logs.append(message)
        if len(self.logs) > self.max_logs:
            del self.logs[:len(self.logs) - self.max_logs]
        return "\n".join(messages)

    def clear_line(self):
        self._emit(CLEAR_OUTPUT_ESC_CODE + "\n")

    def _emit(self, raw):
        # Bypasses rich rendering, which strips control codes and expands tabs
        self.console.file.write(raw)
        self.console.file.flush()
