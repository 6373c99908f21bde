from typing import Dict, List, Optional, Tuple

from .base import ActionRuntime


class RecordingRuntime(ActionRuntime):
    """
    In-memory runtime for tests and local dry runs.

    Inputs come from a plain dict; every log line, output and failure
    is recorded in call order instead of being written anywhere.
    """

    def __init__(self, inputs: Optional[Dict[str, str]] = None):
        self.inputs = dict(inputs or {})
        self.records: List[Tuple[str, str]] = []
        self.outputs: Dict[str, str] = {}
        self.failure: Optional[str] = None

    def _raw_input(self, name: str) -> Optional[str]:
        return self.inputs.get(name)

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def set_failed(self, message: str) -> None:
        self.failure = message
        self.records.append(("error", message))

    def messages(self, level: str) -> List[str]:
        """All recorded messages at one level, in order."""
        return [m for lvl, m in self.records if lvl == level]
