"""Shared fixtures: a command runner that never spawns processes."""

from typing import Dict, List, Tuple, Union

import pytest

from bnotify.errors import ExternalCommandError

Response = Union[Tuple[str, str, int], Exception]


class FakeRunner:
    """Records argv lists and replays canned (stdout, stderr, code) responses.

    Responses are keyed by an argv prefix; the longest matching prefix wins.
    A list of responses is consumed in order, the last one repeating.
    Unmatched commands succeed with empty output.
    """

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.responses: Dict[Tuple[str, ...], List[Response]] = {}

    def on(self, *prefix: str, stdout: str = "", stderr: str = "", code: int = 0) -> "FakeRunner":
        self.responses[prefix] = [(stdout, stderr, code)]
        return self

    def sequence(self, *prefix: str, outputs: List[str]) -> "FakeRunner":
        self.responses[prefix] = [(out, "", 0) for out in outputs]
        return self

    def missing(self, *prefix: str) -> "FakeRunner":
        argv = list(prefix)
        self.responses[prefix] = [ExternalCommandError(f"Failed to start {prefix[0]}: No such file or directory", argv)]
        return self

    def __call__(self, argv: List[str]) -> Tuple[str, str, int]:
        self.calls.append(list(argv))
        for prefix in sorted(self.responses, key=len, reverse=True):
            if tuple(argv[:len(prefix)]) == prefix:
                queue = self.responses[prefix]
                response = queue.pop(0) if len(queue) > 1 else queue[0]
                if isinstance(response, Exception):
                    raise response
                return response
        return "", "", 0

    def commands(self, program: str) -> List[List[str]]:
        return [call for call in self.calls if call[0] == program]


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()
