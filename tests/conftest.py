import json

import pytest

from condaview._src.conda import Conda
from condaview._src.runner import CommandResult


class FakeRunner:
    """Stands in for SubprocessRunner, answering from canned results.

    `responses` maps the argument list (without the executable) to either a
    CommandResult or an exception to raise. `--version` succeeds unless
    overridden.
    """

    def __init__(self, responses=None):
        self.responses = {("--version",): CommandResult(0, b"conda 24.1.0\n", b"")}
        for args, response in (responses or {}).items():
            self.responses[tuple(args)] = response
        self.calls = []

    def run(self, args):
        self.calls.append(list(args))
        response = self.responses[tuple(args[1:])]
        if isinstance(response, BaseException):
            raise response
        return response


class MissingRunner:
    """A runner for a machine without conda"""

    def __init__(self):
        self.calls = []

    def run(self, args):
        self.calls.append(list(args))
        raise FileNotFoundError(2, "No such file or directory", args[0])


def ok(payload) -> CommandResult:
    if not isinstance(payload, bytes):
        payload = json.dumps(payload).encode()
    return CommandResult(exit_code=0, stdout=payload, stderr=b"")


def failed(exit_code=1, stdout=b"", stderr=b"") -> CommandResult:
    return CommandResult(exit_code=exit_code, stdout=stdout, stderr=stderr)


@pytest.fixture
def make_conda():
    def _make(responses=None):
        return Conda(runner=FakeRunner(responses))
    return _make
