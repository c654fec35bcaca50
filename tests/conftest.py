import pytest

from seashell.shell import Shell


class FakeLauncher:
    """Stands in for run_external and remembers what it was asked to run."""

    def __init__(self, status=0):
        self.calls = []
        self.status = status

    def __call__(self, args, background=False):
        self.calls.append((list(args), background))
        return None if background else self.status


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def shell(launcher: FakeLauncher) -> Shell:
    """A shell that records launches instead of forking."""
    return Shell(launcher=launcher)
