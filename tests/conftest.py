import pytest

DESKTOP_ENV_VARS = [
    "DESKTOP_SESSION",
    "XDG_CURRENT_DESKTOP",
    "XDG_SESSION_TYPE",
    "TERMINAL",
    "COLORTERM",
    "TERM",
    "LANG",
]


@pytest.fixture
def fake_commands(monkeypatch):
    """Replace a module's command runner with canned output keyed by argv."""

    def install(module, outputs):
        calls = []

        def run(command, filter_func=None):
            calls.append(tuple(command))
            output = outputs.get(tuple(command))
            if output is not None and filter_func:
                output = "\n".join(line for line in output.splitlines() if filter_func(line))
            return output

        monkeypatch.setattr(module, "safe_run_command", run)
        return calls

    return install


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the probes look at."""
    for name in DESKTOP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
