import logging

import pytest

from bareos_mcp.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for var in ("BCONSOLE_PATH", "BCONSOLE_CONFIG", "BAREOS_MCP_LOG_LEVEL", "BAREOS_MCP_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_bconsole(tmp_path):
    """Factory for a stand-in bconsole script.

    The script records what it read on stdin to ``stdin.txt`` next to
    itself, prints canned stdout/stderr and exits with ``exit_code``.
    """

    def make(stdout="", stderr="", exit_code=0):
        (tmp_path / "stdout.txt").write_text(stdout)
        (tmp_path / "stderr.txt").write_text(stderr)
        script = tmp_path / "bconsole"
        script.write_text(
            "#!/bin/sh\n"
            f'cat > "{tmp_path}/stdin.txt"\n'
            f'cat "{tmp_path}/stdout.txt"\n'
            f'cat "{tmp_path}/stderr.txt" >&2\n'
            f"exit {exit_code}\n"
        )
        script.chmod(0o755)
        return script

    return make


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
