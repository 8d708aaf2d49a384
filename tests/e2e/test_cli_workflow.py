"""
E2E tests running the moddocs CLI in a subprocess.

Tests cover:
- Rendered output goes to stdout, log lines to stderr
- Exit codes for success, moddocs errors and usage errors
- Config file and environment overrides reach the formatters
- Documentation generation from the shipped example module
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent.parent


def _moddocs(*argv: str, cwd: Path, env: dict | None = None) -> subprocess.CompletedProcess:
    full_env = dict(os.environ)
    full_env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + full_env.get("PYTHONPATH", "")
    full_env.update(env or {})
    return subprocess.run(
        [sys.executable, "-m", "moddocs", *argv],
        capture_output=True,
        text=True,
        cwd=cwd,
        env=full_env,
        timeout=60,
    )


@pytest.mark.e2e
class TestCLIWorkflow:
    """Full CLI runs."""

    def test_json_to_stdout_logs_to_stderr(self, temp_dir: Path, module_dir: Path):
        result = _moddocs("-l", "debug", "json", str(module_dir), cwd=temp_dir)

        assert result.returncode == 0
        assert json.loads(result.stdout)["header"] == "Example module"
        assert "loaded module" in result.stderr

    def test_error_exit_code(self, temp_dir: Path):
        result = _moddocs("json", str(temp_dir / "missing"), cwd=temp_dir)

        assert result.returncode == 1
        assert result.stdout == ""
        assert "module directory not found" in result.stderr

    def test_usage_error_exit_code(self, temp_dir: Path):
        result = _moddocs("json", cwd=temp_dir)

        assert result.returncode == 2
        assert "PATH" in result.stderr

    def test_env_override(self, temp_dir: Path, module_dir: Path):
        result = _moddocs(
            "json",
            str(module_dir),
            cwd=temp_dir,
            env={"MODDOCS_SETTINGS_SHOW_INPUTS": "false", "MODDOCS_LOGGING_LEVEL": "false"},
        )

        assert result.returncode == 0
        assert json.loads(result.stdout)["inputs"] == []
        assert result.stderr == ""

    def test_generate_docs(self, temp_dir: Path):
        out = temp_dir / "formats"

        result = _moddocs(
            "-l",
            "false",
            "docs",
            "--output-dir",
            str(out),
            "--examples",
            str(REPO_ROOT / "examples"),
            cwd=temp_dir,
        )

        assert result.returncode == 0, result.stderr
        pretty = (out / "pretty.md").read_text()
        assert "moddocs pretty --no-color ./examples/" in pretty
        assert "    input.nullable (null)\n" in pretty
