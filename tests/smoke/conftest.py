import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parents[2]


def _find_rangelink_command() -> list[str]:
    """Find the installed rangelink command.

    Prefers .venv/bin/rangelink, then PATH, then ``python -m rangelink``.
    """
    venv_cmd = PROJECT_ROOT / ".venv" / "bin" / "rangelink"
    if venv_cmd.exists():
        return [str(venv_cmd)]

    cmd_path = shutil.which("rangelink")
    if cmd_path:
        return [cmd_path]

    return [sys.executable, "-m", "rangelink"]


@pytest.fixture(scope="module")
def smoke_env(tmp_path_factory):
    """Environment with an isolated RANGELINK_HOME."""
    env_dir = tmp_path_factory.mktemp("smoke_env")
    env = os.environ.copy()
    env["RANGELINK_HOME"] = str(env_dir / ".rangelink")
    return {"env": env, "dir": env_dir}


@pytest.fixture(scope="module")
def run_rangelink(smoke_env):
    """Run the CLI as a user would and return the completed process."""
    base_cmd = _find_rangelink_command()

    def _run(*args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [*base_cmd, *args],
            env=smoke_env["env"],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            timeout=60,
        )

    return _run
