"""
Chocolatey adapter — list, install and uninstall Windows packages.

Commands:
    choco list --limit-output            → "id|version" per installed package
    choco install <id> -y                → exit 0 on success
    choco uninstall <id> -y              → exit 0 on success

Install/uninstall output is not captured: the operator watches the
package manager work in the same console.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from winadmin.adapters.base import PackageManager, PackageManagerUnavailable
from winadmin.core.models.action import PackageVerb
from winadmin.core.models.settings import PackageManagerSettings

logger = logging.getLogger(__name__)

# Official bootstrap one-liner from chocolatey.org/install
_BOOTSTRAP_SCRIPT = (
    "Set-ExecutionPolicy Bypass -Scope Process -Force; "
    "[System.Net.ServicePointManager]::SecurityProtocol = "
    "[System.Net.ServicePointManager]::SecurityProtocol -bor 3072; "
    "iex ((New-Object System.Net.WebClient).DownloadString("
    "'https://community.chocolatey.org/install.ps1'))"
)


def _default_install_path() -> Path:
    """Where the bootstrap script puts choco.exe."""
    program_data = os.environ.get("ProgramData", r"C:\ProgramData")
    return Path(program_data) / "chocolatey" / "bin" / "choco.exe"


def parse_installed(output: str) -> list[str]:
    """Extract package ids from ``choco list --limit-output`` output.

    Each line is ``id|version``. Blank lines and the banner lines
    choco sometimes prints without a pipe are ignored.
    """
    ids: list[str] = []
    for line in output.splitlines():
        line = line.strip()
        if not line or "|" not in line:
            continue
        pkg_id = line.split("|", 1)[0].strip()
        if pkg_id:
            ids.append(pkg_id)
    return ids


class ChocolateyAdapter(PackageManager):
    """Drive the Chocolatey CLI through subprocesses."""

    def __init__(self, settings: PackageManagerSettings | None = None):
        self._settings = settings or PackageManagerSettings()

    @property
    def name(self) -> str:
        return "choco"

    @property
    def executable(self) -> str:
        """Resolved path to choco, or the configured name when not found."""
        found = shutil.which(self._settings.executable)
        if found:
            return found
        fallback = _default_install_path()
        if fallback.is_file():
            return str(fallback)
        return self._settings.executable

    def is_available(self) -> bool:
        if shutil.which(self._settings.executable) is not None:
            return True
        return _default_install_path().is_file()

    def list_installed(self) -> list[str]:
        cmd = [self.executable, *self._settings.list_args]
        logger.debug("Querying installed packages: %s", " ".join(cmd))

        try:
            r = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._settings.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning("Package listing failed: %s", e)
            return []

        if r.returncode != 0:
            logger.warning(
                "Package listing exited with code %d: %s",
                r.returncode,
                r.stderr.strip(),
            )
            return []

        ids = parse_installed(r.stdout)
        logger.debug("%d packages installed", len(ids))
        return ids

    def run_action(
        self,
        verb: PackageVerb,
        package_id: str,
        auto_confirm: bool = True,
    ) -> int:
        cmd = [self.executable, verb, package_id, *self._settings.extra_args]
        if auto_confirm:
            cmd.append("-y")

        logger.debug("Executing: %s", " ".join(cmd))
        r = subprocess.run(cmd, timeout=self._settings.timeout)
        return r.returncode

    def bootstrap(self) -> None:
        if not self._settings.bootstrap:
            raise PackageManagerUnavailable(
                f"{self._settings.executable} not found and bootstrap is disabled"
            )

        logger.info("Installing Chocolatey")
        cmd = [
            "powershell.exe",
            "-NoProfile",
            "-ExecutionPolicy", "Bypass",
            "-Command", _BOOTSTRAP_SCRIPT,
        ]
        try:
            r = subprocess.run(cmd, timeout=self._settings.timeout)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise PackageManagerUnavailable(f"Chocolatey bootstrap failed: {e}") from e

        if r.returncode != 0:
            raise PackageManagerUnavailable(
                f"Chocolatey bootstrap exited with code {r.returncode}"
            )

        if not self.is_available():
            raise PackageManagerUnavailable(
                "Chocolatey bootstrap finished but choco is still not on PATH"
            )
