"""
Windows host adapter — rename, OS updates and restart through PowerShell.

Each operation is a single PowerShell invocation. Output is captured
and returned in the Receipt; nothing here raises.
"""

from __future__ import annotations

import logging
import subprocess
import time
from datetime import UTC, datetime

from winadmin.adapters.base import HostController
from winadmin.core.models.action import Receipt

logger = logging.getLogger(__name__)

_POWERSHELL = "powershell.exe"

# PSWindowsUpdate is installed on first use; the scan and the install
# run in the same session so the module is loaded once.
_UPDATE_SCRIPT = """
$ErrorActionPreference = 'Stop'
if (-not (Get-PackageProvider -ListAvailable -Name NuGet -ErrorAction SilentlyContinue)) {
  Install-PackageProvider -Name NuGet -MinimumVersion 2.8.5.201 -Force | Out-Null
}
if (-not (Get-Module -ListAvailable -Name PSWindowsUpdate)) {
  Install-Module -Name PSWindowsUpdate -Force -Scope AllUsers -AllowClobber | Out-Null
}
Import-Module PSWindowsUpdate -Force
Install-WindowsUpdate -MicrosoftUpdate -AcceptAll -IgnoreReboot -Verbose
"""


def _quote(value: str) -> str:
    """Single-quote a value for PowerShell."""
    return "'" + value.replace("'", "''") + "'"


class WindowsHostAdapter(HostController):
    """Run host operations through Windows PowerShell."""

    def __init__(self, timeout: int | None = None):
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "windows"

    def rename(self, new_name: str) -> Receipt:
        return self._run_powershell(
            "rename",
            f"Rename-Computer -NewName {_quote(new_name)} -Force",
            metadata={"new_name": new_name},
        )

    def install_updates(self) -> Receipt:
        return self._run_powershell("update", _UPDATE_SCRIPT)

    def restart(self) -> Receipt:
        return self._run_powershell("restart", "Restart-Computer -Force")

    def _run_powershell(
        self,
        operation: str,
        script: str,
        metadata: dict | None = None,
    ) -> Receipt:
        cmd = [
            _POWERSHELL,
            "-NoProfile",
            "-ExecutionPolicy", "Bypass",
            "-Command", script,
        ]
        meta = dict(metadata or {})
        logger.debug("PowerShell %s: %s", operation, script.strip())
        started_at = datetime.now(UTC).isoformat()
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                operation=operation,
                error=f"{operation} timed out after {self._timeout}s",
                duration_ms=int((time.monotonic() - start) * 1000),
                started_at=started_at,
                metadata=meta,
            )
        except OSError as e:
            return Receipt.failure(
                operation=operation,
                error=f"Cannot run PowerShell: {e}",
                started_at=started_at,
                metadata=meta,
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        output = result.stdout.strip()
        stderr = result.stderr.strip()
        meta["return_code"] = result.returncode

        if result.returncode == 0:
            return Receipt.success(
                operation=operation,
                output=output,
                duration_ms=elapsed_ms,
                started_at=started_at,
                metadata=meta,
            )
        return Receipt.failure(
            operation=operation,
            error=stderr or f"PowerShell exited with code {result.returncode}",
            output=output,
            duration_ms=elapsed_ms,
            started_at=started_at,
            metadata=meta,
        )
