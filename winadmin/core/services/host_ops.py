"""
Host operations — rename, OS updates, restart.

Thin, channel-independent wrappers over the host adapter. Each returns
``{"ok": True, ...}`` or ``{"error": "..."}`` so the CLI and the menu
render them the same way.
"""

from __future__ import annotations

import logging
import re

from winadmin.adapters.base import HostController

logger = logging.getLogger(__name__)

# NetBIOS computer name: 1-15 chars, letters, digits and hyphens
_NAME_RE = re.compile(r"^[A-Za-z0-9-]{1,15}$")


def validate_computer_name(name: str) -> str | None:
    """Return an error message, or None when ``name`` is a valid computer name."""
    if not name:
        return "Computer name cannot be empty"
    if len(name) > 15:
        return "Computer name must be at most 15 characters"
    if not _NAME_RE.match(name):
        return "Computer name may only contain letters, digits and hyphens"
    if name.isdigit():
        return "Computer name cannot be only digits"
    if name.startswith("-") or name.endswith("-"):
        return "Computer name cannot start or end with a hyphen"
    return None


def rename_computer(host: HostController, new_name: str) -> dict:
    """Rename the machine. Takes effect after the next restart.

    Returns:
        {"ok": True, "name": str, "restart_required": True} or {"error": "..."}
    """
    new_name = new_name.strip()
    problem = validate_computer_name(new_name)
    if problem:
        return {"error": problem}

    logger.info("Renaming computer to %s", new_name)
    receipt = host.rename(new_name)
    if receipt.failed:
        logger.warning("Rename failed: %s", receipt.error)
        return {"error": receipt.error or "Rename failed"}

    return {"ok": True, "name": new_name, "restart_required": True}


def run_updates(host: HostController) -> dict:
    """Scan for and install OS updates.

    Returns:
        {"ok": True, "output": "..."} or {"error": "..."}
    """
    logger.info("Installing OS updates")
    receipt = host.install_updates()
    if receipt.failed:
        logger.warning("Update run failed: %s", receipt.error)
        return {"error": receipt.error or "Update run failed"}

    return {"ok": True, "output": receipt.output[:2000]}


def restart_computer(host: HostController) -> dict:
    """Restart the machine.

    Returns:
        {"ok": True} or {"error": "..."}
    """
    logger.info("Restarting computer")
    receipt = host.restart()
    if receipt.failed:
        return {"error": receipt.error or "Restart failed"}
    return {"ok": True}
