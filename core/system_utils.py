# core/system_utils.py
from __future__ import annotations
import datetime
import getpass
import logging
import platform
import socket
from typing import Dict

import psutil

logger = logging.getLogger(__name__)


def _gb(n: float) -> float:
    return round(n / (1024 ** 3), 2)


def _user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):  # container không có entry trong /etc/passwd
        return "unknown"


def _disk_root():
    root = "C:\\" if platform.system() == "Windows" else "/"
    try:
        return psutil.disk_usage(root)
    except OSError as e:
        logger.warning("Cannot read disk usage for %s: %s", root, e)
        return None


def get_system_info() -> Dict[str, object]:
    """One snapshot of host facts (no polling)."""
    boot_time = datetime.datetime.fromtimestamp(psutil.boot_time()).strftime("%Y-%m-%d %H:%M:%S")
    info: Dict[str, object] = {
        "OS": platform.system(),
        "OS Version": platform.version(),
        "OS Release": platform.release(),
        "Hostname": socket.gethostname(),
        "User": _user(),
        "CPU Cores (physical)": psutil.cpu_count(logical=False),
        "CPU Cores (logical)": psutil.cpu_count(logical=True),
        "RAM (GB)": _gb(psutil.virtual_memory().total),
    }
    disk = _disk_root()
    if disk is not None:
        info["Disk Total (GB)"] = _gb(disk.total)
        info["Disk Free (GB)"] = _gb(disk.free)
    info.update({
        "Boot Time": boot_time,
        "Python Version": platform.python_version(),
        "Machine": platform.machine(),
        "Processor": platform.processor(),
    })
    logger.debug("Collected %d system facts", len(info))
    return info


def format_report(info: Dict[str, object]) -> str:
    if not info:
        return ""
    width = max(len(k) for k in info)
    return "\n".join(f"{k.ljust(width)} : {'' if v is None else v}" for k, v in info.items())
