"""Information about the host CPU, memory and kernel."""

from __future__ import annotations

import os
import platform
import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_UINT = re.compile(r"\s*\+?(\d+)")
_UINT32 = 0xFFFFFFFF


@dataclass(frozen=True)
class MemoryStats:
    """Memory statistics in bytes."""

    total: int = 0
    available: int = 0
    used: int = 0


@dataclass(frozen=True)
class KernelInfo:
    """Operating-system kernel name and version numbers."""

    kernel: str
    major: int
    minor: int
    patch: int
    build_number: int


def parse_cpuinfo(text: str) -> str:
    """Return the first 'model name' entry of a cpuinfo listing, or ''."""
    for line in text.splitlines(keepends=True):
        if line.startswith("model name"):
            return line[13:].replace("\n", "")
    return ""


def cpu_string(cpuinfo_path: str = "/proc/cpuinfo") -> str:
    """Return the CPU model name, or '' if it cannot be determined."""
    try:
        with open(cpuinfo_path, "rb") as fh:
            text = fh.read().decode("utf-8", errors="replace")
    except OSError:
        return ""
    return parse_cpuinfo(text)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_meminfo(text: str) -> MemoryStats:
    """Parse a meminfo listing into total, available and used bytes.

    Used memory is the committed address space; available is total minus used.
    """
    total = 0
    used = 0
    for line in text.splitlines():
        if line.startswith("MemTotal"):
            total = _leading_int(line[10:]) * 1024
        if line.startswith("Committed_AS"):
            used = _leading_int(line[14:]) * 1024
    return MemoryStats(total=total, available=total - used, used=used)


def memory_statistics(meminfo_path: str = "/proc/meminfo") -> MemoryStats:
    """Read memory statistics; all zero if the listing cannot be read."""
    try:
        with open(meminfo_path, "r", encoding="utf-8", errors="replace") as fh:
            text = fh.read()
    except OSError:
        return MemoryStats()
    return parse_meminfo(text)


def _strtoul(text: str, pos: int) -> tuple[int, int]:
    """Parse an unsigned integer at pos; return (value, end position)."""
    if pos >= len(text):
        return 0, pos
    match = _LEADING_UINT.match(text, pos)
    if not match:
        return 0, pos
    return int(match.group(1)) & _UINT32, match.end()


def parse_kernel_release(sysname: str, release: str) -> KernelInfo:
    """Split a release string such as '5.15.0-91-generic' into numbers."""
    major, pos = _strtoul(release, 0)
    minor, pos = _strtoul(release, pos + 1)
    patch, pos = _strtoul(release, pos + 1)
    build_number, _ = _strtoul(release, pos + 1)
    return KernelInfo(sysname, major, minor, patch, build_number)


def kernel_info() -> KernelInfo:
    """Return the running kernel's name and version numbers."""
    if hasattr(os, "uname"):
        uts = os.uname()
        return parse_kernel_release(uts.sysname, uts.release)
    uname = platform.uname()
    return parse_kernel_release(uname.system, uname.release)