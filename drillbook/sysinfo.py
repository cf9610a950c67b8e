"""A short report on the host: CPU, memory, operating system and runtime."""

import platform
import struct
import sys

_SPACE = " \t\v\r\n"


def trim_after(line, separator):
    """Drop everything up to and including the first separator, then strip."""
    head, found, tail = line.partition(separator)
    rest = tail if found else head
    return rest.strip(_SPACE)


def parse_field(path, key, separator):
    """Return the trimmed value of the first line of ``path`` containing ``key``.

    Gives an empty string when the file cannot be read or has no such line.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                if key in line:
                    return trim_after(line, separator)
    except OSError:
        pass
    return ""


def os_name():
    """Name of the operating system family."""
    if sys.platform == "win32":
        return "Windows 64-bit" if struct.calcsize("P") == 8 else "Windows 32-bit"
    if sys.platform.startswith("linux"):
        return "Linux"
    return "Other"


def cpu_type():
    """Brand string of the processor, or an empty string if unknown."""
    if sys.platform.startswith("linux"):
        return parse_field("/proc/cpuinfo", "model name", ":")
    return platform.processor()


def runtime_version():
    """Implementation and version of the running interpreter."""
    return f"{platform.python_implementation()}: {platform.python_version()}"


def system_info(cpuinfo_path="/proc/cpuinfo", meminfo_path="/proc/meminfo"):
    """Return the multi-line host report."""
    lines = []
    if sys.platform.startswith("linux"):
        lines += [
            f"CPU Vendor : {parse_field(cpuinfo_path, 'vendor_id', ':')}",
            f"CPU Model  : {parse_field(cpuinfo_path, 'model name', ':')}",
            f"RAM Total  : {parse_field(meminfo_path, 'MemTotal', ':')}",
            f"RAM Free   : {parse_field(meminfo_path, 'MemFree', ':')}",
        ]
    elif sys.platform == "win32":
        lines.append(f"CPU Model  : {cpu_type()}")
    lines += [
        f"OS  Core   : {os_name()}",
        f"Runtime    : {runtime_version()}",
    ]
    return "".join(line + "\n" for line in lines)