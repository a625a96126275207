"""Small data structures, algorithms and system utilities for study and experiment."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "containers",
    "dispatch",
    "linked_list",
    "minmax_list",
    "numerics",
    "search",
    "server",
    "strings_tool",
    "sysinfo",
]