"""Domain enumerations for the catalog.

String-valued enums use the str mixin so they serialize cleanly to JSON
and remain comparable to plain strings.
"""

from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"
