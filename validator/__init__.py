"""
validator — walidacja wpisów dokumentacji względem zestawu pól wymaganych.

Interfejs publiczny:
    check_required   — problemy dla brakujących pól wymaganych
    ValidationIssue, ErrorCode — typy raportu

Typowe użycie:
    from validator import check_required

    for issue in check_required(entry, {"description", "author"}):
        print(issue.code, issue.line_no, issue.message)
"""

from .types import ErrorCode, ValidationIssue
from .required_fields import check_required

__all__ = [
    "ErrorCode",
    "ValidationIssue",
    "check_required",
]
