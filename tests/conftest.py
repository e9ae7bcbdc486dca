"""Wspólne fixtures: przykładowe źródła Fortran w obu dialektach."""

from pathlib import Path

import pytest

SUM_MODULE_DEFAULT = """\
MODULE Sum_Module
  IMPLICIT NONE
CONTAINS

!:description+:
! Computes sums.
!
! Works on rank-1 arrays only.
!:description-:
!:author+:
!   Paul van Delst
!:author-:
  FUNCTION Total(x) RESULT(s)
    REAL, INTENT(IN) :: x(:)
    REAL :: s
    s = SUM(x)
  END FUNCTION Total

!:description+:
! Computes the mean.
!:description-:
!:history+:
! 15-Jan-2009 written
!:history-:
  FUNCTION Mean(x) RESULT(m)
    REAL, INTENT(IN) :: x(:)
    REAL :: m
    m = SUM(x) / SIZE(x)
  END FUNCTION Mean

END MODULE Sum_Module
"""

SUM_MODULE_XML = (
    SUM_MODULE_DEFAULT
    .replace(":description+:", "<description>")
    .replace(":description-:", "</description>")
    .replace(":author+:", "<author>")
    .replace(":author-:", "</author>")
    .replace(":history+:", "<history>")
    .replace(":history-:", "</history>")
)


@pytest.fixture
def write_source(tmp_path: Path):
    def _write(name: str, text: str, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path
    return _write
