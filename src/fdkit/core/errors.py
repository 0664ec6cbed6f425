"""Exceptions raised while reading relations and searching for keys."""

from typing import Iterable, Optional


class FDKitError(Exception):
    """Base class for fdkit errors."""

    pass


class MalformedRelationHeader(FDKitError):
    """Raised when the first line of a relation description is not ``Name(attrs)``."""

    def __init__(self, header: str, reason: str = "invalid relation description"):
        self.header = header
        self.reason = reason
        super().__init__(f"{reason}: {header!r}")


class UnknownAttributeInDependency(FDKitError):
    """Raised when functional dependencies refer to attributes outside the relation."""

    def __init__(self, unknown: Iterable[str], attrs: Iterable[str]):
        self.unknown = sorted(unknown)
        self.attrs = sorted(attrs)
        super().__init__(
            f"relation has {len(self.attrs)} attributes ({','.join(self.attrs)}). "
            f"FD has {len(self.unknown)} unknown attributes ({','.join(self.unknown)})"
        )


class ArrowCountError(FDKitError):
    """Raised when a dependency line has no arrow or more than one."""

    def __init__(self, line: str, count: int):
        self.line = line
        self.count = count
        if count == 0:
            message = "no arrow found in functional dependency"
        else:
            message = "too many arrows in functional dependency"
        super().__init__(f"{message}: {line!r}")


class MalformedDataFile(FDKitError):
    """Raised when a tabular data file cannot be read as header plus equal-width rows."""

    def __init__(self, filename, reason: str):
        self.filename = str(filename)
        self.reason = reason
        super().__init__(f"{self.filename}: {reason}")


class SearchBudgetExceeded(FDKitError):
    """Raised when the exhaustive key search needs more closures than allowed."""

    def __init__(self, limit: int, checks: Optional[int] = None):
        self.limit = limit
        self.checks = checks if checks is not None else limit
        super().__init__(
            f"candidate key search exceeded its budget of {limit} closure checks"
        )
