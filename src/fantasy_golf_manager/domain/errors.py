from dataclasses import dataclass


@dataclass(frozen=True)
class FgmError:
    message: str


@dataclass(frozen=True)
class SnapshotError(FgmError):
    source_detail: str


@dataclass(frozen=True)
class NotFoundError(FgmError):
    entity: str
    key: str
