"""Data models."""

from dataclasses import dataclass, field
from datetime import date

from sumocli.config import TOTAL_DAYS

DIVISIONS = (
    "Makuuchi", "Juryo", "Makushita",
    "Sandanme", "Jonidan", "Jonokuchi",
)
SANYAKU = ("Yokozuna", "Ozeki", "Sekiwake", "Komusubi")
SIDES = ("East", "West")


@dataclass(frozen=True)
class SourceKey:
    """One (division, tournament day) page on the remote site."""

    division: str
    day: int

    def __post_init__(self) -> None:
        if self.division not in DIVISIONS:
            raise ValueError(f"Unknown division: {self.division!r}")
        if not 1 <= self.day <= TOTAL_DAYS:
            raise ValueError(f"Tournament day out of range: {self.day}")

    @property
    def division_no(self) -> int:
        return DIVISIONS.index(self.division) + 1


@dataclass(frozen=True)
class FetchOutcome:
    key: SourceKey
    content: str
    origin: str  # cache / network
    accepted: bool
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    actual_day: int | None
    actual_date: date | None
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class NamedRank:
    """A san'yaku title (Makuuchi only)."""

    name: str

    def __post_init__(self) -> None:
        if self.name not in SANYAKU:
            raise ValueError(f"Unknown named rank: {self.name!r}")


@dataclass(frozen=True)
class NumberedRank:
    """A 1-based position within a division (Maegashira in Makuuchi)."""

    number: int

    def __post_init__(self) -> None:
        if self.number < 1:
            raise ValueError(f"Rank number must be positive: {self.number}")


@dataclass(frozen=True)
class BanzukeSlot:
    division: str
    rank: NamedRank | NumberedRank
    side: str  # East / West

    def __post_init__(self) -> None:
        if self.division not in DIVISIONS:
            raise ValueError(f"Unknown division: {self.division!r}")
        if self.side not in SIDES:
            raise ValueError(f"Unknown side: {self.side!r}")
        if isinstance(self.rank, NamedRank) and self.division != "Makuuchi":
            raise ValueError(
                f"{self.rank.name} is only valid in Makuuchi, not {self.division}"
            )


@dataclass(frozen=True)
class ParsedRank:
    tier: str | None  # English tier name, None if unrecognised
    position: int | None
    raw: str


@dataclass
class RikishiRecord:
    wins: int
    losses: int
    rest: int | None = None


@dataclass
class Rikishi:
    shikona: str
    rank_text: str
    rank: ParsedRank
    slot: BanzukeSlot | None
    record: RikishiRecord
    result: str  # "W" / "L" / ""
    technique: str = ""


@dataclass
class Bout:
    division: str
    east: Rikishi
    west: Rikishi
