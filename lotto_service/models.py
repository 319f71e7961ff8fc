# lotto_service/models.py

from datetime import datetime
from typing import ClassVar
from typing import Dict
from typing import List
from typing import Optional
from typing import Tuple
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import NonNegativeInt
from pydantic import model_validator

from .games import GAMES_BY_LABEL
from .games import GameSpec
from .utils.text import pad_number


class LottoBaseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_json_dict(self) -> dict:
        """Wire shape: camelCase keys, ISO timestamps, nulls kept."""
        return self.model_dump(by_alias=True, mode="json")


def _check_outcome(record, data_fields: Tuple[str, ...]):
    if record.ok:
        if record.error is not None:
            raise ValueError("error must be null when ok is true")
        return record
    if not record.error:
        raise ValueError("error is required when ok is false")
    populated = [name for name in data_fields if getattr(record, name) is not None]
    if populated:
        raise ValueError(f"failed records carry no data, got: {', '.join(populated)}")
    return record


def _lookup_game(label: str) -> GameSpec:
    try:
        return GAMES_BY_LABEL[label]
    except KeyError:
        raise ValueError(f"unknown game: {label}") from None


def _is_ball(value: str, width: int) -> bool:
    return value.isascii() and value.isdigit() and value == pad_number(value, width)


def _check_balls(record: "DrawRecord") -> "DrawRecord":
    """Numbers and special must match the arity, ranges and padding of the record's game."""
    game = _lookup_game(record.game)
    if record.numbers is not None:
        if len(record.numbers) != game.main_count:
            raise ValueError(
                f"{game.label} draws {game.main_count} numbers, got {len(record.numbers)}"
            )
        for value in record.numbers:
            if not (_is_ball(value, game.pad_width) and game.in_main_range(int(value))):
                raise ValueError(f"{value!r} is not a valid {game.label} number")
    if record.special is not None:
        if not game.has_special:
            raise ValueError(f"{game.label} has no special ball")
        special = record.special
        if not (_is_ball(special, game.pad_width) and game.in_special_range(int(special))):
            raise ValueError(f"{record.special!r} is not a valid {game.label} special ball")
    return record


# --- Core Data Models ---
class DrawRecord(LottoBaseModel):
    """Normalized snapshot of one game's most recent draw."""

    DATA_FIELDS: ClassVar[Tuple[str, ...]] = (
        "draw_date",
        "numbers",
        "special",
        "multiplier",
        "jackpot",
        "cash_value",
        "next_draw",
        "source",
    )

    game: str
    draw_date: Optional[datetime] = Field(None, alias="drawDate")
    numbers: Optional[Tuple[str, ...]] = None
    special: Optional[str] = None
    multiplier: Optional[str] = None
    jackpot: Optional[NonNegativeInt] = None
    cash_value: Optional[NonNegativeInt] = Field(None, alias="cashValue")
    next_draw: Optional[str] = Field(None, alias="nextDraw")
    source: Optional[str] = None
    ok: bool = True
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_outcome(self) -> "DrawRecord":
        return _check_balls(_check_outcome(self, self.DATA_FIELDS))

    @classmethod
    def failed(cls, game: str, error: str) -> "DrawRecord":
        return cls(game=game, ok=False, error=error)


class SessionedDrawRecord(LottoBaseModel):
    """Draw results for a game drawn several times a day (midday/evening/night)."""

    DATA_FIELDS: ClassVar[Tuple[str, ...]] = ("midday", "evening", "night", "source")

    game: str
    midday: Optional[DrawRecord] = None
    evening: Optional[DrawRecord] = None
    night: Optional[DrawRecord] = None
    source: Optional[str] = None
    ok: bool = True
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_outcome(self) -> "SessionedDrawRecord":
        return _check_outcome(self, self.DATA_FIELDS)

    @model_validator(mode="after")
    def check_sessions(self) -> "SessionedDrawRecord":
        game = _lookup_game(self.game)
        if not game.sessions or game.label != self.game:
            raise ValueError(f"{self.game} is not drawn in sessions")
        for session in game.sessions:
            record = getattr(self, session.lower())
            if record is not None and record.game != f"{game.label} {session}":
                raise ValueError(f"{session.lower()} holds a {record.game} record")
        return self

    @classmethod
    def failed(cls, game: str, error: str) -> "SessionedDrawRecord":
        return cls(game=game, ok=False, error=error)


AnyDrawRecord = Union[DrawRecord, SessionedDrawRecord]


class SourceInfo(LottoBaseModel):
    name: str
    status: str
    fetch_duration: float = Field(..., alias="fetchDuration")
    error_message: Optional[str] = Field(None, alias="errorMessage")


class AggregatedResponse(LottoBaseModel):
    ok: bool = True
    fetched_at: datetime = Field(..., alias="fetchedAt")
    games: Dict[str, AnyDrawRecord]
    source_info: List[SourceInfo] = Field(..., alias="sourceInfo")
