"""Transient, phase-scoped payloads.

Each phase that needs to remember something between two inputs gets its
own small record. The payload is replaced on every phase entry, so a
handler only ever sees the record written by the phase right before it.
"""

from dataclasses import asdict, dataclass
from typing import Optional, Union


class InvalidPhaseDataError(Exception):
    """Raised when a handler finds the wrong kind of phase data."""
    pass


@dataclass(frozen=True)
class KickData:
    """Where a kickoff landed (may be inside an endzone)."""

    landing: int

    kind = "kick"


@dataclass(frozen=True)
class PuntData:
    """Where a punt landed (may be inside an endzone)."""

    landing: int

    kind = "punt"


@dataclass(frozen=True)
class RunData:
    """Players the offense sent to the flip-cup table."""

    offense_players: int
    is_sneak: bool = False

    kind = "run"

    @property
    def defense_players(self) -> int:
        """Defense always fields one more player (1v1 on a sneak)."""
        if self.is_sneak:
            return 1
        return self.offense_players + 1


@dataclass(frozen=True)
class IncompletePassData:
    """Spot of the incompletion the defense gets a shot at."""

    spot: int

    kind = "incomplete"


PhaseData = Optional[Union[KickData, PuntData, RunData, IncompletePassData]]

_KINDS = {
    KickData.kind: KickData,
    PuntData.kind: PuntData,
    RunData.kind: RunData,
    IncompletePassData.kind: IncompletePassData,
}


def expect(data: PhaseData, expected: type) -> object:
    """Return `data` if it is an `expected` record, else raise."""
    if not isinstance(data, expected):
        raise InvalidPhaseDataError(
            f"Expected {expected.__name__} phase data, found {type(data).__name__}"
        )
    return data


def phase_data_to_dict(data: PhaseData) -> Optional[dict]:
    """Convert phase data to a tagged dictionary."""
    if data is None:
        return None
    payload = {"kind": data.kind}
    payload.update(asdict(data))
    return payload


def phase_data_from_dict(payload: Optional[dict]) -> PhaseData:
    """Create phase data from a tagged dictionary."""
    if not payload:
        return None
    fields = dict(payload)
    cls = _KINDS.get(fields.pop("kind", None))
    if cls is None:
        raise InvalidPhaseDataError(f"Unknown phase data kind in {payload!r}")
    return cls(**fields)
