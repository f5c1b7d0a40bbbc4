"""Tests for game state models."""

import pytest

from beerball.core.enums import Phase, PlayOutcome, TurnoverReason
from beerball.core.models.game import (
    GameState,
    OvertimeState,
    PlayResult,
    ShootoutState,
    TeamState,
    team_sign,
)
from beerball.core.models.phase_data import (
    IncompletePassData,
    InvalidPhaseDataError,
    KickData,
    RunData,
    expect,
    phase_data_from_dict,
    phase_data_to_dict,
)


class TestGameState:
    """Tests for GameState."""

    def test_new_game_defaults(self, new_game):
        assert new_game.phase == Phase.COIN_TOSS
        assert new_game.quarter == 1
        assert new_game.possession == 1
        assert new_game.ball_position == 0
        assert new_game.first_down_marker == 3
        assert new_game.team1.score == 0
        assert new_game.team2.score == 0
        assert not new_game.is_overtime

    def test_team_by_sign(self, new_game):
        assert new_game.team(1) is new_game.team1
        assert new_game.team(-1) is new_game.team2
        assert new_game.offense is new_game.team1
        assert new_game.defense is new_game.team2
        assert new_game.defense_team == -1

    def test_leader(self, new_game):
        assert new_game.is_tied
        assert new_game.leader is None
        new_game.team2.score = 3
        assert new_game.leader == -1

    def test_copy_is_independent(self, new_game):
        copied = new_game.copy()
        copied.team1.score = 6
        copied.ball_position = 4
        assert new_game.team1.score == 0
        assert new_game.ball_position == 0

    def test_serialization_preserves_state(self, state_at):
        state = state_at(ball=-4, offense=-1, down=3, phase=Phase.KICKOFF_RETURN)
        state.phase_data = KickData(landing=12)
        state.last_play_result = PlayResult(
            team=-1,
            phase=Phase.THROW_PLAY,
            begin=0,
            end=-4,
            outcome=PlayOutcome.GAIN,
        )
        state.overtime = OvertimeState(first_offense=1, fg_shootout=ShootoutState(first_team=1))
        state.play_count = 7

        restored = GameState.from_dict(state.to_dict())

        assert restored == state

    def test_str(self, new_game):
        assert str(new_game) == "HOM 0 - AWA 0 (Q1, COIN_TOSS)"


class TestPlayResult:
    """Tests for PlayResult."""

    def test_yards_in_attacking_direction(self):
        result = PlayResult(-1, Phase.RUN_PLAY, 2, -1, PlayOutcome.GAIN)
        assert result.yards == 3

    def test_turnover_reason_round_trip(self):
        result = PlayResult(1, Phase.THROW_PLAY, 0, 0, PlayOutcome.TURNOVER, TurnoverReason.INTERCEPTION)
        assert PlayResult.from_dict(result.to_dict()) == result


class TestTeams:
    """Tests for team helpers."""

    def test_abbreviation(self):
        assert TeamState("Falcons").abbreviation == "FAL"

    @pytest.mark.parametrize("value,expected", [(1, 1), (-1, -1), (2, -1), ("2", -1), ("1", 1)])
    def test_team_sign(self, value, expected):
        assert team_sign(value) == expected

    @pytest.mark.parametrize("value", [0, 3, "x"])
    def test_team_sign_rejects_unknown(self, value):
        with pytest.raises(ValueError):
            team_sign(value)


class TestPhaseData:
    """Tests for phase-scoped payloads."""

    def test_defense_players(self):
        assert RunData(offense_players=3).defense_players == 4
        assert RunData(offense_players=1, is_sneak=True).defense_players == 1

    def test_tagged_dict(self):
        payload = phase_data_to_dict(IncompletePassData(spot=-2))
        assert payload == {"kind": "incomplete", "spot": -2}
        assert phase_data_from_dict(payload) == IncompletePassData(spot=-2)

    def test_none(self):
        assert phase_data_to_dict(None) is None
        assert phase_data_from_dict(None) is None

    def test_unknown_kind(self):
        with pytest.raises(InvalidPhaseDataError):
            phase_data_from_dict({"kind": "bogus"})

    def test_expect_wrong_kind(self):
        with pytest.raises(InvalidPhaseDataError):
            expect(KickData(landing=3), RunData)
