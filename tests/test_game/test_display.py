"""Tests for display helpers."""

from beerball.core.enums import Phase, PlayOutcome, TurnoverReason
from beerball.core.models.game import PlayResult
from beerball.core.models.phase_data import KickData, PuntData
from beerball.events import GameEndEvent, PhaseChangedEvent, ScoringEvent, TurnoverEvent
from beerball.game.display import (
    GAIN,
    LOSS,
    NEUTRAL,
    announcement,
    cup_effects,
    cup_label,
    describe_play,
    down_and_distance,
)


def _effects(state) -> dict:
    return {effect.cup: (effect.label, effect.tone) for effect in cup_effects(state)}


class TestCupLabel:
    """Tests for yard line labels."""

    def test_midfield(self, new_game):
        assert cup_label(0, new_game) == "50"

    def test_team_territory(self, new_game):
        assert cup_label(-5, new_game) == "HOM 25"
        assert cup_label(9, new_game) == "AWA 5"


class TestCupEffects:
    """Tests for per-cup effect labels."""

    def test_no_targets_outside_shooting_phases(self, state_at):
        assert cup_effects(state_at()) == []

    def test_kick_labels(self, state_at):
        effects = _effects(state_at(ball=-5, offense=1, phase=Phase.KICKOFF))
        assert len(effects) == 19
        assert effects[-1] == ("+10", NEUTRAL)
        assert effects[9] == ("+20", GAIN)
        assert effects[-9] == ("+2", LOSS)

    def test_punt_labels_follow_offense(self, state_at):
        effects = _effects(state_at(ball=2, offense=-1, phase=Phase.PUNT))
        assert effects[1] == ("+10", NEUTRAL)
        assert effects[-9] == ("+20", GAIN)

    def test_onside_zone(self, state_at):
        effects = _effects(state_at(ball=-5, offense=1, phase=Phase.ONSIDE_KICK))
        assert [cup for cup, (label, _) in effects.items() if label == "REC"] == [-3, -2, -1]

    def test_kickoff_return(self, state_at):
        state = state_at(offense=1, phase=Phase.KICKOFF_RETURN)
        state.phase_data = KickData(landing=-15)
        effects = _effects(state)
        assert effects[-9] == ("REC", LOSS)
        assert effects[9] == ("+10", GAIN)
        assert effects[-1] == ("REC", LOSS)
        assert effects[0] == ("+1", GAIN)

    def test_return_touchdown_label(self, state_at):
        state = state_at(offense=1, phase=Phase.KICKOFF_RETURN)
        state.phase_data = KickData(landing=3)
        assert _effects(state)[9] == ("TD", GAIN)

    def test_punt_return_uses_receiving_team(self, state_at):
        state = state_at(offense=1, phase=Phase.PUNT_RETURN)
        state.phase_data = PuntData(landing=6)
        effects = _effects(state)
        assert effects[-9] == ("+10", GAIN)
        assert effects[2] == ("-1", LOSS)
        assert effects[9] == ("REC", LOSS)

    def test_throw_zones(self, state_at):
        effects = _effects(state_at(offense=1, phase=Phase.THROW_PLAY))
        assert effects[-4] == ("FUM", LOSS)
        assert effects[-3] == ("-2", LOSS)
        assert effects[-1] == ("0", NEUTRAL)
        assert effects[3] == ("+4", GAIN)
        assert effects[4] == ("INC", NEUTRAL)
        assert effects[5] == ("INT", LOSS)
        assert effects[7] == ("+6", GAIN)
        assert effects[8] == ("+9", GAIN)
        assert effects[9] == ("TD", GAIN)

    def test_throw_zones_team_two(self, state_at):
        effects = _effects(state_at(offense=-1, phase=Phase.THROW_PLAY))
        assert effects[-5] == ("INT", LOSS)
        assert effects[5] == ("FUM", LOSS)

    def test_defense_shot(self, state_at):
        effects = _effects(state_at(offense=1, phase=Phase.INCOMPLETE_DEFENSE_SHOT))
        assert effects[-9] == ("FUM", GAIN)
        assert effects[-5] == ("-3", GAIN)
        assert effects[3] == ("-1", GAIN)

    def test_field_goal(self, state_at):
        effects = _effects(state_at(phase=Phase.FIELD_GOAL_ATTEMPT))
        assert set(effects.values()) == {("FG", GAIN)}


class TestDownAndDistance:
    """Tests for the scoreboard headline."""

    def test_coin_toss(self, new_game):
        assert down_and_distance(new_game).headline == "Coin Toss"

    def test_down_and_distance(self, state_at):
        summary = down_and_distance(state_at(ball=-2, offense=1, down=2, marker=0))
        assert summary.headline == "2nd & 2"
        assert summary.situation == "Home ball at HOM 40"

    def test_goal_to_go(self, state_at):
        summary = down_and_distance(state_at(ball=8, offense=1, marker=10))
        assert summary.headline == "1st & Goal"

    def test_kickoff(self, state_at):
        summary = down_and_distance(state_at(offense=-1, phase=Phase.KICKOFF_CHOICE))
        assert summary.headline == "Kickoff"
        assert summary.situation == "Away kicking"

    def test_conversion(self, state_at):
        summary = down_and_distance(state_at(offense=-1, phase=Phase.TOUCHDOWN_CONVERSION))
        assert summary.headline == "Touchdown!"


class TestDescribePlay:
    """Tests for play descriptions."""

    def test_no_play(self, new_game):
        assert describe_play(None, new_game) == ""

    def test_gain(self, new_game):
        result = PlayResult(1, Phase.RUN_PLAY, 0, 2, PlayOutcome.GAIN)
        assert describe_play(result, new_game) == "Home gain of 10 yards to AWA 40"

    def test_loss(self, new_game):
        result = PlayResult(-1, Phase.RUN_PLAY, 0, 1, PlayOutcome.LOSS)
        assert describe_play(result, new_game) == "Away loss of 5 yards to AWA 45"

    def test_touchdown(self, new_game):
        result = PlayResult(-1, Phase.THROW_PLAY, -3, -9, PlayOutcome.TOUCHDOWN, points=6)
        assert describe_play(result, new_game) == "Touchdown Away!"

    def test_defensive_touchdown(self, new_game):
        result = PlayResult(
            -1, Phase.THROW_PLAY, -8, -9, PlayOutcome.TOUCHDOWN, TurnoverReason.FUMBLE, 6
        )
        assert describe_play(result, new_game) == "Fumble returned for a touchdown by Away!"

    def test_safety(self, new_game):
        result = PlayResult(1, Phase.RUN_PLAY, -8, -9, PlayOutcome.SAFETY, points=2)
        assert describe_play(result, new_game) == "Safety! Away scores 2"

    def test_missed_extra_point(self, new_game):
        result = PlayResult(1, Phase.EXTRA_POINT, 9, 9, PlayOutcome.EXTRA_POINT, points=0)
        assert describe_play(result, new_game) == "Home extra point is no good"

    def test_interception(self, new_game):
        result = PlayResult(
            1, Phase.THROW_PLAY, 2, 2, PlayOutcome.TURNOVER, TurnoverReason.INTERCEPTION
        )
        assert describe_play(result, new_game) == "Intercepted, ball at AWA 40"


class TestAnnouncement:
    """Tests for event announcements."""

    def test_score(self, new_game):
        event = ScoringEvent(team=-1, points=3, scoring_type="FG")
        assert announcement(event, new_game) == "Away FG (+3)"

    def test_turnover(self, new_game):
        event = TurnoverEvent(losing_team=-1, gaining_team=1, turnover_type="MISSED_FIELD_GOAL")
        assert announcement(event, new_game) == "Turnover (missed field goal), Home ball"

    def test_game_end(self, new_game):
        event = GameEndEvent(winner=1, final_team1_score=21, final_team2_score=14)
        assert announcement(event, new_game) == "Final: Home wins 21-14"

    def test_tied_at_end_of_regulation(self, new_game):
        event = GameEndEvent(winner=None, final_team1_score=7, final_team2_score=7)
        assert announcement(event, new_game) == "End of regulation, tied 7-7"

    def test_other_events_are_silent(self, new_game):
        assert announcement(PhaseChangedEvent(), new_game) is None
