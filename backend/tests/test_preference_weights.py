import pytest

from journi.schemas.candidates import Preferences
from journi.services.recommendation import calculate_preference_weights
from journi.services.recommendation.config import VIBE_PREFERENCE_WEIGHTS, Vibe

UNIFORM = {"food": 0.2, "outdoors": 0.2, "museums": 0.2, "nightlife": 0.2, "relaxation": 0.2}


def test_adventure():
    assert calculate_preference_weights(Preferences(vibe="adventure")) == {
        "food": 0.2,
        "outdoors": 0.5,
        "museums": 0.1,
        "nightlife": 0.1,
        "relaxation": 0.1,
    }


def test_no_vibe_is_uniform():
    assert calculate_preference_weights(Preferences()) == UNIFORM


def test_unknown_vibe_is_uniform():
    assert calculate_preference_weights(Preferences(vibe="other")) == UNIFORM


def test_vibe_match_is_case_insensitive():
    weights = calculate_preference_weights(Preferences(vibe="PARTY"))
    assert weights["nightlife"] == 0.5


def test_relaxing_and_luxury_share_a_row():
    assert calculate_preference_weights(Preferences(vibe="luxury")) == calculate_preference_weights(
        Preferences(vibe="relaxing")
    )


def test_other_fields_do_not_change_weights():
    bare = calculate_preference_weights(Preferences(vibe="cultural"))
    full = calculate_preference_weights(
        Preferences(vibe="cultural", budget=3000, purpose="honeymoon", food=["vegan"], pace="slow")
    )
    assert bare == full
    assert full["museums"] == 0.4


@pytest.mark.parametrize("vibe", list(Vibe))
def test_every_row_sums_to_one(vibe):
    assert VIBE_PREFERENCE_WEIGHTS[vibe].total == pytest.approx(1.0)
    assert sum(calculate_preference_weights(Preferences(vibe=vibe.value)).values()) == pytest.approx(1.0)


def test_padded_vibe_is_not_recognized():
    assert calculate_preference_weights(Preferences(vibe=" relaxing ")) == UNIFORM
