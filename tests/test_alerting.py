"""
Verified-Source Alert Threshold Tests
"""

import pytest

from story_engine.alerting import DEFAULT_VERIFIED_THRESHOLD, VerifiedSourceAlertPolicy
from story_engine.contracts import Timestamp
from tests.fixtures import NOON


class TestThresholdCrossing:

    def test_default_threshold(self):
        assert VerifiedSourceAlertPolicy().threshold == DEFAULT_VERIFIED_THRESHOLD == 3

    def test_fires_on_upward_crossing(self):
        trigger = VerifiedSourceAlertPolicy().check("story_1", 2, 3, at=Timestamp(value=NOON))

        assert trigger is not None
        assert trigger.story_id == "story_1"
        assert trigger.previous_verified_count == 2
        assert trigger.verified_count == 3
        assert trigger.triggered_at == Timestamp(value=NOON)

    def test_fires_when_jumping_past_threshold(self):
        assert VerifiedSourceAlertPolicy().check("story_1", 0, 5) is not None

    @pytest.mark.parametrize("previous,current", [
        (0, 2),   # still below
        (3, 4),   # already above
        (3, 3),   # unchanged
        (4, 2),   # dropped back
    ])
    def test_does_not_fire(self, previous, current):
        assert VerifiedSourceAlertPolicy().check("story_1", previous, current) is None

    def test_custom_threshold(self):
        policy = VerifiedSourceAlertPolicy(threshold=5)
        assert policy.check("story_1", 4, 5) is not None
        assert policy.check("story_1", 2, 3) is None

    def test_threshold_must_be_positive(self):
        with pytest.raises(ValueError):
            VerifiedSourceAlertPolicy(threshold=0)
