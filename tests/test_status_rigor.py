"""Tests for status markers and rigor tiers."""

import pytest

from reftruth.probes.models import Toggles
from reftruth.scoring.rigor import (
    RIGOR_GUIDANCE,
    ProbeStatus,
    RigorLevel,
    rigor_from_stakes,
    status_from_depth,
)

SCAN_ON = Toggles(depth_integrity_scan=True)
SCAN_OFF = Toggles(depth_integrity_scan=False)


class TestStatusFromDepth:
    """Tests for the status marker."""

    def test_shallow(self):
        assert status_from_depth(49, SCAN_ON) is ProbeStatus.SHALLOW
        assert status_from_depth(0, SCAN_OFF) is ProbeStatus.SHALLOW

    def test_mid_band_with_integrity_scan(self):
        assert status_from_depth(65, SCAN_ON) is ProbeStatus.RESONANT

    def test_mid_band_without_integrity_scan(self):
        assert status_from_depth(65, SCAN_OFF) is ProbeStatus.STRONG

    @pytest.mark.parametrize("toggles", [SCAN_ON, SCAN_OFF])
    def test_strong_regardless_of_toggles(self, toggles):
        assert status_from_depth(95, toggles) is ProbeStatus.STRONG
        assert status_from_depth(80, toggles) is ProbeStatus.STRONG

    def test_band_edges(self):
        assert status_from_depth(50, SCAN_ON) is ProbeStatus.RESONANT
        assert status_from_depth(79, SCAN_ON) is ProbeStatus.RESONANT

    def test_marker_values_and_labels(self):
        assert ProbeStatus.SHALLOW.value == "△∅"
        assert ProbeStatus.RESONANT.value == "⟁~"
        assert ProbeStatus.STRONG.value == "OK"
        assert ProbeStatus.RESONANT.label == "resonant"


class TestRigor:
    """Tests for stakes-driven rigor."""

    @pytest.mark.parametrize(
        "stakes,level",
        [
            (0, RigorLevel.LIGHT),
            (33, RigorLevel.LIGHT),
            (34, RigorLevel.MEDIUM),
            (66, RigorLevel.MEDIUM),
            (67, RigorLevel.HIGH),
            (100, RigorLevel.HIGH),
        ],
    )
    def test_tiers(self, stakes, level):
        assert rigor_from_stakes(stakes).level is level

    def test_one_guidance_sentence_per_tier(self):
        for level in RigorLevel:
            assert len(RIGOR_GUIDANCE[level]) > 0

        rigor = rigor_from_stakes(90)
        assert rigor.guidance == (RIGOR_GUIDANCE[RigorLevel.HIGH],)
        assert "pre-register" in rigor.guidance[0]

    def test_to_dict(self):
        assert rigor_from_stakes(10).to_dict() == {
            "level": "Light",
            "guidance": [
                "2+ concrete pieces of evidence, 1 counterexample, date at least month+year."
            ],
        }
