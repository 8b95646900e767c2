import numpy as np
import pytest

from sealcut.models import (
    BlackInkClassifier,
    DetectionMode,
    MixedInkClassifier,
    ProcessingSettings,
    RedInkClassifier,
    get_classifier,
)

SCENARIO = ProcessingSettings(lightness_threshold=220, red_sensitivity=50, chroma_threshold=15)


def test_red_mode_keeps_saturated_red():
    assert RedInkClassifier(SCENARIO).is_ink(200, 30, 30)


def test_red_mode_rejects_near_white():
    assert not RedInkClassifier(SCENARIO).is_ink(250, 250, 250)
    # Too light even though it is clearly reddish
    assert not RedInkClassifier(SCENARIO).is_ink(255, 230, 230)


def test_red_mode_ratio_follows_sensitivity():
    # 150 > 100 * 1.4 but not > 100 * 1.6
    loose = ProcessingSettings(red_sensitivity=40, chroma_threshold=0)
    strict = ProcessingSettings(red_sensitivity=60, chroma_threshold=0)
    assert RedInkClassifier(loose).is_ink(150, 100, 90)
    assert not RedInkClassifier(strict).is_ink(150, 100, 90)


def test_red_mode_chroma_margin():
    s = ProcessingSettings(red_sensitivity=0, chroma_threshold=15)
    # Reddish, but r - max(g, b) is only 10
    assert not RedInkClassifier(s).is_ink(60, 50, 40)
    assert RedInkClassifier(s.replace(chroma_threshold=10)).is_ink(60, 50, 40)


def test_black_mode_keeps_dark_grey():
    assert BlackInkClassifier(ProcessingSettings()).is_ink(20, 20, 20)


def test_black_mode_inverts_lightness_threshold():
    pixel = (40, 40, 40)
    # Cutoff 255 - 220 = 35 rejects, 255 - 200 = 55 accepts
    assert not BlackInkClassifier(ProcessingSettings(lightness_threshold=220)).is_ink(*pixel)
    assert BlackInkClassifier(ProcessingSettings(lightness_threshold=200)).is_ink(*pixel)


def test_black_mode_uses_sensitivity_as_saturation_tolerance():
    pixel = (10, 20, 40)  # spread 30
    assert not BlackInkClassifier(ProcessingSettings(red_sensitivity=50)).is_ink(*pixel)
    assert BlackInkClassifier(ProcessingSettings(red_sensitivity=80)).is_ink(*pixel)


def test_black_mode_rejects_red_ink():
    assert not BlackInkClassifier(ProcessingSettings()).is_ink(200, 30, 30)


def test_mixed_mode_keeps_either_ink():
    clf = MixedInkClassifier(ProcessingSettings(detection_mode="mixed"))
    assert clf.is_ink(200, 30, 30)
    assert clf.is_ink(20, 20, 20)
    assert not clf.is_ink(245, 240, 230)


@pytest.mark.parametrize("mode, cls", [
    ("red", RedInkClassifier),
    ("black", BlackInkClassifier),
    ("mixed", MixedInkClassifier),
])
def test_get_classifier_dispatches_on_mode(mode, cls):
    clf = get_classifier(ProcessingSettings(detection_mode=mode))
    assert isinstance(clf, cls)
    assert clf.settings.detection_mode is DetectionMode(mode)


@pytest.mark.parametrize("mode", ["red", "black", "mixed"])
@pytest.mark.parametrize("sensitivity, lightness_threshold, chroma", [
    (0, 255, 0),
    (50, 220, 15),
    (100, 120, 60),
])
def test_mask_agrees_with_scalar_rule(mode, sensitivity, lightness_threshold, chroma):
    settings = ProcessingSettings(
        detection_mode=mode,
        red_sensitivity=sensitivity,
        lightness_threshold=lightness_threshold,
        chroma_threshold=chroma,
    )
    clf = get_classifier(settings)
    rng = np.random.default_rng(7)
    rgb = rng.integers(0, 256, size=(24, 24, 3), dtype=np.uint8)
    # Make sure both inks are represented
    rgb[0, 0] = (200, 30, 30)
    rgb[0, 1] = (5, 5, 5)

    mask = clf.mask(rgb)
    expected = np.array([[clf.is_ink(*px) for px in row] for row in rgb])
    assert mask.dtype == bool
    assert np.array_equal(mask, expected)


def test_mask_ignores_alpha_channel():
    rgba = np.zeros((1, 2, 4), dtype=np.uint8)
    rgba[0, 0] = (200, 30, 30, 0)
    rgba[0, 1] = (200, 30, 30, 255)
    assert RedInkClassifier(SCENARIO).mask(rgba).tolist() == [[True, True]]
