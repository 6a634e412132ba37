import pytest

from landmarks import extract_landmarks
from pose_types import LANDMARK_INDEX, Landmark


def test_extracts_named_points(upright_frame):
    lm = extract_landmarks(upright_frame)
    assert lm.nose is upright_frame[0]
    assert lm.left_ear is upright_frame[7]
    assert lm.right_ear is upright_frame[8]
    assert lm.left_eye is upright_frame[LANDMARK_INDEX["left_eye"]]
    assert lm.right_eye is upright_frame[LANDMARK_INDEX["right_eye"]]
    assert lm.left_shoulder is upright_frame[11]
    assert lm.right_shoulder is upright_frame[12]
    assert lm.left_hip is upright_frame[23]
    assert lm.right_hip is upright_frame[24]


def test_derived_points(make_frame):
    frame = make_frame({
        "left_shoulder": (0.4, 0.5),
        "right_shoulder": (0.6, 0.5),
        "left_ear": (0.45, 0.3),
        "right_ear": (0.55, 0.3),
    })
    lm = extract_landmarks(frame)
    assert (lm.neck.x, lm.neck.y) == pytest.approx((0.5, 0.5))
    assert (lm.mid_ear.x, lm.mid_ear.y) == pytest.approx((0.5, 0.3))
    assert lm.mid_eye is None


def test_one_missing_shoulder_drops_neck(make_frame):
    lm = extract_landmarks(make_frame({"left_shoulder": (0.4, 0.5)}))
    assert lm.left_shoulder is not None
    assert lm.neck is None


def test_empty_and_short_frames():
    lm = extract_landmarks([])
    assert lm.nose is None
    assert lm.neck is None

    short = [Landmark(0.5, 0.2, 0.0, 1.0)] + [None] * 10
    lm = extract_landmarks(short)
    assert lm.nose is short[0]
    assert lm.left_shoulder is None
    assert lm.right_hip is None
