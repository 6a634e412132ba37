from dataclasses import dataclass
from typing import List, Optional

from config import ThresholdConfig
from indicators import CraniovertebralIndicator, ForwardShoulderIndicator, IndicatorBase, NeckFlexionIndicator

# (snapshot key, display label), in display order.
INDICATOR_LABELS = (
    ("neck_flexion", "Neck flexion"),
    ("cva", "CVA"),
    ("fsa", "FSA"),
)


@dataclass
class IndicatorEntry:
    key: str
    label: str
    indicator: IndicatorBase
    uses_calibration: bool = False


def get_indicator_entries(thresholds: Optional[ThresholdConfig] = None) -> List[IndicatorEntry]:
    thresholds = thresholds or ThresholdConfig()
    labels = dict(INDICATOR_LABELS)
    return [
        IndicatorEntry("neck_flexion", labels["neck_flexion"], NeckFlexionIndicator(thresholds.neck_flexion), uses_calibration=True),
        IndicatorEntry("cva", labels["cva"], CraniovertebralIndicator(thresholds.cva)),
        IndicatorEntry("fsa", labels["fsa"], ForwardShoulderIndicator(thresholds.fsa)),
    ]
