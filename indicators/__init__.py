from indicators.base import IndicatorBase, Metric, MetricStatus, classify
from indicators.cva import CraniovertebralIndicator
from indicators.fsa import ForwardShoulderIndicator
from indicators.neck_flexion import NeckFlexionIndicator

__all__ = [
    "IndicatorBase",
    "Metric",
    "MetricStatus",
    "classify",
    "NeckFlexionIndicator",
    "CraniovertebralIndicator",
    "ForwardShoulderIndicator",
]
