"""
Evaluation engines.

This package contains all the engines that perform the core business logic
of the degree audit system. None of them do I/O.
"""

from .stream import StreamDetector
from .partition import SubjectPartitioner, department_group
from .requirements import RequirementEvaluator, RuleContext, RULE_SETS
from .honours import HonoursClassifier
from . import aggregation

__all__ = [
    "StreamDetector",
    "SubjectPartitioner",
    "department_group",
    "RequirementEvaluator",
    "RuleContext",
    "RULE_SETS",
    "HonoursClassifier",
    "aggregation",
]
