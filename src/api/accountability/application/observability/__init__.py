"""Domain-Oriented Observability for the accountability application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from accountability.application.observability.analytics_service_probe import (
    AnalyticsServiceProbe,
    DefaultAnalyticsServiceProbe,
)
from accountability.application.observability.group_service_probe import (
    DefaultGroupServiceProbe,
    GroupServiceProbe,
)
from accountability.application.observability.member_service_probe import (
    DefaultMemberServiceProbe,
    MemberServiceProbe,
)
from accountability.application.observability.task_service_probe import (
    DefaultTaskServiceProbe,
    TaskServiceProbe,
)

__all__ = [
    "AnalyticsServiceProbe",
    "DefaultAnalyticsServiceProbe",
    "GroupServiceProbe",
    "DefaultGroupServiceProbe",
    "MemberServiceProbe",
    "DefaultMemberServiceProbe",
    "TaskServiceProbe",
    "DefaultTaskServiceProbe",
]
