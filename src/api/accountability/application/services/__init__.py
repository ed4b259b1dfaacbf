"""Application services for the accountability bounded context.

Application services orchestrate domain entities and the tracker store to
fulfill use cases. They are the "front door" to the accountability context.
"""

from accountability.application.services.analytics_service import AnalyticsService
from accountability.application.services.group_service import GroupService
from accountability.application.services.member_service import MemberService
from accountability.application.services.task_service import TaskService

__all__ = [
    "AnalyticsService",
    "GroupService",
    "MemberService",
    "TaskService",
]
