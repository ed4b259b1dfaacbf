"""Unit tests for the default application service probes."""

from unittest.mock import Mock

from accountability.application.observability import (
    DefaultAnalyticsServiceProbe,
    DefaultGroupServiceProbe,
    DefaultMemberServiceProbe,
    DefaultTaskServiceProbe,
)


class TestDefaultGroupServiceProbe:
    def test_creates_with_default_logger(self):
        probe = DefaultGroupServiceProbe()
        assert probe._logger is not None

    def test_group_created_logs_info(self):
        mock_logger = Mock()
        probe = DefaultGroupServiceProbe(logger=mock_logger)

        probe.group_created(group_id="01ABC", name="Alpha")

        mock_logger.info.assert_called_once_with(
            "group_created", group_id="01ABC", name="Alpha"
        )

    def test_group_creation_failed_logs_warning(self):
        mock_logger = Mock()
        probe = DefaultGroupServiceProbe(logger=mock_logger)

        probe.group_creation_failed(name="Alpha", error="duplicate")

        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "group_creation_failed"
        assert call_args[1]["error"] == "duplicate"


class TestDefaultMemberServiceProbe:
    def test_member_removed_logs_task_cascade(self):
        mock_logger = Mock()
        probe = DefaultMemberServiceProbe(logger=mock_logger)

        probe.member_removed(group_id="g", member_id="m", tasks_removed=3)

        call_args = mock_logger.info.call_args
        assert call_args[0][0] == "member_removed"
        assert call_args[1]["tasks_removed"] == 3


class TestDefaultTaskServiceProbe:
    def test_task_completed_logs_points(self):
        mock_logger = Mock()
        probe = DefaultTaskServiceProbe(logger=mock_logger)

        probe.task_completed(task_id="t", member_id="m", points=10, total_points=25)

        call_args = mock_logger.info.call_args
        assert call_args[0][0] == "task_completed"
        assert call_args[1]["points"] == 10
        assert call_args[1]["total_points"] == 25

    def test_task_completion_failed_logs_warning(self):
        mock_logger = Mock()
        probe = DefaultTaskServiceProbe(logger=mock_logger)

        probe.task_completion_failed(task_id="t", error="already completed")

        mock_logger.warning.assert_called_once_with(
            "task_completion_failed", task_id="t", error="already completed"
        )


class TestDefaultAnalyticsServiceProbe:
    def test_logs_at_debug(self):
        mock_logger = Mock()
        probe = DefaultAnalyticsServiceProbe(logger=mock_logger)

        probe.dashboard_summary_computed(total_groups=2, total_members=5)

        mock_logger.debug.assert_called_once_with(
            "dashboard_summary_computed", total_groups=2, total_members=5
        )
