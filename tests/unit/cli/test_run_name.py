"""Unit tests for run targeting."""

import pytest

from queue_cli.cli.run_name import MISSING_RUN_MESSAGE, RunName
from queue_cli.core.exceptions import UsageError
from queue_cli.queries import PlanQueries, PodQueries


class TestResolvePrefix:
    """Tests for RunName.resolve_prefix."""

    @pytest.mark.parametrize("name", ["nightly", "run-1", "a", "Spark_Job.2"])
    def test_prefix_for_plain_names(self, name: str) -> None:
        run_name = RunName()
        run_name.set(name)
        assert run_name.resolve_prefix() == "v1/run/" + name + "/"

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_name_raises_usage_error(self, value: str | None) -> None:
        run_name = RunName(value)

        with pytest.raises(UsageError) as exc_info:
            run_name.resolve_prefix()

        assert exc_info.value.message == MISSING_RUN_MESSAGE
        assert exc_info.value.code == "CLI_USAGE_ERROR"

    def test_name_is_escaped(self) -> None:
        run_name = RunName("team a/nightly")
        assert run_name.resolve_prefix() == "v1/run/team%20a%2Fnightly/"

    def test_set_empty_clears_previous_name(self) -> None:
        run_name = RunName("nightly")
        run_name.set(None)

        with pytest.raises(UsageError):
            run_name.resolve_prefix()


class TestSharedPrefixCallback:
    """One RunName drives every query object it was installed into."""

    def test_change_is_seen_by_all_holders(self) -> None:
        run_name = RunName("first")
        plan_queries = PlanQueries(prefix_cb=run_name.resolve_prefix)
        pod_queries = PodQueries(prefix_cb=run_name.resolve_prefix)

        assert plan_queries.path("plans") == "v1/run/first/plans"
        assert pod_queries.path("pod") == "v1/run/first/pod"

        run_name.set("second")

        assert plan_queries.path("plans") == "v1/run/second/plans"
        assert pod_queries.path("pod") == "v1/run/second/pod"

    def test_callback_is_not_evaluated_at_construction(self) -> None:
        run_name = RunName()

        queries = PlanQueries(prefix_cb=run_name.resolve_prefix)

        with pytest.raises(UsageError):
            queries.path("plans")

    def test_default_prefix_without_callback(self) -> None:
        assert PlanQueries().path("plans", "deploy") == "v1/plans/deploy"
