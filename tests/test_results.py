"""Unit tests for step outcome models (mernkit.results)."""

from __future__ import annotations

import pytest

from mernkit.results import ProvisionResult, Severity, StepResult


class TestStepResult:
    @pytest.mark.unit
    def test_success(self):
        result = StepResult.success("root")
        assert result.ok
        assert result.severity is None
        assert not result.is_fatal

    @pytest.mark.unit
    def test_fatal(self):
        result = StepResult.fatal("root", "Failed to create root directory: boom")
        assert not result.ok
        assert result.severity is Severity.FATAL
        assert result.is_fatal
        assert "boom" in result.message

    @pytest.mark.unit
    def test_recoverable_is_not_fatal(self):
        result = StepResult.recoverable("git-init", "skipped")
        assert not result.ok
        assert result.severity is Severity.RECOVERABLE
        assert not result.is_fatal


class TestProvisionResult:
    @pytest.mark.unit
    def test_empty_is_success(self):
        result = ProvisionResult(project_name="shop")
        assert result.success
        assert result.failed_step is None

    @pytest.mark.unit
    def test_warning_does_not_fail_run(self):
        result = ProvisionResult(
            project_name="shop",
            steps=[StepResult.success("root"), StepResult.recoverable("git-init", "skipped")],
        )
        assert result.success
        assert [w.step for w in result.warnings] == ["git-init"]

    @pytest.mark.unit
    def test_fatal_step_reported(self):
        result = ProvisionResult(
            project_name="shop",
            steps=[StepResult.success("root"), StepResult.fatal("dependencies", "npm failed")],
        )
        assert not result.success
        assert result.failed_step == "dependencies"

    @pytest.mark.unit
    def test_serialises_computed_fields(self):
        dumped = ProvisionResult(project_name="shop").model_dump()
        assert dumped["success"] is True
        assert dumped["failed_step"] is None
