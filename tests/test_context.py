from __future__ import annotations

from pathlib import Path

import pytest

from podreport.config import PodReportConfig
from podreport.context import PodReportContext


@pytest.mark.unit
class TestPodReportContext:
    """Tests for PodReportContext."""

    def test_default_initialization(self) -> None:
        ctx = PodReportContext()

        assert ctx.config_path is None
        assert ctx.verbose == 0
        assert ctx.color is True
        assert ctx.config == PodReportConfig()

    def test_instances_are_independent(self) -> None:
        ctx1 = PodReportContext()
        ctx2 = PodReportContext()

        ctx1.verbose = 2
        ctx1.config.timeout = 1.0

        assert ctx2.verbose == 0
        assert ctx2.config.timeout == 30.0

    def test_attributes_can_be_set(self) -> None:
        ctx = PodReportContext()
        config = PodReportConfig(timeout=5)

        ctx.config_path = Path("/etc/podreport.toml")
        ctx.color = False
        ctx.config = config

        assert ctx.config_path == Path("/etc/podreport.toml")
        assert ctx.color is False
        assert ctx.config is config

    def test_slots_prevent_arbitrary_attributes(self) -> None:
        ctx = PodReportContext()

        with pytest.raises(AttributeError):
            ctx.arbitrary_attribute = "value"  # type: ignore[attr-defined]
