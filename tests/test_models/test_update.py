from __future__ import annotations

import dataclasses
import json

import pytest

from podreport.models import OutdatedPod, PodUpdate


@pytest.mark.unit
class TestOutdatedPod:
    """Tests for the OutdatedPod tuple."""

    def test_fields(self) -> None:
        """Test fields are accessible by name and position."""
        pod = OutdatedPod("AFNetworking", "2.6.3", "3.0.4")

        assert pod.name == "AFNetworking"
        assert pod.current_version == "2.6.3"
        assert pod.available_version == "3.0.4"
        assert tuple(pod) == ("AFNetworking", "2.6.3", "3.0.4")


@pytest.mark.unit
class TestPodUpdate:
    """Tests for the PodUpdate report entry."""

    def test_from_outdated(self) -> None:
        """Test a report entry copies the parsed fields."""
        pod = OutdatedPod("AFNetworking", "2.6.3", "3.0.4")

        update = PodUpdate.from_outdated(pod, "https://github.com/a/b/releases/")

        assert update == PodUpdate(
            "AFNetworking", "2.6.3", "3.0.4", "https://github.com/a/b/releases/"
        )

    def test_releases_url_defaults_to_none(self) -> None:
        """Test a missing link is a valid state."""
        update = PodUpdate.from_outdated(OutdatedPod("Foo", "1.0", "2.0"))

        assert update.releases_url is None
        assert update.has_releases_url is False

    def test_is_immutable(self) -> None:
        """Test entries cannot be modified after creation."""
        update = PodUpdate("Foo", "1.0", "2.0")

        with pytest.raises(dataclasses.FrozenInstanceError):
            update.releases_url = "https://github.com/x/y/releases/"  # type: ignore[misc]

    def test_display_line_with_link(self) -> None:
        """Test the canonical one-line rendering with a link."""
        update = PodUpdate(
            "AFNetworking",
            "2.6.3",
            "3.0.4",
            "https://github.com/AFNetworking/AFNetworking/releases/",
        )

        assert update.to_display_line() == (
            "AFNetworking [2.6.3 -> 3.0.4] "
            "https://github.com/AFNetworking/AFNetworking/releases/"
        )
        assert str(update) == update.to_display_line()

    def test_display_line_without_link(self) -> None:
        """Test pods without a link show the placeholder."""
        update = PodUpdate("1PasswordExtension", "1.6.4", "1.8")

        assert update.to_display_line() == "1PasswordExtension [1.6.4 -> 1.8] Not on GitHub"
        assert update.releases_label == "Not on GitHub"

    def test_to_json(self) -> None:
        """Test the JSON form is serializable and complete."""
        update = PodUpdate("Foo", "1.0", "2.0")

        data = update.to_json()

        assert data == {
            "name": "Foo",
            "current_version": "1.0",
            "available_version": "2.0",
            "releases_url": None,
        }
        assert json.loads(json.dumps(data)) == data
