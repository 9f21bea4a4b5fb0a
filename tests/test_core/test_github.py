from __future__ import annotations

import httpx
import pytest

from podreport.core.github import (
    build_releases_url,
    extract_github_project,
    is_github_url,
)
from podreport.exceptions import InvalidGitHubURLError


@pytest.mark.unit
class TestIsGitHubURL:
    """Tests for is_github_url."""

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://github.com/org/repo.git", True),
            ("https://GitHub.com/org/repo.git", True),
            ("git://github.com/org/repo.git", True),
            ("https://gitlab.com/org/repo.git", False),
            ("https://www.github.com/org/repo.git", False),
            ("https://github.com.evil.example/org/repo", False),
        ],
    )
    def test_host_matching(self, url: str, expected: bool) -> None:
        """Test only the exact github.com host matches."""
        assert is_github_url(httpx.URL(url)) is expected


@pytest.mark.unit
class TestExtractGitHubProject:
    """Tests for extract_github_project."""

    def test_strips_git_suffix_and_leading_slash(self) -> None:
        """Test /org/repo.git becomes org/repo."""
        url = httpx.URL("https://github.com/AFNetworking/AFNetworking.git")

        assert extract_github_project(url) == "AFNetworking/AFNetworking"

    def test_accepts_string_url(self) -> None:
        """Test plain strings are parsed as URLs."""
        assert extract_github_project("https://github.com/org/repo.git") == "org/repo"

    def test_url_without_extension(self) -> None:
        """Test a path without extension is kept as-is."""
        assert extract_github_project("https://github.com/org/repo") == "org/repo"

    def test_trailing_slash(self) -> None:
        """Test a trailing slash does not end up in the project path."""
        assert extract_github_project("https://github.com/org/repo/") == "org/repo"

    def test_dotted_repository_name(self) -> None:
        """Test only the final extension is removed."""
        url = "https://github.com/SDWebImage/SDWebImage.swift.git"

        assert extract_github_project(url) == "SDWebImage/SDWebImage.swift"

    def test_query_and_fragment_are_ignored(self) -> None:
        """Test only the path contributes to the project."""
        url = "https://github.com/org/repo.git?ref=main#readme"

        assert extract_github_project(url) == "org/repo"

    def test_non_github_host_returns_none(self) -> None:
        """Test other hosts are not an error."""
        assert extract_github_project("https://bitbucket.org/team/repo.git") is None

    @pytest.mark.parametrize(
        "url",
        ["https://github.com", "https://github.com/", "https://github.com//"],
        ids=["no-path", "root", "double-slash"],
    )
    def test_github_without_project_raises(self, url: str) -> None:
        """Test a GitHub URL with no usable path raises."""
        with pytest.raises(InvalidGitHubURLError) as exc_info:
            extract_github_project(url)

        assert exc_info.value.url is not None


@pytest.mark.unit
class TestBuildReleasesURL:
    """Tests for build_releases_url."""

    def test_builds_releases_page(self) -> None:
        """Test the canonical releases URL shape."""
        assert build_releases_url("org/repo") == "https://github.com/org/repo/releases/"

    def test_end_to_end_with_extractor(self) -> None:
        """Test extractor output feeds straight into the builder."""
        project = extract_github_project("https://github.com/org/repo.git")

        assert build_releases_url(project) == "https://github.com/org/repo/releases/"
