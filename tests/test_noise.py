"""Tests for the default noise classifier."""

import pytest

from worklog.noise import filter_noise_work_items, is_noise_work_item


class TestIsNoise:
    @pytest.mark.parametrize(
        "source,title",
        [
            ("git", "Merge branch 'main' into feature/x"),
            ("github", "Merge pull request #42 from org/branch"),
            ("git", "merge remote-tracking branch 'origin/main'"),
            ("terminal", "ls"),
            ("terminal", "ls -la"),
            ("terminal", "cd ~/code/api"),
            ("terminal", "clear"),
            ("filesystem", "Modified node_modules/left-pad/index.js"),
            ("filesystem", "src/__pycache__/app.cpython-312.pyc"),
            ("claude", "   "),
        ],
    )
    def test_noise(self, make_item, source, title):
        assert is_noise_work_item(make_item(source=source, title=title))

    @pytest.mark.parametrize(
        "source,title",
        [
            ("git", "Fix merge conflict handling in sync"),
            ("github", "Opened PR: merge queue support"),
            ("terminal", "pytest tests/test_search.py"),
            ("terminal", "history | grep deploy"),
            ("terminal", "ll"),
            ("terminal", "la src"),
            ("filesystem", "Modified src/build_tools.py"),
            ("claude", "Merge branch strategy discussion"),
        ],
    )
    def test_signal(self, make_item, source, title):
        assert not is_noise_work_item(make_item(source=source, title=title))


def test_filter_preserves_order(make_item):
    items = [
        make_item(title="Fix A"),
        make_item(title="Merge branch 'x'"),
        make_item(title="Fix B"),
    ]
    assert [i.title for i in filter_noise_work_items(items)] == ["Fix A", "Fix B"]
