"""Tests for the expand.sh helper script."""

import os
import stat

import pytest

from readme_mirror.errors import PersistError
from readme_mirror.expand import render_expand_script, write_expand_script


class TestExpandScript:
    def test_render(self):
        script = render_expand_script("https://github.com/octo/widget")
        assert script.splitlines() == [
            "#!/bin/bash",
            "git clone https://github.com/octo/widget .repo",
            "mv -f .repo/* .repo/.* ./",
            "rm -rf .repo",
            "rm expand.sh",
            "git reset --hard",
        ]

    def test_written_executable(self, destination):
        path = write_expand_script("https://github.com/octo/widget", destination)
        assert path == destination / "expand.sh"
        assert path.read_text(encoding="utf-8").startswith("#!/bin/bash\n")
        assert path.stat().st_mode & stat.S_IXUSR
        assert os.access(path, os.X_OK)

    def test_does_not_change_working_directory(self, destination):
        before = os.getcwd()
        write_expand_script("https://github.com/octo/widget", destination)
        assert os.getcwd() == before

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "widget"
        blocker.write_text("file")
        with pytest.raises(PersistError):
            write_expand_script("https://github.com/octo/widget", blocker)
