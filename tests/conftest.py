import pytest

from readme_mirror.config import MirrorConfig
from readme_mirror.repository import parse_repository_url

from .fakes import REPO_URL


@pytest.fixture
def repository():
    return parse_repository_url(REPO_URL)


@pytest.fixture
def config(tmp_path):
    return MirrorConfig(output_root=tmp_path)


@pytest.fixture
def destination(tmp_path):
    return tmp_path / "widget"
