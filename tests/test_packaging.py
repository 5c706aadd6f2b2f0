import os

import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _pyproject():
    tomllib = pytest.importorskip("tomllib")
    with open(os.path.join(ROOT_DIR, "pyproject.toml"), "rb") as f:
        return tomllib.load(f)


def test_readme_is_the_user_facing_overview():
    project = _pyproject()["project"]
    assert project["readme"] == "README.md"
    with open(os.path.join(ROOT_DIR, project["readme"]), encoding="utf-8") as f:
        text = f.read()
    assert text.startswith("# PCG Maps")


def test_declared_runtime_dependencies():
    deps = {d.split(">")[0].split("=")[0] for d in _pyproject()["project"]["dependencies"]}
    assert deps == {"colorama", "python-dotenv"}
