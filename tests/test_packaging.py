from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_pyproject_readme_points_at_a_shipped_file():
    for line in (ROOT / "pyproject.toml").read_text(encoding="utf-8").splitlines():
        key, _, value = line.partition("=")
        if key.strip() == "readme":
            name = value.strip().strip('"')
            assert (ROOT / name).is_file()
            assert name.lower().startswith("readme")
