"""
Shared pytest fixtures.
"""
import pytest

SAMPLE_CSV = (
    "SiteID,FxiletID,Name,Criticality,RelevantComputerCount\n"
    "1,100,Patch A,High,5\n"
    "2,101,Patch B,Low,2\n"
)


@pytest.fixture
def sample_csv(tmp_path):
    """Two-row fixlets file in a temp directory."""
    path = tmp_path / "fixlets.csv"
    path.write_text(SAMPLE_CSV)
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Never read the real ~/.config/fixletctl/config.toml during tests."""
    import fixletctl.config as config_mod
    monkeypatch.setattr(config_mod, "_CONFIG_PATH", tmp_path / "no-config" / "config.toml")
