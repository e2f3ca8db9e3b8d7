"""
Config file loading for fixletctl.

Reads ~/.config/fixletctl/config.toml and returns structured config.
Never raises — always returns a valid dict with sensible defaults.

    file = "/srv/bigfix/fixlets.csv"
    view = "table"        # or "lines"
"""

from pathlib import Path

_CONFIG_PATH = Path.home() / ".config" / "fixletctl" / "config.toml"

_VIEWS = ("lines", "table")


def load_config(path: Path | None = None) -> dict:
    """
    Load and return fixletctl config from TOML file.

    Returns {"file": str | None, "view": "lines" | "table"}.
    Missing file or parse errors return all defaults; a badly typed key
    falls back to its own default without affecting the others.
    """
    config_path = path or _CONFIG_PATH
    defaults: dict = {"file": None, "view": "lines"}

    if not config_path.is_file():
        return defaults

    try:
        raw = config_path.read_bytes()
    except OSError:
        return defaults

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return defaults

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError):
        return defaults

    config = dict(defaults)

    file = data.get("file")
    if isinstance(file, str) and file.strip():
        config["file"] = file

    view = data.get("view")
    if isinstance(view, str) and view.lower() in _VIEWS:
        config["view"] = view.lower()

    return config
