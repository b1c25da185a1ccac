"""
Display preferences persisted as a small JSON file.
"""
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Union

log = logging.getLogger("client")


@dataclass(frozen=True)
class Preference:
    dark_mode: bool = False

    def toggled(self) -> "Preference":
        return Preference(dark_mode=not self.dark_mode)


class JsonPreferenceStore:
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> Preference:
        """Read the saved preference; defaults if missing or unreadable."""
        if not self.path.exists():
            return Preference()
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            return Preference(dark_mode=bool(data.get("darkMode", False)))
        except (OSError, ValueError, AttributeError) as e:
            log.warning(f"Could not read preferences from {self.path}: {e}")
            return Preference()

    def save(self, preference: Preference) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {"darkMode": asdict(preference)["dark_mode"]}
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)
