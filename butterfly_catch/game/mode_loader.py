"""
Game mode files: YAML tuning validated into GameModeConfig.

A mode file only needs the values it changes; everything else keeps the
classic default. The shipped modes live in ``butterfly_catch/modes/``.

Examples:
    >>> loader = GameModeLoader()
    >>> loader.load_mode("relaxed").countdown.seconds
    5
    >>> loader.list_available_modes()
    ['classic', 'relaxed']
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from butterfly_catch import config
from butterfly_catch.logging import get_logger
from butterfly_catch.models import GameModeConfig

log = get_logger('mode_loader')


class GameModeLoader:
    """Finds mode files in one directory and turns them into configs.

    Attributes:
        modes_dir: Directory searched for ``<mode_id>.yaml``
    """

    def __init__(self, modes_dir: Optional[Path] = None):
        self.modes_dir = Path(modes_dir) if modes_dir is not None else config.MODES_DIR

    def path_for(self, mode_id: str) -> Path:
        return self.modes_dir / f"{mode_id}.yaml"

    def _read(self, mode_id: str) -> Dict[str, Any]:
        """Parse a mode file into a mapping; an empty file is an empty mapping.

        Raises:
            FileNotFoundError: No file for mode_id
            yaml.YAMLError: The file is not valid YAML
            ValueError: The document is not a mapping
        """
        path = self.path_for(mode_id)
        if not path.is_file():
            raise FileNotFoundError(f"No game mode '{mode_id}' (looked for {path})")

        try:
            document = yaml.safe_load(path.read_text())
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"{path}: {e}") from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ValueError(f"{path}: expected a mapping at the top level, "
                             f"got {type(document).__name__}")
        return document

    def load_mode(self, mode_id: str) -> GameModeConfig:
        """Load and validate one mode.

        Raises:
            FileNotFoundError: No file for mode_id
            yaml.YAMLError: The file is not valid YAML
            ValueError: The content is not a valid game mode
        """
        document = self._read(mode_id)
        try:
            mode = GameModeConfig(**document)
        except ValidationError as e:
            raise ValueError(f"Invalid game mode '{mode_id}':\n{e}") from e

        log.debug("Loaded mode '%s' from %s", mode.name, self.path_for(mode_id))
        return mode

    def list_available_modes(self) -> List[str]:
        """Mode ids found in modes_dir, sorted."""
        if not self.modes_dir.is_dir():
            return []
        return sorted(path.stem for path in self.modes_dir.glob("*.yaml"))

    def mode_exists(self, mode_id: str) -> bool:
        return self.path_for(mode_id).is_file()

    def get_mode_info(self, mode_id: str) -> Dict[str, str]:
        """Name, description and version of a mode, without validating the rest."""
        document = self._read(mode_id)
        return {
            'name': str(document.get('name', mode_id)),
            'description': str(document.get('description', '')),
            'version': str(document.get('version', '0.0.0')),
        }
