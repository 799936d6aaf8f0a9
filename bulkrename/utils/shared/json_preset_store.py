"""Module: json_preset_store.py

Author: Michael Economou
Date: 2025-06-10

JSON storage for named rename presets (saved operation chains).

The store keeps every preset in memory and writes them all to a single
`presets.json`, copying the previous file to `presets.json.bak` before each
save. All access goes through a re-entrant lock so a host UI and a
background save can share one store.
"""

import json
import os
import shutil
import threading
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from bulkrename.config import (
    APP_NAME,
    APP_VERSION,
    PRESETS_BACKUP_SUFFIX,
    PRESETS_DEFAULT_DIR_NAME,
    PRESETS_DIR_ENV_VAR,
    PRESETS_FILE_NAME,
)
from bulkrename.core.exceptions import PresetNotFoundError
from bulkrename.core.operation_registry import OperationRegistry
from bulkrename.operations.base_operation import BaseRenameOperation
from bulkrename.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def get_default_config_dir() -> Path:
    """Return the preset directory from the environment, or ~/.bulkrename."""
    override = os.environ.get(PRESETS_DIR_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / PRESETS_DEFAULT_DIR_NAME


class JSONPresetStore:
    """Named operation chains persisted as JSON."""

    def __init__(
        self,
        config_dir: str | os.PathLike[str] | None = None,
        registry: OperationRegistry | None = None,
    ):
        """Initialize the store. Nothing is read until `load()` is called."""
        self.config_dir = Path(config_dir) if config_dir is not None else get_default_config_dir()
        self.presets_file = self.config_dir / PRESETS_FILE_NAME
        self.backup_file = self.config_dir / f"{PRESETS_FILE_NAME}{PRESETS_BACKUP_SUFFIX}"
        self.registry = registry or OperationRegistry()

        self._lock = threading.RLock()
        self._presets: dict[str, list[dict[str, Any]]] = {}
        self._dirty = False

        logger.debug(
            "[JSONPresetStore] Initialized with dir: %s",
            self.config_dir,
            extra={"dev_only": True},
        )

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def list_presets(self) -> list[str]:
        """Return saved preset names, sorted."""
        with self._lock:
            return sorted(self._presets)

    def has_preset(self, name: str) -> bool:
        with self._lock:
            return name in self._presets

    def save_preset(self, name: str, operations: Iterable[BaseRenameOperation]) -> None:
        """Store the chain under `name` in memory, replacing any preset with that name.

        Call `save()` to write it to disk.
        """
        data = self.registry.chain_to_data(operations)
        with self._lock:
            self._presets[name] = data
            self._dirty = True
        logger.debug("[JSONPresetStore] Preset '%s' stored (%d operations)", name, len(data))

    def load_preset(self, name: str) -> list[BaseRenameOperation]:
        """Build a fresh chain from the preset `name`.

        Raises:
            PresetNotFoundError: no preset has that name.

        """
        with self._lock:
            if name not in self._presets:
                raise PresetNotFoundError(name)
            data = [dict(item) for item in self._presets[name]]
        return self.registry.chain_from_data(data)

    def delete_preset(self, name: str) -> None:
        """Remove the preset `name`.

        Raises:
            PresetNotFoundError: no preset has that name.

        """
        with self._lock:
            if name not in self._presets:
                raise PresetNotFoundError(name)
            del self._presets[name]
            self._dirty = True

    def load(self) -> bool:
        """Load presets from disk. A missing file counts as success with no presets."""
        with self._lock:
            if not self.presets_file.exists():
                logger.info(
                    "[JSONPresetStore] No presets file found at %s",
                    self.presets_file,
                    extra={"dev_only": True},
                )
                self._presets = {}
                self._dirty = False
                return True

            try:
                with open(self.presets_file, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("[JSONPresetStore] Failed to load presets: %s", e)
                return False

            presets = data.get("presets", {}) if isinstance(data, dict) else {}
            self._presets = {
                name: chain
                for name, chain in presets.items()
                if isinstance(name, str) and isinstance(chain, list)
            }
            self._dirty = False
            logger.info("[JSONPresetStore] Loaded %d presets", len(self._presets))
            return True

    def save(self, create_backup: bool = True) -> bool:
        """Write all presets to disk, backing up the previous file first."""
        with self._lock:
            try:
                self.config_dir.mkdir(parents=True, exist_ok=True)
                if create_backup and self.presets_file.exists():
                    shutil.copy2(self.presets_file, self.backup_file)

                data = {
                    "presets": self._presets,
                    "_metadata": {
                        "last_saved": datetime.now().isoformat(),
                        "version": f"v{APP_VERSION}",
                        "app_name": APP_NAME,
                    },
                }
                with open(self.presets_file, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
            except (OSError, TypeError, ValueError) as e:
                logger.error("[JSONPresetStore] Failed to save presets: %s", e)
                return False

            self._dirty = False
            logger.debug("[JSONPresetStore] Presets saved to %s", self.presets_file)
            return True
