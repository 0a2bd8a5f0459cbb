"""
Layered configuration store.

ConfigStore reads a configuration file, or every file below a directory,
substitutes ``${NAME:default}`` placeholders, decodes the text by file
extension and deep-merges each document into one nested dict. Values are read
back with dotted paths such as ``"http.port"``; the typed getters never raise
and fall back to the type's zero value.

Typical use::

    store = ConfigStore(print_enable=True).initialize("config/", ".env.local")
    port = store.get_int("http.port")
"""

import copy
import json
import logging
import os
import stat
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, MutableMapping, Optional, Union

from ..constants import KEY_SEPARATOR
from ..decoders.registry import DecoderRegistry, default_registry
from ..exceptions.config import ConfigPathError, ConfigurationError
from ..settings import LoaderSettings
from ..utils.error_handling import FileOperationHandler
from . import cast
from .envfile import load_env_file
from .merge import merge_into
from .placeholders import replace_placeholders

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ConfigStore:
    """In-memory nested configuration assembled from one or more files.

    Not safe for concurrent mutation; load fully, then read.
    """

    def __init__(
        self,
        print_enable: bool = False,
        environ: Optional[MutableMapping[str, str]] = None,
        sort_files: bool = True,
        registry: Optional[DecoderRegistry] = None,
    ):
        """
        Args:
            print_enable: Log the merged configuration as JSON after loading
            environ: Environment used for env-file writes and placeholder
                lookups; defaults to ``os.environ``
            sort_files: Merge directory entries in lexical path order instead
                of file system enumeration order
            registry: Decoder registry; defaults to the built-in formats
        """
        self._data: Dict[str, Any] = {}
        self.print_enable = print_enable
        self.environ = os.environ if environ is None else environ
        self.sort_files = sort_files
        self.registry = registry or default_registry

    @classmethod
    def from_settings(cls, settings: Optional[LoaderSettings] = None, **options) -> "ConfigStore":
        """Build and initialize a store from ``TAURUS_*`` loader settings."""
        settings = settings or LoaderSettings()
        if settings.config_path is None:
            raise ConfigPathError("TAURUS_CONFIG_PATH", "no configuration path set")

        options.setdefault("print_enable", settings.print_enable)
        options.setdefault("sort_files", settings.sort_files)
        store = cls(**options)
        env_file = str(settings.env_file) if settings.env_file else None
        return store.initialize(settings.config_path, env_file)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def initialize(self, config_path: PathLike, env_file: Optional[PathLike] = None) -> "ConfigStore":
        """
        Load the env file (if any), then the configuration at ``config_path``.

        Args:
            config_path: A configuration file or a directory scanned recursively
            env_file: Optional ``KEY=VALUE`` file; read failures are only logged

        Returns:
            The store itself

        Raises:
            ConfigPathError: if ``config_path`` cannot be accessed
            ConfigurationError: if a single-file load fails
        """
        if env_file:
            try:
                self.load_env(env_file)
            except ConfigurationError as e:
                logger.error(
                    f"Error loading .env file: {e.message}",
                    extra={"extra_context": e.log_fields()},
                )

        logger.info(f"Loading application configuration file: {config_path}")
        self.load_config(config_path)

        if self.print_enable:
            logger.info(f"Configuration: {self.to_json_string()}")

        return self

    def load_env(self, env_file: PathLike) -> Dict[str, str]:
        """Set the pairs of a ``KEY=VALUE`` file into this store's environment."""
        return load_env_file(env_file, self.environ)

    def load_config(self, path: PathLike) -> None:
        """
        Load a single file, or every file below a directory.

        Per-file failures inside a directory are logged and skipped.
        """
        try:
            info = os.stat(path)
        except OSError as e:
            raise ConfigPathError(path, e.strerror or str(e)) from e

        if not stat.S_ISDIR(info.st_mode):
            self.load_config_file(path)
            return

        for file_path in self.iter_files(Path(path)):
            try:
                self.load_config_file(file_path)
            except ConfigurationError as e:
                logger.error(
                    f"Error loading config file {file_path}: {e.message}",
                    extra={"extra_context": e.log_fields()},
                )

        logger.info("Configuration loaded successfully")

    def iter_files(self, directory: Path) -> Iterator[Path]:
        """Yield every non-directory entry below ``directory``, depth first."""
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.error(f"Error accessing file {directory}: {e}")
            return

        if self.sort_files:
            entries.sort(key=lambda entry: entry.name)

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.error(f"Error accessing file {entry.path}: {e}")
                continue
            if is_dir:
                yield from self.iter_files(Path(entry.path))
            else:
                yield Path(entry.path)

    def load_config_file(self, file_path: PathLike) -> None:
        """
        Read, substitute, decode and merge one configuration file.

        Raises:
            UnsupportedFormatError: if the extension is not recognized
            ConfigPathError: if the file cannot be read
            ConfigDecodeError: if the content is malformed
        """
        self.registry.get_decoder(file_path)

        try:
            raw = FileOperationHandler.read_text(file_path)
        except ConfigPathError:
            logger.error(f"Failed to open config file: {file_path}")
            raise

        content = self.replace_placeholders(raw)
        document = self.registry.decode(file_path, content)
        self.merge_map(document)
        logger.debug(f"Merged {len(document)} top-level keys from {file_path}")

    def replace_placeholders(self, content: str) -> str:
        """Resolve ``${NAME:default}`` placeholders against this store's environment."""
        return replace_placeholders(content, self.environ)

    def merge_map(self, data: Mapping[str, Any]) -> None:
        """Deep-merge ``data`` into the store; ``data`` wins on conflicts."""
        merge_into(self._data, data)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, key: str) -> Any:
        """Return the value at dotted ``key``, or None when any segment is missing."""
        segments = key.split(KEY_SEPARATOR)
        current: Any = self._data

        for segment in segments[:-1]:
            current = current.get(segment)
            if not isinstance(current, Mapping):
                return None

        return current.get(segments[-1])

    def get_string(self, key: str) -> str:
        return cast.to_string(self.get(key))

    def get_int(self, key: str) -> int:
        return cast.to_int(self.get(key))

    def get_bool(self, key: str) -> bool:
        return cast.to_bool(self.get(key))

    def get_float(self, key: str) -> float:
        return cast.to_float(self.get(key))

    def get_string_list(self, key: str) -> List[str]:
        return cast.to_string_list(self.get(key))

    def get_string_map(self, key: str) -> Dict[str, Any]:
        return cast.to_string_map(self.get(key))

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def as_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the merged configuration."""
        return copy.deepcopy(self._data)

    def to_json_string(self) -> str:
        """Serialize the store as compact JSON; never raises."""
        try:
            return json.dumps(self._data, separators=(",", ":"), default=cast.json_default)
        except (TypeError, ValueError) as e:
            return f"Error marshaling config to JSON: {e}"

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(keys={sorted(self._data)})"


def new(**options) -> ConfigStore:
    """Create an empty store; see ConfigStore for the accepted options."""
    return ConfigStore(**options)
