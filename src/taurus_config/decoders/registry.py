"""
Decoder registry.

Maps file extensions onto decoders and wraps decoding so that every failure
surfaces as a ConfigurationError subclass carrying the file path.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..exceptions.config import ConfigDecodeError, UnsupportedFormatError
from .base import ConfigDecoder
from .builtin import builtin_decoders

logger = logging.getLogger(__name__)


class DecoderRegistry:
    """Registry of configuration decoders keyed by file extension."""

    def __init__(self, decoders: Optional[Iterable[ConfigDecoder]] = None):
        self._decoders: Dict[str, ConfigDecoder] = {}
        for decoder in builtin_decoders() if decoders is None else decoders:
            self.register(decoder)

    def register(self, decoder: ConfigDecoder) -> None:
        """Register ``decoder`` for each of its extensions, replacing earlier ones."""
        for extension in decoder.extensions:
            extension = extension.lower()
            if extension in self._decoders:
                logger.warning(
                    f"Replacing decoder for '{extension}': "
                    f"{self._decoders[extension]!r} -> {decoder!r}"
                )
            self._decoders[extension] = decoder

    def unregister(self, extension: str) -> None:
        self._decoders.pop(extension.lower(), None)

    @property
    def extensions(self) -> List[str]:
        return sorted(self._decoders)

    def supports(self, path: Union[str, Path]) -> bool:
        return Path(path).suffix.lower() in self._decoders

    def get_decoder(self, path: Union[str, Path]) -> ConfigDecoder:
        """
        Return the decoder for ``path``'s extension.

        Raises:
            UnsupportedFormatError: if no decoder handles the extension
        """
        decoder = self._decoders.get(Path(path).suffix.lower())
        if decoder is None:
            logger.error(f"Unsupported config file format: {path}")
            raise UnsupportedFormatError(path, self.extensions)
        return decoder

    def decode(self, path: Union[str, Path], content: str) -> Dict[str, Any]:
        """
        Decode ``content`` read from ``path`` into a mapping.

        Raises:
            UnsupportedFormatError: if no decoder handles the extension
            ConfigDecodeError: if the content is malformed or not a mapping
        """
        decoder = self.get_decoder(path)
        logger.debug(f"Decoding {path} as {decoder.format_name}")

        try:
            document = decoder.decode(content)
        except decoder.errors + (RecursionError,) as e:
            # RecursionError: nesting too deep for the parser or the XML walk
            logger.error(
                f"Failed to parse {decoder.format_name} config file: {path}; error: {e}"
            )
            raise ConfigDecodeError(path, decoder.format_name, str(e)) from e

        if not isinstance(document, Mapping):
            reason = f"top-level value is {type(document).__name__}, expected a mapping"
            logger.error(
                f"Failed to parse {decoder.format_name} config file: {path}; error: {reason}"
            )
            raise ConfigDecodeError(path, decoder.format_name, reason)

        return dict(document)


default_registry = DecoderRegistry()
