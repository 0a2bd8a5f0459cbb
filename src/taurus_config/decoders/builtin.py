"""
Built-in decoders for JSON, YAML, TOML and XML files.
"""

import json
import re
import tomllib
import xml.etree.ElementTree as ElementTree
from typing import Any, Dict, List, Tuple, Type

import yaml

from ..constants import (
    JSON_EXTENSIONS,
    TOML_EXTENSIONS,
    XML_ATTRIBUTE_PREFIX,
    XML_EXTENSIONS,
    XML_ROOT_KEY,
    XML_TEXT_KEY,
    YAML_EXTENSIONS,
)
from .base import ConfigDecoder


class JsonDecoder(ConfigDecoder):
    format_name = "JSON"
    extensions = JSON_EXTENSIONS

    @property
    def errors(self) -> Tuple[Type[BaseException], ...]:
        return (json.JSONDecodeError,)

    def decode(self, content: str) -> Any:
        return json.loads(content)


BOOL_TAG = "tag:yaml.org,2002:bool"


class ConfigYamlLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans.

    Only true/false (in any of the three common casings) resolve to bool;
    yes/no/on/off stay strings, so keys such as ``on:`` remain addressable.
    """


ConfigYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ConfigYamlLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class YamlDecoder(ConfigDecoder):
    format_name = "YAML"
    extensions = YAML_EXTENSIONS

    @property
    def errors(self) -> Tuple[Type[BaseException], ...]:
        return (yaml.YAMLError,)

    def decode(self, content: str) -> Any:
        data = yaml.load(content, Loader=ConfigYamlLoader)
        # An empty document is an empty configuration
        return {} if data is None else data


class TomlDecoder(ConfigDecoder):
    format_name = "TOML"
    extensions = TOML_EXTENSIONS

    @property
    def errors(self) -> Tuple[Type[BaseException], ...]:
        return (tomllib.TOMLDecodeError,)

    def decode(self, content: str) -> Any:
        return tomllib.loads(content)


class XmlDecoder(ConfigDecoder):
    """Decode XML into plain dicts, lists and strings.

    Attributes are stored under ``@name``, child elements under their tag
    (repeated tags become a list) and non-blank text next to children or
    attributes under ``#text``. A leaf element becomes its text. The document
    value is the root element's content; a root that decodes to a plain string
    is wrapped as ``{"root": value}``.
    """

    format_name = "XML"
    extensions = XML_EXTENSIONS

    @property
    def errors(self) -> Tuple[Type[BaseException], ...]:
        return (ElementTree.ParseError,)

    def decode(self, content: str) -> Any:
        root = ElementTree.fromstring(content)
        value = element_to_value(root)
        if isinstance(value, dict):
            return value
        return {XML_ROOT_KEY: value}


def element_to_value(element: ElementTree.Element) -> Any:
    """Convert one element (recursively) into a generic value."""
    text = (element.text or "").strip()
    children = list(element)

    if not children and not element.attrib:
        return text or None

    result: Dict[str, Any] = {}
    for name, value in element.attrib.items():
        result[f"{XML_ATTRIBUTE_PREFIX}{name}"] = value

    for child in children:
        value = element_to_value(child)
        if child.tag in result:
            existing = result[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[child.tag] = [existing, value]
        else:
            result[child.tag] = value

    if text:
        result[XML_TEXT_KEY] = text

    return result


def builtin_decoders() -> List[ConfigDecoder]:
    return [JsonDecoder(), YamlDecoder(), TomlDecoder(), XmlDecoder()]
