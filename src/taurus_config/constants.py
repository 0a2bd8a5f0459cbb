"""
Application-wide constants for taurus-config.

Patterns, extensions and defaults shared by the loader, the decoders and the CLI.
"""

# Environment file lines: the first '=' ends the key, the rest of the line is the value
ENV_LINE_PATTERN = r"(\w+)=(.+)"

# ${NAME:default} placeholders; the default may not contain '}'
# Both patterns are compiled with re.ASCII: names are [A-Za-z0-9_]
PLACEHOLDER_PATTERN = r"\$\{(\w+):([^}]+)\}"

# Dotted key separator used by ConfigStore.get
KEY_SEPARATOR = "."

# Recognized configuration file extensions
JSON_EXTENSIONS = (".json",)
YAML_EXTENSIONS = (".yaml", ".yml")
TOML_EXTENSIONS = (".toml",)
XML_EXTENSIONS = (".xml",)
SUPPORTED_EXTENSIONS = JSON_EXTENSIONS + YAML_EXTENSIONS + TOML_EXTENSIONS + XML_EXTENSIONS

# XML decoding conventions
XML_ROOT_KEY = "root"
XML_ATTRIBUTE_PREFIX = "@"
XML_TEXT_KEY = "#text"

# File reading
DEFAULT_FILE_ENCODING = "utf-8"

# Logging
DEFAULT_SERVICE_NAME = "taurus-config"
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 5

# Environment variables read by LoaderSettings
ENV_PREFIX = "TAURUS_"
