import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import ConfigurationError

DEFAULT_CONFIG_NAME = ".gootrago.yaml"
AUTO_DETECT = "auto"
DEFAULT_CSV_DELIMITER = ","

# Keys accepted in the config file and the types they may hold
CONFIG_SCHEMA = {
    'input': str,
    'output': str,
    'source': str,
    'target': str,
    'project': str,
    'credentials': str,
    'advanced': bool,
    'verbose': int,
    'quiet': bool,
    'progress': bool,
    'column': (list, str),
    'csv_delimiter': str,
    'csv_comment': str,
    'header': bool,
}

# Options that belong to the csv subcommand rather than the root command
CSV_KEYS = ('column', 'csv_delimiter', 'csv_comment', 'header')


def default_config_path() -> Path:
    """Location of the per-user config file ($HOME/.gootrago.yaml)."""
    return Path(os.path.expanduser("~")) / DEFAULT_CONFIG_NAME


def load_config(config_path) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"config file not found: {config_path}") from None
    except OSError as e:
        raise ConfigurationError(f"failed to read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"fatal error in config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"config file {config_path} must contain a mapping, got {type(config).__name__}"
        )
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """Validate the configuration."""
    for key, value in config.items():
        normalized = str(key).replace('-', '_')
        if normalized not in CONFIG_SCHEMA:
            raise ConfigurationError(f"Unknown config value: {key}")
        if value is None:
            continue
        expected = CONFIG_SCHEMA[normalized]
        # bool is an int subclass, verbose must not accept true/false
        if isinstance(value, bool) and expected is int:
            raise ConfigurationError(f"Invalid type for {key}. Expected int, got bool")
        if not isinstance(value, expected):
            raise ConfigurationError(
                f"Invalid type for {key}. Expected {expected}, got {type(value)}"
            )


def build_default_map(config: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a flat config mapping into a click default_map.

    Root command options stay at the top level, csv options move under 'csv'.
    """
    default_map: Dict[str, Any] = {}
    csv_defaults: Dict[str, Any] = {}
    for key, value in config.items():
        if value is None:
            continue
        name = str(key).replace('-', '_')
        if name == 'column' and isinstance(value, str):
            value = [value]
        if name in CSV_KEYS:
            csv_defaults[name] = value
        else:
            default_map[name] = value
    if csv_defaults:
        default_map['csv'] = csv_defaults
    return default_map


def _first_char(value: Optional[str]) -> Optional[str]:
    """Only the first character of a delimiter/comment option counts."""
    if not value:
        return None
    if value.startswith("\\t"):
        return "\t"
    return value[0]


@dataclass(frozen=True)
class TranslationSettings:
    """Resolved, read-only configuration of one invocation."""
    input_file: Path
    output_file: Path
    target_lang: str
    source_lang: str = AUTO_DETECT
    use_advanced: bool = False
    project_id: Optional[str] = None
    credentials_file: Optional[Path] = None
    columns: Tuple[str, ...] = field(default_factory=tuple)
    csv_delimiter: str = DEFAULT_CSV_DELIMITER
    csv_comment: Optional[str] = None
    has_header: bool = False

    @property
    def api_name(self) -> str:
        return "Advanced" if self.use_advanced else "Basic"

    @property
    def auto_detect(self) -> bool:
        return self.source_lang == AUTO_DETECT

    @classmethod
    def resolve(cls, input_file, output_file, target_lang, source_lang=AUTO_DETECT,
                use_advanced=False, project_id=None, credentials_file=None,
                columns=(), csv_delimiter=None, csv_comment=None,
                has_header=False) -> 'TranslationSettings':
        """Build settings from raw option values and check their invariants."""
        if not input_file:
            raise ConfigurationError("input file is required")
        if not output_file:
            raise ConfigurationError("output file is required")
        if not target_lang or not target_lang.strip():
            raise ConfigurationError("target language is required")

        input_path = Path(input_file)
        output_path = Path(output_file)
        if input_path.resolve() == output_path.resolve():
            raise ConfigurationError(
                f"input file and output file are the same: {input_file}"
            )

        project_id = project_id.strip() if project_id else None
        if use_advanced and not project_id:
            raise ConfigurationError("project ID is required for Advanced API")

        delimiter = _first_char(csv_delimiter) or DEFAULT_CSV_DELIMITER
        comment = _first_char(csv_comment)
        if comment is not None and comment == delimiter:
            raise ConfigurationError("CSV delimiter and comment character must differ")

        # --column may be repeated and each value may hold a comma separated list
        refs = []
        for value in columns or ():
            refs.extend(str(value).split(','))

        return cls(
            input_file=input_path,
            output_file=output_path,
            target_lang=target_lang.strip(),
            source_lang=(source_lang or AUTO_DETECT).strip(),
            use_advanced=bool(use_advanced),
            project_id=project_id,
            credentials_file=Path(credentials_file) if credentials_file else None,
            columns=tuple(refs),
            csv_delimiter=delimiter,
            csv_comment=comment,
            has_header=bool(has_header),
        )
