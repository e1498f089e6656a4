"""
Generator configuration.

Defaults reproduce the classic layout: html_gen.py and html_gen_test.py in
the current directory. A YAML file may override any field:

    output_dir: src/app
    package: app
    runtime_module: app.runtime
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from markupgen.backends.builder_generator import DEFAULT_RUNTIME_MODULE
from markupgen.errors import ConfigError


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Properties:
        output_dir: Directory both files are written to
        builder_filename: Name of the builder module
        test_filename: Name of the smoke test module
        package: Import path of the package the builder module lives in;
            None when the builder module is importable on its own
        runtime_module: Module providing UI, EventHandler, HTMLElement, Text
    """

    output_dir: Path = Path(".")
    builder_filename: str = "html_gen.py"
    test_filename: str = "html_gen_test.py"
    package: Optional[str] = None
    runtime_module: str = DEFAULT_RUNTIME_MODULE

    def __post_init__(self) -> None:
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        for name in (self.builder_filename, self.test_filename):
            if not isinstance(name, str) or not name.endswith(".py") or "/" in name or "\\" in name:
                raise ConfigError(f"output filename must be a bare .py filename: {name!r}")
        if self.builder_filename == self.test_filename:
            raise ConfigError("builder and test filenames must differ")

    @property
    def builder_path(self) -> Path:
        return self.output_dir / self.builder_filename

    @property
    def test_path(self) -> Path:
        return self.output_dir / self.test_filename

    @property
    def builder_module(self) -> str:
        """Import path the smoke tests import the builders from."""
        stem = self.builder_filename[: -len(".py")]
        if self.package:
            return f"{self.package}.{stem}"
        return stem

    def with_overrides(self, **overrides: Any) -> GeneratorConfig:
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def config_from_dict(data: Dict[str, Any]) -> GeneratorConfig:
    known = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")
    return GeneratorConfig(**data)


def load_config(path: Path) -> GeneratorConfig:
    """
    Load a configuration file.

    Raises:
        ConfigError: If the file cannot be read or is not a valid mapping
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        return GeneratorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"configuration {path} must be a mapping")
    return config_from_dict(data)
