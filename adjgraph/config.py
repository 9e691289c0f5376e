"""Configuration file parser."""

import copy
import logging
import os.path
from abc import ABC, abstractmethod
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Type, TypeVar

import yaml

T = TypeVar("T", bound="Config")

CONFIG_NAME = "adjgraph.yml"


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses should override abstract properties "required" and "optional".

    Example usage:

        # Assuming MyConfig is a subclass of Config:
        cfg = MyConfig.load(Path("/path/to/config.yml"))
        cfg.validate()

    Note that the creator must call validate(). They can optionally pass extra
    defaults as keyword arguments. This is useful if the default is
    context-dependent (static defaults can go in the required/optional dicts).
    """

    def __init__(self, path: Path, data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @property
    @abstractmethod
    def required(self) -> Dict[str, Any]:
        """Required configuration keys and their defaults."""

    @property
    @abstractmethod
    def optional(self) -> Dict[str, Any]:
        """Optional configuration keys and their defaults."""

    def validate(self, **defaults: Any):
        """Validate the loaded configuration.

        This must be called manually after creating an instance.

        Extra defaults can be passed for keys as keyword arguments. They will
        override the defaults from the "required" and "optional" properties.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        self.data = {**self.required, **self.optional, **defaults, **self.data}

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file."""
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[T], path: Path, content: str) -> T:
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Path, content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        """Get a configuration value."""
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it does not exist."""
        return self.data.get(key)


def _is_int(val: Any) -> bool:
    return isinstance(val, int) and not isinstance(val, bool)


def _is_edge(val: Any) -> bool:
    return isinstance(val, list) and len(val) == 2 and all(_is_int(x) for x in val)


class GraphConfig(Config):

    """Settings for the graph built by the adjgraph command.

    Example adjgraph.yml:

        name: demo
        vertices: 4
        fully_connect: false
        edges:
          - [0, 1]
          - [1, 2]
        delete: [3]
    """

    required = {
        "name": "graph",
    }

    optional = {
        "vertices": 0,
        "fully_connect": False,
        "edges": [],
        "delete": [],
    }

    checks = {
        "name": (lambda val: isinstance(val, str), "a string"),
        "vertices": (lambda val: _is_int(val) and val >= 0, "a non-negative integer"),
        "fully_connect": (lambda val: isinstance(val, bool), "a boolean"),
        "edges": (
            lambda val: isinstance(val, list) and all(_is_edge(e) for e in val),
            "a list of [src, dst] pairs",
        ),
        "delete": (
            lambda val: isinstance(val, list) and all(_is_int(v) for v in val),
            "a list of vertex ids",
        ),
    }

    def validate(self, **defaults: Any):
        """Validate keys and value types.

        A value of the wrong type is logged as an error and replaced by its
        default.
        """
        # Copy so list defaults are never shared between instances.
        fallback = copy.deepcopy({**self.required, **self.optional, **defaults})
        super().validate(**fallback)
        for key, (check, expected) in self.checks.items():
            if not check(self.data[key]):
                logging.error("%s: %r must be %s", self.path, key, expected)
                self.data[key] = fallback[key]


def find_config(start: Optional[Path] = None) -> Optional[Path]:
    """Find adjgraph.yml in start or one of its parents.

    The start directory defaults to the current working directory. Returns the
    path relative to the current working directory, or None if there is no
    config file.
    """
    path = (start or Path.cwd()).resolve()
    while True:
        config = path / CONFIG_NAME
        if config.exists() and config.is_file():
            # Must use os.path.relpath rather than Path.relative_to because the
            # latter does not go up directories (i.e. use "..").
            return Path(os.path.relpath(config, Path.cwd()))
        if path == path.parent:
            return None
        path = path.parent
