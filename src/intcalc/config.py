"""TOML config loading for intcalc.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from intcalc.parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT
from intcalc.types import IntRange

CONFIG_FILENAME = "intcalc.toml"


@dataclass
class LexerConfig:
    strict: bool = False


@dataclass
class ArithmeticConfig:
    bits: int = 32

    @property
    def int_range(self) -> IntRange:
        return IntRange.signed(self.bits)


@dataclass
class ParserConfig:
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass
class OutputConfig:
    color: bool = True


@dataclass
class CalcConfig:
    lexer: LexerConfig = field(default_factory=LexerConfig)
    arithmetic: ArithmeticConfig = field(default_factory=ArithmeticConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _int_setting(
    section: str, key: str, value: object, *, low: int, high: int | None = None,
) -> int:
    # bool is a subclass of int
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"[{section}] {key} must be an integer, got {value!r}")
    if value < low or (high is not None and value > high):
        bounds = f"{low}..{high}" if high is not None else f">= {low}"
        raise ValueError(f"[{section}] {key} must be {bounds}, got {value}")
    return value


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find intcalc.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_FILENAME} found in any parent directory")
        path = parent


def load_config(path: Path) -> CalcConfig:
    """Parse an intcalc.toml file into a CalcConfig.

    Raises ValueError for malformed TOML or out-of-range settings.
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = CalcConfig()

    if "lexer" in data:
        lex = data["lexer"]
        config.lexer = LexerConfig(strict=lex.get("strict", False))

    if "arithmetic" in data:
        arith = data["arithmetic"]
        bits = _int_setting("arithmetic", "bits", arith.get("bits", 32), low=0)
        config.arithmetic = ArithmeticConfig(bits=bits)

    if "parser" in data:
        prs = data["parser"]
        max_depth = _int_setting(
            "parser", "max_depth", prs.get("max_depth", DEFAULT_MAX_DEPTH),
            low=1, high=MAX_DEPTH_LIMIT,
        )
        config.parser = ParserConfig(max_depth=max_depth)

    if "output" in data:
        out = data["output"]
        config.output = OutputConfig(color=out.get("color", True))

    return config


def discover_config(start_path: Path | None = None) -> CalcConfig:
    """Load the nearest intcalc.toml, or defaults when there is none."""
    try:
        return load_config(find_config(start_path))
    except FileNotFoundError:
        return CalcConfig()
