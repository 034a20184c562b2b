"""Shared fixtures for the yarn2tiny test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from shared.config import RemapConfig
from shared.logger import RemapLogger
from yarn2tiny.core.engine import ConversionEngine
from yarn2tiny.core.models import ClassEntry
from yarn2tiny.core.symbol_table import SymbolTable


SAMPLE_YARN = "\n".join(
    [
        "v1\tofficial\tintermediary\tnamed",
        "CLASS\ta\tnet/minecraft/class_1\tnet/minecraft/entity/Entity",
        "CLASS\tb\tnet/minecraft/class_2\tnet/minecraft/world/World",
        "FIELD\ta\tLb;\tc\tfield_1\tworld",
        "FIELD\ta\tI\td\tfield_2\tage",
        "FIELD\ta\t[[La;\te\tfield_3\tpassengers",
        "METHOD\ta\t(Lb;I)[La;\tf\tmethod_1\tspawn",
        "METHOD\tb\t()V\tg\tmethod_2\ttick",
        "METHOD\tb\t(Ljava/lang/String;)Lb;\th\tmethod_3\tbyName",
        "",
    ]
)

SAMPLE_TINY = "\n".join(
    [
        "v1\tintermediary\tnamed",
        "CLASS\tnet/minecraft/class_1\tnet/minecraft/entity/Entity",
        "CLASS\tnet/minecraft/class_2\tnet/minecraft/world/World",
        "FIELD\tnet/minecraft/class_1\tLnet/minecraft/class_2;\tfield_1\tworld",
        "FIELD\tnet/minecraft/class_1\tI\tfield_2\tage",
        "FIELD\tnet/minecraft/class_1\t[[Lnet/minecraft/class_1;\tfield_3\tpassengers",
        "METHOD\tnet/minecraft/class_1\t(Lnet/minecraft/class_2;I)[Lnet/minecraft/class_1;\tmethod_1\tspawn",
        "METHOD\tnet/minecraft/class_2\t()V\tmethod_2\ttick",
        "METHOD\tnet/minecraft/class_2\t(Ljava/lang/String;)Lnet/minecraft/class_2;\tmethod_3\tbyName",
        "",
    ]
)


@pytest.fixture
def table() -> SymbolTable:
    """Table used by the descriptor scenarios: foo/Bar -> a/B, foo/Baz -> a/C."""
    return SymbolTable.from_entries(
        [
            ClassEntry(obfuscated="foo/Bar", intermediate="a/B", readable="x/Bar"),
            ClassEntry(obfuscated="foo/Baz", intermediate="a/C", readable="x/Baz"),
        ]
    )


@pytest.fixture
def quiet_logger() -> RemapLogger:
    return RemapLogger("tests", console_output=False)


@pytest.fixture
def engine(quiet_logger: RemapLogger) -> ConversionEngine:
    return ConversionEngine(config=RemapConfig(), logger=quiet_logger)


@pytest.fixture
def write_text(tmp_path: Path):
    """Write *text* to a file under tmp_path and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
