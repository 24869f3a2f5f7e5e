"""Pytest configuration and fixtures for dsconv tests."""

from pathlib import Path

import cbor2
import msgpack
import pytest
import typer

from dsconv.core.models import Format

_MINIMAL_DOCUMENTS = {
    Format.CBOR: cbor2.dumps({"a": 1}),
    Format.HJSON: b"{\n  a: 1\n}\n",
    Format.JSON: b'{"a": 1}',
    Format.JSON5: b"{a: 1}",
    Format.MESSAGEPACK: msgpack.packb({"a": 1}),
    Format.RON: b'{"a": 1}',
    Format.TOML: b"a = 1\n",
    Format.YAML: b"a: 1\n",
}

_INVALID_DOCUMENTS = {
    Format.CBOR: b"\x82\x01",
    Format.HJSON: b"{",
    Format.JSON: b'{"a": }',
    Format.JSON5: b"{a: }",
    Format.MESSAGEPACK: b"\x92\x01",
    Format.RON: b"(a: 1",
    Format.TOML: b"a = ",
    Format.YAML: b"a: [1, 2",
}


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config directory at an empty temporary location."""
    home = tmp_path / "home"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("APPDATA", str(home / "AppData"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    return Path(typer.get_app_dir("dsconv"))


@pytest.fixture
def write_config(isolated_config: Path):
    """Return a helper that writes the user config file."""

    def _write(text: str) -> Path:
        isolated_config.mkdir(parents=True, exist_ok=True)
        path = isolated_config / "config.toml"
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def sample_value() -> dict:
    """A value every output format can hold."""
    return {
        "name": "dsconv",
        "version": 3,
        "ratio": 0.5,
        "enabled": True,
        "tags": ["convert", "serialize"],
        "owner": {"login": "ops", "id": 42},
    }


@pytest.fixture
def json_file(tmp_path: Path) -> Path:
    """Write the reference JSON document to a file."""
    path = tmp_path / "input.json"
    path.write_bytes(b'{"a": 1, "b": [2, 3]}')
    return path


@pytest.fixture
def yaml_list_file(tmp_path: Path) -> Path:
    """Write a YAML document whose root is a sequence."""
    path = tmp_path / "list.yaml"
    path.write_bytes(b"- 1\n- 2\n")
    return path


@pytest.fixture
def minimal_documents() -> dict[Format, bytes]:
    """The document {"a": 1} written in every input format."""
    return dict(_MINIMAL_DOCUMENTS)


@pytest.fixture
def invalid_documents() -> dict[Format, bytes]:
    """Byte sequences that are not valid documents of each input format."""
    return dict(_INVALID_DOCUMENTS)
