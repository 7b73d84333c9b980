from pathlib import Path

import pytest

from syn.config import Configuration, load_configuration_from_file, merge_into_configuration
from syn.exceptions import (
    ConfigurationFileInvalidError,
    ConfigurationFileNotFoundError,
    InvalidMaxIterationsError,
)


def test_configuration_defaults() -> None:
    config = Configuration()
    transformer_config = config.transformer_config()

    assert config.macro_directories == []
    assert transformer_config.max_iterations == 3
    assert not transformer_config.legacy_single_token_fallback


def test_load_configuration_from_file(tmp_path: Path) -> None:
    path = tmp_path / "syn.toml"
    path.write_text(
        "\n".join(
            (
                'macro_directories = ["macros"]',
                'macro_files = ["extra/one.syn"]',
                'plugins = ["package.module:Plugin"]',
                "max_iterations = 5",
                "verbose = true",
                "",
                "[plugin_settings.demo]",
                "enabled = false",
            ),
        ),
        encoding="utf-8",
    )

    config = load_configuration_from_file(path)

    assert config.macro_directories == [tmp_path / "macros"]
    assert config.macro_files == [tmp_path / "extra" / "one.syn"]
    assert config.plugins == ["package.module:Plugin"]
    assert config.plugin_settings == {"demo": {"enabled": False}}
    assert config.max_iterations == 5
    assert config.verbose


def test_load_configuration_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationFileNotFoundError):
        load_configuration_from_file(tmp_path / "syn.toml")


@pytest.mark.parametrize(
    "content",
    [
        "macro_directories = [",
        'unknown_key = "x"',
        'macro_directories = "macros"',
        'max_iterations = "many"',
        "max_iterations = 0",
        "max_iterations = -2",
    ],
)
def test_load_configuration_invalid(tmp_path: Path, content: str) -> None:
    path = tmp_path / "syn.toml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationFileInvalidError):
        load_configuration_from_file(path)


class _Overrides:
    macro_directories = [Path("cli")]
    macro_files: list[Path] = []
    max_iterations = None
    verbose = True
    legacy_single_token_fallback = False


def test_merge_into_configuration() -> None:
    config = Configuration(macro_directories=[Path("file")], max_iterations=7)
    merged = merge_into_configuration(config, _Overrides())

    assert merged.macro_directories == [Path("file"), Path("cli")]
    assert merged.max_iterations == 7
    assert merged.verbose
    assert not merged.legacy_single_token_fallback


def test_transformer_config_rejects_non_positive_iterations() -> None:
    config = Configuration()
    config.max_iterations = 0

    with pytest.raises(InvalidMaxIterationsError) as exc_info:
        config.transformer_config()
    assert exc_info.value.generic_error_name == "[invalid-max-iterations-error]"
