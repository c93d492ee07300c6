import pytest

from addupto.config import (
    DEFAULT_TESTED_VALUES,
    BenchmarkConfig,
    ConfigurationError,
    NumericMode,
    Settings,
    load_config,
    parse_values,
)


class TestBenchmarkConfig:
    def test_defaults(self):
        config = BenchmarkConfig()
        assert config.values == DEFAULT_TESTED_VALUES
        assert config.values == (
            1, 10, 100, 1000, 10000, 100000, 1000000,
            10000000, 100000000, 1000000000, 9000000000,
        )
        assert config.numeric_mode is NumericMode.EXACT

    def test_values_become_tuple(self):
        config = BenchmarkConfig(values=[3, 1, 2])
        assert config.values == (3, 1, 2)

    def test_immutable(self):
        config = BenchmarkConfig(values=(1,))
        with pytest.raises(AttributeError):
            config.values = (2,)

    @pytest.mark.parametrize("values", [(), (-1,), (1, 2.5), (True,), ("10",)])
    def test_invalid_values(self, values):
        with pytest.raises(ConfigurationError):
            BenchmarkConfig(values=values)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            BenchmarkConfig(values=(-5,))

    def test_mode_from_string(self):
        assert BenchmarkConfig(values=(1,), numeric_mode="FLOAT").numeric_mode is NumericMode.FLOAT

    def test_unknown_mode(self):
        with pytest.raises(ConfigurationError, match="exact, float"):
            BenchmarkConfig(values=(1,), numeric_mode="decimal")

    def test_with_mode(self):
        config = BenchmarkConfig(values=(1, 2)).with_mode("float")
        assert config.values == (1, 2)
        assert config.numeric_mode is NumericMode.FLOAT


class TestYamlConfig:
    def test_from_yaml(self, tmp_path):
        path = tmp_path / "values.yaml"
        path.write_text("values: [1, 10, 100000000000000000000]\nnumeric_mode: float\n")

        config = BenchmarkConfig.from_yaml(path)
        assert config.values == (1, 10, 10 ** 20)
        assert config.numeric_mode is NumericMode.FLOAT

    def test_mode_optional(self, tmp_path):
        path = tmp_path / "values.yaml"
        path.write_text("values:\n  - 5\n")
        assert BenchmarkConfig.from_yaml(path).numeric_mode is NumericMode.EXACT

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            BenchmarkConfig.from_yaml(tmp_path / "nope.yaml")

    @pytest.mark.parametrize("text", ["- 1\n- 2\n", "numeric_mode: exact\n", "values: 10\n", ""])
    def test_malformed(self, tmp_path, text):
        path = tmp_path / "bad.yaml"
        path.write_text(text)
        with pytest.raises(ConfigurationError):
            BenchmarkConfig.from_yaml(path)

    def test_yaml_syntax_error(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("values: [1, 2\n")
        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            BenchmarkConfig.from_yaml(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read config file"):
            BenchmarkConfig.from_yaml(tmp_path)

    def test_load_config(self, tmp_path):
        assert load_config() == BenchmarkConfig()

        path = tmp_path / "values.yaml"
        path.write_text("values: [7]\n")
        assert load_config(path).values == (7,)


class TestParseValues:
    def test_parse(self):
        assert parse_values("1, 10,1_000,") == (1, 10, 1000)

    def test_invalid(self):
        with pytest.raises(ConfigurationError, match="abc"):
            parse_values("1,abc")


class TestSettings:
    def test_defaults_from_env(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("ADDUPTO_LOG_LEVEL", raising=False)

        settings = Settings.from_env()
        assert settings.color is True
        assert settings.log_level == "WARNING"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        monkeypatch.setenv("ADDUPTO_LOG_LEVEL", "debug")

        settings = Settings.from_env()
        assert settings.color is False
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("ADDUPTO_LOG_LEVEL", "verbose")
        assert Settings.from_env().log_level == "WARNING"
