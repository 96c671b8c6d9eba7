"""
Tests for the YAML project configuration.
"""
import pytest

from core.domain.language import Language
from core.domain.models import BodyScanMode, ReferenceMatch, TypeCategory
from core.project_config import (
    ConfigError,
    DeclarationStyle,
    DocFormat,
    HttpMethod,
    SchemaFormat,
    SourceType,
    load_project_config,
    parse_project_config,
)


FULL_CONFIG = """\
input:
  format: yaml
  sources:
    - type: file
      path: schemas/user.yaml
    - type: api
      path: https://api.example.com/schemas/order.json
      method: POST
      headers:
        Authorization: Bearer token
output:
  dir: generated
  style: type
  features:
    componentProps: false
    storeTypes: true
  naming:
    propsPrefix: I
    responseSuffix: Result
documentation:
  format: html
  outputDir: site/docs
  language: zh
  bodyScan: balanced
  referenceMatch: word
  typeCategories:
    UUID: text
  features:
    typeGraph: false
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "type-gen.config.yml"
    path.write_text(FULL_CONFIG, encoding="utf-8")
    return path


class TestLoadProjectConfig:
    def test_full_config(self, config_file):
        config = load_project_config(config_file)

        assert config.input.format is SchemaFormat.YAML
        assert [s.type for s in config.input.sources] == [SourceType.FILE, SourceType.API]
        assert config.input.sources[1].method is HttpMethod.POST
        assert config.input.sources[1].headers == {"Authorization": "Bearer token"}
        assert config.output.style is DeclarationStyle.TYPE
        assert config.output.features.component_props is False
        assert config.output.features.api_response is True
        assert config.output.features.store_types is True
        assert config.output.naming.props_prefix == "I"
        assert config.output.naming.props_suffix == "Props"
        assert config.output.naming.response_suffix == "Result"
        assert config.documentation.format is DocFormat.HTML
        assert config.documentation.language is Language.CHINESE

    def test_documentation_options(self, config_file):
        documentation = load_project_config(config_file).documentation
        options = documentation.options()

        assert options.examples is True
        assert options.type_graph is False
        assert options.validation_rules is True
        assert options.language is Language.CHINESE
        assert options.body_scan is BodyScanMode.BALANCED
        assert options.reference_match is ReferenceMatch.WORD
        assert documentation.catalog().classify("UUID") is TypeCategory.TEXT

    def test_directories(self, config_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_project_config(config_file)

        assert config.output_dir() == tmp_path.resolve() / "generated"
        assert config.documentation_dir() == tmp_path.resolve() / "site" / "docs"

    def test_minimal_config_defaults(self):
        config = parse_project_config(
            {"input": {"sources": [{"type": "declarations", "path": "types/user.ts"}]}, "output": {"dir": "out"}}
        )

        assert config.input.format is SchemaFormat.JSON
        assert config.output.style is DeclarationStyle.INTERFACE
        assert config.output.naming.hook_prefix == "Use"
        assert config.output.naming.store_suffix == "State"
        assert config.documentation is None
        assert config.documentation_dir() == config.output_dir() / "docs"

    def test_language_falls_back_to_default(self):
        config = parse_project_config(
            {"input": {"sources": []}, "output": {"dir": "out"}, "documentation": {}}
        )

        assert config.documentation.language is None
        assert config.documentation.options().language is Language.ENGLISH
        assert config.documentation.options(default_language=Language.CHINESE).language is Language.CHINESE

    def test_unknown_keys_ignored(self):
        config = parse_project_config(
            {"input": {"sources": []}, "output": {"dir": "out", "legacy": True}, "extra": 1}
        )
        assert config.input.sources == []


class TestConfigErrors:
    def test_missing_required_key(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_project_config({"input": {"sources": []}, "output": {}})

        assert "output.dir: Field required" in exc_info.value.issues

    def test_invalid_enum(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_project_config(
                {"input": {"sources": [{"type": "ftp", "path": "x"}]}, "output": {"dir": "out"}}
            )

        assert any(issue.startswith("input.sources.0.type:") for issue in exc_info.value.issues)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_project_config(path)
        assert "input: Field required" in exc_info.value.issues

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("input: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Failed to load config file"):
            load_project_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Failed to load config file"):
            load_project_config(tmp_path / "missing.yml")
