"""Tests for the context_builder module."""

from providergen.config import validate_config
from providergen.context_builder import build_context
from providergen.model import Entity, Field, Model
from providergen.version import VERSION

from conftest import base_config


class TestBuildContext:
    """Test which keys each kind of render receives."""

    @classmethod
    def setup_class(cls):
        cls.config = validate_config(base_config())
        cls.entity = Entity(name="team", fields=[Field(name="color", type="enum", enum_name="Color")])
        cls.model = Model(entities=[cls.entity], header="/* banner */")

    def test_common_keys(self):
        ctx = build_context(self.config, self.model)
        assert set(ctx) == {"config", "header", "version"}
        assert ctx["header"] == "/* banner */"
        assert ctx["version"] == VERSION
        assert ctx["config"] is self.config

    def test_model_only_when_requested(self):
        ctx = build_context(self.config, self.model, include_model=True)
        assert ctx["model"] is self.model

    def test_entity_context(self):
        ctx = build_context(self.config, self.model, entity=self.entity)
        assert ctx["entity"] is self.entity
        assert "model" not in ctx
        assert "field" not in ctx

    def test_enum_context(self):
        field = self.entity.fields[0]
        ctx = build_context(self.config, self.model, entity=self.entity, field=field)
        assert ctx["field"] is field

    def test_no_header(self):
        ctx = build_context(self.config, Model())
        assert ctx["header"] is None
