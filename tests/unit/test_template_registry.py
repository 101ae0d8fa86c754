"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from wknd.contexts.content import ImageModel
from wknd.contexts.components import BylineModel
from wknd.contexts.rendering.registries import TemplateRegistry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_base_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_get_template_byline():
    """Test loading byline template."""
    registry = TemplateRegistry()
    template = registry.get_template("byline")

    assert template is not None
    assert "byline" in registry._cache


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("byline")
    assert registry.is_cached("byline")

    template2 = registry.get_template("byline")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound, match="nonexistent_component"):
        registry.get_template("nonexistent_component")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("byline")

    assert isinstance(path, Path)
    assert path.name == "template.html.jinja"
    assert "byline" in str(path)


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_template("byline")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    """Test loading templates from a custom directory."""
    (tmp_path / "title").mkdir()
    (tmp_path / "title" / "template.html.jinja").write_text("<h1>{{ text }}</h1>", encoding="utf-8")

    registry = TemplateRegistry(tmp_path)

    assert registry.get_template("title").render(text="WKND") == "<h1>WKND</h1>"


@pytest.mark.unit
def test_template_rendering():
    """Test that byline template renders model fields."""
    registry = TemplateRegistry()
    byline = BylineModel(
        name="Jane Doe",
        occupations=["Writer", "Engineer"],
        image=ImageModel(src="/content/dam/wknd/jane.png", alt="Jane"),
    )

    result = registry.get_template("byline").render(model=byline, occupation_separator=", ")

    assert 'class="cmp-byline"' in result
    assert '<h2 class="cmp-byline__name">Jane Doe</h2>' in result
    assert "Engineer, Writer" in result
    assert 'src="/content/dam/wknd/jane.png"' in result
    assert 'alt="Jane"' in result


@pytest.mark.unit
def test_autoescape():
    """Test authored text is HTML-escaped."""
    registry = TemplateRegistry()
    byline = BylineModel(
        name="<script>alert(1)</script>",
        occupations=["R&D"],
        image=ImageModel(src="/x.png"),
    )

    result = registry.get_template("byline").render(model=byline, occupation_separator=", ")

    assert "<script>" not in result
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in result
    assert "R&amp;D" in result
