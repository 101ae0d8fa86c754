"""Unit tests for BylineModel."""

import threading
import time

import pytest

from wknd.contexts.components.byline import BylineModel
from wknd.contexts.content import (
    ContentNodeError,
    ImageModel,
    ImageResolver,
    RenderContext,
    Resource,
)

VALID_IMAGE = ImageModel(src="/content/jane.png")


class StubImageResolver(ImageResolver):
    """Returns a fixed image and records the calls it receives."""

    def __init__(self, image=VALID_IMAGE):
        self.image = image
        self.calls = []

    def resolve(self, resource, context):
        self.calls.append((resource, context))
        return self.image


class FailingImageResolver(ImageResolver):
    def resolve(self, resource, context):
        raise ContentNodeError("Image content is malformed", path=resource.path)


@pytest.mark.unit
def test_populated_byline():
    """Test the fully populated example byline."""
    byline = BylineModel(name="Jane Doe", occupations=["Engineer", "Writer"], image=VALID_IMAGE)

    assert byline.is_empty() is False
    assert byline.name == "Jane Doe"
    assert byline.occupations == ["Engineer", "Writer"]
    assert byline.image is VALID_IMAGE


@pytest.mark.unit
@pytest.mark.parametrize(
    "occupations, expected",
    [
        (["Zebra Keeper", "Artist"], ["Artist", "Zebra Keeper"]),
        (["Writer", "Photographer", "Artist"], ["Artist", "Photographer", "Writer"]),
        (["b", "B", "a"], ["B", "a", "b"]),
        (["Solo"], ["Solo"]),
    ],
)
def test_occupations_sorted(occupations, expected):
    """Test occupations come back sorted regardless of authored order."""
    byline = BylineModel(name="Jane", occupations=occupations, image=VALID_IMAGE)
    assert byline.occupations == expected


@pytest.mark.unit
@pytest.mark.parametrize("occupations", [None, []])
def test_occupations_never_none(occupations):
    """Test missing occupations are returned as an empty list."""
    byline = BylineModel(name="Jane", occupations=occupations, image=VALID_IMAGE)
    assert byline.occupations == []


@pytest.mark.unit
def test_occupations_returns_independent_copy():
    """Test mutating the returned list does not change the model."""
    byline = BylineModel(name="Jane", occupations=["Writer", "Artist"], image=VALID_IMAGE)

    first = byline.occupations
    first.append("Intruder")
    first.clear()

    assert byline.occupations == ["Artist", "Writer"]
    assert byline.occupations is not byline.occupations


@pytest.mark.unit
def test_constructor_copies_occupations():
    """Test the model keeps its own copy of the authored list."""
    authored = ["Writer", "Artist"]
    byline = BylineModel(name="Jane", occupations=authored, image=VALID_IMAGE)

    authored.append("Zookeeper")

    assert byline.occupations == ["Artist", "Writer"]
    # Authored order untouched by reading
    assert authored == ["Writer", "Artist", "Zookeeper"]


@pytest.mark.unit
def test_occupations_synchronous():
    """Test reading occupations starts no threads and returns immediately."""
    byline = BylineModel(name="Jane", occupations=["Writer", "Artist"], image=VALID_IMAGE)
    threads_before = threading.active_count()

    start = time.perf_counter()
    occupations = byline.occupations
    elapsed = time.perf_counter() - start

    assert occupations == ["Artist", "Writer"]
    assert elapsed < 0.1
    assert threading.active_count() == threads_before


@pytest.mark.unit
def test_name_returned_verbatim():
    """Test the name is not trimmed or validated on read."""
    byline = BylineModel(name="  Jane  ", occupations=["Writer"], image=VALID_IMAGE)
    assert byline.name == "  Jane  "
    assert BylineModel().name is None


@pytest.mark.unit
@pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
def test_empty_when_name_blank(name):
    """Test a blank name makes the byline empty regardless of other fields."""
    assert BylineModel(name=name, occupations=["Engineer"], image=VALID_IMAGE).is_empty()
    assert BylineModel(name=name).is_empty()


@pytest.mark.unit
@pytest.mark.parametrize("name", ["\u00a0", "\u2007", "\u202f"])
def test_no_break_space_name_is_content(name):
    """Test a name of no-break spaces is not treated as blank."""
    byline = BylineModel(name=name, occupations=["Writer"], image=ImageModel(src="/x.png"))
    assert byline.is_empty() is False


@pytest.mark.unit
@pytest.mark.parametrize("occupations", [None, []])
def test_empty_when_no_occupations(occupations):
    """Test missing occupations make the byline empty."""
    byline = BylineModel(name="Jane", occupations=occupations, image=VALID_IMAGE)
    assert byline.is_empty()


@pytest.mark.unit
@pytest.mark.parametrize(
    "image",
    [None, ImageModel(src=None), ImageModel(src=""), ImageModel(src="  ", alt="Jane")],
)
def test_empty_when_image_invalid(image):
    """Test a missing image or blank image source makes the byline empty."""
    byline = BylineModel(name="Jane", occupations=["Engineer"], image=image)
    assert byline.is_empty()


@pytest.mark.unit
def test_empty_example_blank_name():
    """Test the blank-name example byline."""
    byline = BylineModel(name="", occupations=["Engineer"], image=ImageModel(src="/x.png"))
    assert byline.is_empty() is True


@pytest.mark.unit
def test_from_resource_reads_properties():
    """Test building a byline from its content resource."""
    resource = Resource.from_dict(
        "/content/byline",
        {"name": "Jane", "occupations": ["Writer", "Artist"]},
    )
    context = RenderContext(page_path="/content/page")
    resolver = StubImageResolver()

    byline = BylineModel.from_resource(resource, context, image_resolver=resolver)

    assert byline.name == "Jane"
    assert byline.occupations == ["Artist", "Writer"]
    assert byline.image is VALID_IMAGE
    assert resolver.calls == [(resource, context)]


@pytest.mark.unit
def test_from_resource_missing_properties():
    """Test absent properties degrade to empty values."""
    resource = Resource.from_dict("/content/byline", {})

    byline = BylineModel.from_resource(resource, RenderContext(), image_resolver=StubImageResolver(None))

    assert byline.name is None
    assert byline.occupations == []
    assert byline.image is None
    assert byline.is_empty()


@pytest.mark.unit
def test_from_resource_image_failure_is_absent():
    """Test a failing image resolver leaves the image absent without raising."""
    resource = Resource.from_dict("/content/byline", {"name": "Jane", "occupations": ["Writer"]})

    byline = BylineModel.from_resource(resource, RenderContext(), image_resolver=FailingImageResolver())

    assert byline.image is None
    assert byline.is_empty()


@pytest.mark.unit
def test_from_resource_single_occupation_value():
    """Test a single-valued occupations property reads as one occupation."""
    resource = Resource.from_dict("/content/byline", {"name": "Jane", "occupations": "Writer"})

    byline = BylineModel.from_resource(resource, RenderContext(), image_resolver=StubImageResolver())

    assert byline.occupations == ["Writer"]
    assert not byline.is_empty()
