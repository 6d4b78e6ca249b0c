"""
Shared fixtures: an app wired to in-memory data and a fake generator,
so no test touches the network or the bundled data files.
"""
import pytest
from flask import template_rendered

from app import create_app
from colors import ColorEntry, ColorStore
from generation import GenerationFailure, GenerationSuccess


SEO = {
    "url": "https://kaomoji.example",
    "title": "Kaomoji Generator",
    "description": "Kaomoji and colors",
}


class FakeGenerator:
    """Stands in for KaomojiGenerator; records the words it was asked for."""

    def __init__(self, result=None):
        self.result = result or GenerationSuccess("(^▽^)")
        self.calls = []

    def generate(self, word):
        self.calls.append(word)
        return self.result


@pytest.fixture
def seo():
    return dict(SEO)


@pytest.fixture
def store():
    return ColorStore({
        "skyblue": ColorEntry("SkyBlue", "#87CEEB", "rgb(135, 206, 235)"),
        "red": ColorEntry("Red", "#FF0000", "rgb(255, 0, 0)"),
        "rebeccapurple": ColorEntry("RebeccaPurple", "#663399", "rgb(102, 51, 153)"),
    })


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def failing_generator():
    return FakeGenerator(GenerationFailure("No kaomoji generated."))


@pytest.fixture
def app(seo, store, generator):
    app = create_app(seo=seo, colors=store, generator=generator, rng=lambda: 0.0)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def record_renders():
    """Return a function that starts collecting (template name, context) for an app."""
    connected = []

    def start(app):
        recorded = []

        def record(sender, template, context, **extra):
            recorded.append((template.name, context))

        template_rendered.connect(record, app)
        connected.append((record, app))
        return recorded

    yield start
    for record, app in connected:
        template_rendered.disconnect(record, app)


@pytest.fixture
def rendered(app, record_renders):
    return record_renders(app)


@pytest.fixture
def fake_generator_cls():
    return FakeGenerator
