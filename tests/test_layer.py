import pytest

from gentracer.layer import Layer, LayerStack


class Recorder(Layer):
    def __init__(self, name, events, app=None):
        super().__init__(app)
        self.name = name
        self.events = events

    def on_attach(self):
        self.events.append(("attach", self.name))

    def on_detach(self):
        self.events.append(("detach", self.name))

    def on_update(self, delta):
        self.events.append(("update", self.name, delta))

    def on_render(self):
        self.events.append(("render", self.name))


def test_layer_is_abstract():
    with pytest.raises(TypeError):
        Layer(None)


def test_layer_keeps_application():
    app = object()
    events = []
    layer = Recorder("m", events, app)
    assert layer.application is app

    stack = LayerStack()
    stack.push_layer(layer)
    assert list(stack) == [layer]
    assert events == [("attach", "m")]


def test_push_attaches_in_order():
    events = []
    stack = LayerStack()
    a, b = Recorder("a", events), Recorder("b", events)
    stack.push_layer(a)
    stack.push_layer(b)
    assert events == [("attach", "a"), ("attach", "b")]
    assert list(stack) == [a, b]


def test_update_and_render_visit_all_in_order():
    events = []
    stack = LayerStack()
    stack.push_layer(Recorder("a", events))
    stack.push_layer(Recorder("b", events))
    events.clear()
    stack.on_update(0.25)
    stack.on_render()
    assert events == [
        ("update", "a", 0.25),
        ("update", "b", 0.25),
        ("render", "a"),
        ("render", "b"),
    ]


def test_pop_detaches_and_removes():
    events = []
    stack = LayerStack()
    a, b = Recorder("a", events), Recorder("b", events)
    stack.push_layer(a)
    stack.push_layer(b)
    stack.pop_layer(a)
    assert events[-1] == ("detach", "a")
    assert list(stack) == [b]


def test_push_after_pop_appends():
    events = []
    stack = LayerStack()
    a, b, c = (Recorder(n, events) for n in "abc")
    stack.push_layer(a)
    stack.push_layer(b)
    stack.pop_layer(a)
    stack.push_layer(c)
    assert list(stack) == [b, c]


def test_pop_unknown_layer_is_ignored():
    events = []
    stack = LayerStack()
    a = Recorder("a", events)
    stack.push_layer(a)
    stack.pop_layer(Recorder("x", events))
    assert list(stack) == [a]
    assert ("detach", "x") not in events


def test_pop_all_detaches_everything():
    events = []
    stack = LayerStack()
    stack.push_layer(Recorder("a", events))
    stack.push_layer(Recorder("b", events))
    stack.pop_all_layers()
    assert events[-2:] == [("detach", "a"), ("detach", "b")]
    assert len(stack) == 0


def test_context_manager_detaches_on_exit():
    events = []
    with LayerStack() as stack:
        stack.push_layer(Recorder("a", events))
    assert events == [("attach", "a"), ("detach", "a")]
    assert len(stack) == 0