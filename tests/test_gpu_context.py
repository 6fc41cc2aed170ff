import pytest

from hermeskit.gpu_context import GPUContext, GPUTexture, Rectangle, Vertex


class RecordingContext(GPUContext):
    def __init__(self):
        self.calls = []

    def fill_rect(self, rect, color):
        self.calls.append(("fill_rect", rect, color))

    def draw_line(self, x0, y0, x1, y1, color):
        self.calls.append(("draw_line", x0, y0, x1, y1, color))

    def draw_tris(self, vertices):
        self.calls.append(("draw_tris", list(vertices)))

    def draw_image(self, dst, src, texture):
        self.calls.append(("draw_image", dst, src, texture))

    def set_clip(self, rect):
        self.calls.append(("set_clip", rect))

    def restore_clip(self):
        self.calls.append(("restore_clip",))

    def upload_texture(self, bits, width, height):
        return GPUTexture(list(bits), width, height)

    def free_texture(self, texture):
        self.calls.append(("free_texture", texture))

    def set_tint(self, texture, argb):
        self.calls.append(("set_tint", texture, argb))

    def begin(self):
        self.calls.append(("begin",))

    def present(self):
        self.calls.append(("present",))

    def get_native(self):
        return self


def test_rectangle_size():
    rect = Rectangle(3, 13, 5, 9)
    assert rect.width == 13 - 3
    assert rect.height == 9 - 5
    assert rect.is_valid()


def test_intersection_of_overlapping_rectangles():
    first = Rectangle(0, 10, 0, 10)
    second = Rectangle(5, 15, 2, 8)
    assert first.intersection(second) == Rectangle(5, 10, 2, 8)


def test_intersection_is_commutative_and_idempotent():
    first = Rectangle(-4, 20, 1, 7)
    second = Rectangle(2, 30, -3, 5)
    both = first.intersection(second)
    assert both == second.intersection(first)
    assert both.intersection(first) == both
    assert both.intersection(both) == both


def test_disjoint_intersection_is_invalid():
    first = Rectangle(0, 5, 0, 5)
    second = Rectangle(10, 20, 0, 5)
    assert not first.intersection(second).is_valid()


def test_empty_rectangle_is_invalid():
    assert not Rectangle(4, 4, 0, 10).is_valid()
    assert not Rectangle(0, 10, 6, 6).is_valid()


def test_rectangle_is_frozen():
    rect = Rectangle(0, 1, 0, 1)
    with pytest.raises(AttributeError):
        rect.l = 5
    assert rect.l == 0
    assert rect == Rectangle(0, 1, 0, 1)


def test_vertex_defaults_to_untextured():
    vertex = Vertex(1.5, 2.5, color=0xFF00FF00)
    assert (vertex.u, vertex.v) == (0.0, 0.0)
    assert vertex.color == 0xFF00FF00


def test_gpu_context_cannot_be_instantiated():
    with pytest.raises(TypeError):
        GPUContext()


def test_complete_backend_receives_calls():
    gpu = RecordingContext()
    rect = Rectangle(0, 4, 0, 4)
    gpu.fill_rect(rect, 0xFF123456)
    texture = gpu.upload_texture([0xFFFFFFFF] * 4, 2, 2)
    assert (texture.width, texture.height) == (2, 2)
    gpu.draw_image(rect, Rectangle(0, 2, 0, 2), texture)
    assert gpu.calls[0] == ("fill_rect", rect, 0xFF123456)
    assert gpu.calls[1][0] == "draw_image"
    assert gpu.get_native() is gpu