"""Tests for ImageBuilder configuration and the build pipeline."""

import pytest

from persian_gd import (
    ImageBuilder,
    ImageBytes,
    ImageFile,
    InvalidColorFormat,
    OutputMode,
    PersianGDError,
    PersianStringDecorator,
    PlainStringDecorator,
    create,
)
from persian_gd.create.builder import OPTION_FIELDS


class TestDefaults:
    """Tests for default option values."""

    def test_defaults(self) -> None:
        builder = ImageBuilder()
        assert builder.width == 500
        assert builder.file_name is None
        assert builder.output_image is False
        assert builder.background_color == "#FFFFFF"
        assert builder.font_color == "#000000"
        assert builder.font_size == 12
        assert builder.angle == 0
        assert builder.horizontal_position == 10
        assert builder.vertical_position == 10
        assert builder.line_height == 25
        assert builder.font is None
        assert builder.use_local_number is True
        assert builder.lines == ()

    def test_decorator_not_set_at_construction(self) -> None:
        assert ImageBuilder().decorator is None

    def test_create_helper(self) -> None:
        builder = create({"width": 320})
        assert isinstance(builder, ImageBuilder)
        assert builder.width == 320


class TestFluentSetters:
    """Every setter returns the builder itself."""

    @pytest.mark.parametrize(
        "method, value",
        [
            ("set_width", 300),
            ("set_file_name", "out.png"),
            ("set_output_image", True),
            ("set_background_color", "#000"),
            ("set_font_color", "#fff"),
            ("set_font", "font.ttf"),
            ("set_font_size", 20),
            ("set_angle", 45),
            ("set_horizontal_position", 4),
            ("set_vertical_position", 40),
            ("set_line_height", 30),
            ("set_use_local_number", False),
            ("set_decorator", PlainStringDecorator()),
            ("set_options", {"width": 1}),
            ("add_line", "text"),
            ("add_lines", ["a", "b"]),
        ],
    )
    def test_returns_same_instance(self, method: str, value: object) -> None:
        builder = ImageBuilder()
        assert getattr(builder, method)(value) is builder

    def test_setters_do_not_validate(self) -> None:
        builder = ImageBuilder().set_background_color("not a color").set_width(-5)
        assert builder.background_color == "not a color"
        assert builder.width == -5


class TestSetOptions:
    """Tests for set_options."""

    def test_camel_case_names(self) -> None:
        builder = ImageBuilder().set_options({
            "width": 640,
            "fileName": "a.png",
            "outputImage": True,
            "backgroundColor": "#123",
            "fontColor": "#456",
            "fontSize": 18,
            "angle": 5,
            "horizontalPosition": 1,
            "verticalPosition": 2,
            "lineHeight": 3,
            "font": "f.ttf",
            "useLocalNumber": False,
        })
        assert builder.width == 640
        assert builder.file_name == "a.png"
        assert builder.output_image is True
        assert builder.background_color == "#123"
        assert builder.font_color == "#456"
        assert builder.font_size == 18
        assert builder.angle == 5
        assert builder.horizontal_position == 1
        assert builder.vertical_position == 2
        assert builder.line_height == 3
        assert builder.font == "f.ttf"
        assert builder.use_local_number is False

    def test_snake_case_aliases(self) -> None:
        builder = ImageBuilder({"font_size": 30, "line_height": 40})
        assert builder.font_size == 30
        assert builder.line_height == 40

    def test_decorator_option(self) -> None:
        decorator = PlainStringDecorator()
        assert ImageBuilder({"decorator": decorator}).decorator is decorator

    def test_unknown_keys_ignored(self) -> None:
        builder = ImageBuilder().set_options({"bogus": 1, "_lines": ["x"], "_canvas_factory": None, "width": 10})
        assert builder.width == 10
        assert not hasattr(builder, "bogus")
        assert builder.lines == ()

    def test_per_build_keys_have_no_effect(self) -> None:
        builder = ImageBuilder().set_options({
            "imageResource": object(),
            "backgroundColorAllocate": 3,
            "fontColorAllocate": 4,
        })
        assert not hasattr(builder, "imageResource")
        assert not hasattr(builder, "image_resource")
        assert not hasattr(builder, "background_color_allocate")

    def test_options_round_trip(self) -> None:
        builder = ImageBuilder({"width": 200, "lines": ["a"]})
        options = builder.options()
        assert set(options) == set(OPTION_FIELDS)
        assert options["width"] == 200
        assert options["lines"] == ["a"]
        assert ImageBuilder(options).options() == options


class TestHeight:
    """Canvas height is (lines + 1) * line height."""

    @pytest.mark.parametrize("count", [0, 1, 2, 7, 40])
    @pytest.mark.parametrize("line_height", [1, 25, 33])
    def test_height(self, count: int, line_height: int) -> None:
        builder = ImageBuilder().set_line_height(line_height).add_lines(["x"] * count)
        assert builder.height == (count + 1) * line_height
        assert builder.height > count * line_height


class TestPipeline:
    """Tests for render()/build() against a recording canvas."""

    def test_canvas_size(self, recording_builder, canvases) -> None:
        recording_builder.set_output_image(True).add_lines(["a", "b"]).build()
        assert (canvases[0].width, canvases[0].height) == (500, 75)

    def test_call_order(self, recording_builder, recording_decorator, events) -> None:
        (recording_builder
            .set_output_image(True)
            .set_decorator(recording_decorator)
            .set_background_color("#abc")
            .set_font_color("#102030")
            .add_lines(["one", "two"])
            .build())
        assert events == [
            ("allocate", (0xAA, 0xBB, 0xCC)),
            ("allocate", (0x10, 0x20, 0x30)),
            ("decorate", "one"),
            ("draw", "<one>"),
            ("decorate", "two"),
            ("draw", "<two>"),
            ("encode",),
            ("close",),
        ]

    def test_draw_parameters(self, recording_builder, recording_decorator, canvases) -> None:
        (recording_builder
            .set_output_image(True)
            .set_decorator(recording_decorator)
            .set_options({
                "fontSize": 16,
                "angle": 30,
                "horizontalPosition": 7,
                "verticalPosition": 12,
                "lineHeight": 20,
                "font": "Vazir.ttf",
                "useLocalNumber": False,
            })
            .add_lines(["a", "b", "c"])
            .build())
        draws = canvases[0].draws
        assert [draw[3] for draw in draws] == [12, 32, 52]
        for font_size, angle, x, _y, color, font, _text in draws:
            assert (font_size, angle, x, font) == (16, 30, 7, "Vazir.ttf")
            assert color.rgb == (0, 0, 0)
            assert color.handle == 1
        assert recording_decorator.calls == [("a", False), ("b", False), ("c", False)]

    def test_default_decorator_resolved_at_build(self, recording_builder, canvases) -> None:
        recording_builder.set_output_image(True).add_line("12").build()
        assert canvases[0].draws[0][-1] == "۱۲"
        assert recording_builder.decorator is None

    def test_buffer_mode(self, recording_builder, events) -> None:
        result = recording_builder.set_output_image(True).add_line("x").render()
        assert isinstance(result, ImageBytes)
        assert result.mode is OutputMode.BUFFER
        assert result.data.startswith(b"\x89PNG")
        assert not any(event[0] == "save" for event in events)

    def test_file_mode(self, recording_builder, events) -> None:
        result = recording_builder.set_file_name("out.png").add_line("x").render()
        assert isinstance(result, ImageFile)
        assert result.mode is OutputMode.FILE
        assert result.path == "out.png"
        assert ("save", "out.png") in events
        assert recording_builder.build() == "out.png"

    def test_file_mode_requires_name(self, recording_builder, canvases) -> None:
        with pytest.raises(PersianGDError):
            recording_builder.add_line("x").build()
        assert canvases == []

    def test_invalid_background_aborts(self, recording_builder, canvases, events) -> None:
        recording_builder.set_output_image(True).set_background_color("fff").add_line("x")
        with pytest.raises(InvalidColorFormat):
            recording_builder.build()
        assert canvases[0].closed
        assert events == [("close",)]

    def test_invalid_font_color_aborts(self, recording_builder, canvases, events) -> None:
        recording_builder.set_output_image(True).set_font_color("#1234").add_line("x")
        with pytest.raises(InvalidColorFormat):
            recording_builder.build()
        assert canvases[0].closed
        assert not any(event[0] in ("draw", "encode") for event in events)

    def test_canvas_released_when_drawing_fails(self, recording_builder, canvases) -> None:
        class Exploding:
            def decorate(self, text: str, use_local_digits: bool) -> str:
                raise RuntimeError("boom")

        recording_builder.set_output_image(True).set_decorator(Exploding()).add_line("x")
        with pytest.raises(RuntimeError, match="boom"):
            recording_builder.build()
        assert canvases[0].closed

    def test_repeated_builds_recompute(self, recording_builder, canvases) -> None:
        recording_builder.set_output_image(True).add_line("a")
        recording_builder.build()
        recording_builder.add_line("b").set_font_color("#f00")
        recording_builder.build()
        assert len(canvases) == 2
        assert canvases[0].height == 50
        assert canvases[1].height == 75
        assert canvases[0].palette == [(255, 255, 255), (0, 0, 0)]
        assert canvases[1].palette == [(255, 255, 255), (255, 0, 0)]
        assert [draw[-1] for draw in canvases[1].draws] == ["a", "b"]
        assert all(canvas.closed for canvas in canvases)

    def test_decorator_can_change_between_builds(self, recording_builder, canvases) -> None:
        recording_builder.set_output_image(True).add_line("1")
        recording_builder.build()
        recording_builder.set_decorator(PlainStringDecorator()).build()
        assert canvases[0].draws[0][-1] == "۱"
        assert canvases[1].draws[0][-1] == "1"

    def test_no_lines(self, recording_builder, canvases) -> None:
        recording_builder.set_output_image(True).build()
        assert canvases[0].height == 25
        assert canvases[0].draws == []

    def test_explicit_persian_decorator(self, recording_builder, canvases) -> None:
        decorator = PersianStringDecorator()
        recording_builder.set_output_image(True).set_decorator(decorator).add_line("7").build()
        assert recording_builder.decorator is decorator
        assert canvases[0].draws[0][-1] == "۷"
