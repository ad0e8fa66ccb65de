"""Typer CLI application."""

import json
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from persian_gd.config import load_options
from persian_gd.core.color import decode_color
from persian_gd.create.builder import ImageBuilder
from persian_gd.decorate import PlainStringDecorator
from persian_gd.errors import InvalidColorFormat, PersianGDError
from persian_gd.logging_setup import configure_logging
from persian_gd.render.output import ImageBytes


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="persian-gd",
        help="Render lines of Persian text to PNG images.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)
    
    @app.command()
    def render(
        lines: Annotated[list[str], typer.Argument(help="Lines of text, drawn top to bottom")],
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="PNG file to write")] = None,
        stdout: Annotated[bool, typer.Option("--stdout", help="Write PNG bytes to standard output")] = False,
        options_file: Annotated[Optional[Path], typer.Option("--options", help="JSON file of builder options")] = None,
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Canvas width in pixels")] = None,
        font: Annotated[Optional[Path], typer.Option("--font", "-f", help="TrueType/OpenType font file")] = None,
        font_size: Annotated[Optional[int], typer.Option("--font-size", "-s")] = None,
        background: Annotated[Optional[str], typer.Option("--background", "-b", help="Background color, #RGB or #RRGGBB")] = None,
        foreground: Annotated[Optional[str], typer.Option("--foreground", "-c", help="Text color, #RGB or #RRGGBB")] = None,
        angle: Annotated[Optional[int], typer.Option("--angle", help="Rotation in degrees, counter-clockwise")] = None,
        x: Annotated[Optional[int], typer.Option("--x", help="Horizontal start of every line")] = None,
        y: Annotated[Optional[int], typer.Option("--y", help="Baseline of the first line")] = None,
        line_height: Annotated[Optional[int], typer.Option("--line-height", "-l")] = None,
        latin_digits: Annotated[bool, typer.Option("--latin-digits", help="Keep digits as 0-9")] = False,
        plain: Annotated[bool, typer.Option("--plain", help="Draw lines without any decoration")] = False,
        dump_options: Annotated[bool, typer.Option("--dump-options", help="Print the resolved options as JSON and exit")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log build steps")] = False,
    ) -> None:
        """Render LINES into a PNG file or onto standard output."""
        configure_logging(verbose, console=err_console)
        
        try:
            builder = ImageBuilder(load_options(options_file) if options_file else None)
        except PersianGDError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)
        
        overrides: dict[str, Any] = {
            "width": width,
            "font": str(font) if font else None,
            "fontSize": font_size,
            "backgroundColor": background,
            "fontColor": foreground,
            "angle": angle,
            "horizontalPosition": x,
            "verticalPosition": y,
            "lineHeight": line_height,
        }
        builder.set_options({name: value for name, value in overrides.items() if value is not None})
        if latin_digits:
            builder.set_use_local_number(False)
        if plain:
            builder.set_decorator(PlainStringDecorator())
        builder.add_lines(lines)
        
        if dump_options:
            resolved = builder.options()
            resolved.pop("decorator")
            print(json.dumps(resolved, ensure_ascii=False, indent=2))
            return
        
        if stdout:
            builder.set_output_image(True)
        elif output:
            builder.set_file_name(str(output)).set_output_image(False)
        elif not builder.output_image and not builder.file_name:
            err_console.print("[red]Nowhere to write the image.[/] Pass --output PATH or --stdout.")
            raise typer.Exit(1)

        try:
            result = builder.render()
        except PersianGDError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)
        
        if isinstance(result, ImageBytes):
            typer.get_binary_stream("stdout").write(result.data)
        else:
            err_console.print(f"[green]Wrote {len(builder.lines)} lines → {result.path}[/]")
    
    @app.command()
    def color(
        value: Annotated[str, typer.Argument(help="Hex color, #RGB or #RRGGBB")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the red, green and blue channels of a hex color."""
        try:
            red, green, blue = decode_color(value)
        except InvalidColorFormat as exc:
            err_console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)
        
        if json_output:
            print(json.dumps({"red": red, "green": green, "blue": blue}))
        else:
            console.print(f"{value} → rgb({red}, {green}, {blue})", highlight=False)
    
    return app
