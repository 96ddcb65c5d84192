from pathlib import Path

import typer

from src.lexicon import load_dictionary
from src.pipelines import DEFAULT_OUTPUT_PATH, RenderConfig, process
from src.render import DEFAULT_RESOLUTION
from src.texels import lookup_coordinate, normalize_token
from src.texels.config import DEFAULT_COLOR_SIZE, DEFAULT_MAX_DISTANCE

app = typer.Typer()


@app.command()
def render(
    input_path: Path = typer.Option(..., "--input", "-i", help="Text document to visualize."),
    dictionary_path: Path = typer.Option(
        ...,
        "--dictionary",
        "-d",
        help="Dictionary of `word x y` lines with normalized 2D coordinates.",
    ),
    output_path: Path = typer.Option(DEFAULT_OUTPUT_PATH, "--output", "-o", help="PNG file to write."),
    resolution: int = typer.Option(DEFAULT_RESOLUTION, "--resolution", "-r", help="Side length of the square image."),
    max_distance: int = typer.Option(
        DEFAULT_MAX_DISTANCE,
        "--max-distance",
        help="Edit-distance bound for words missing from the dictionary.",
    ),
    color_size: int = typer.Option(DEFAULT_COLOR_SIZE, "--color-size", help="BLAKE2b digest size used for colors."),
) -> None:
    """
    Paint every distinct word of a document at its dictionary coordinate.
    """
    config = RenderConfig(
        input_path=input_path,
        dictionary_path=dictionary_path,
        output_path=output_path,
        resolution=resolution,
        max_distance=max_distance,
        color_size=color_size,
    )
    try:
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        report = process(config)
    except OSError as exc:
        typer.echo(f"[error] {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except UnicodeDecodeError as exc:
        typer.echo(f"[error] Document is not valid UTF-8: {input_path} ({exc})", err=True)
        raise typer.Exit(code=1) from exc

    print(f"[texmap] Tokens: {report.tokens}, distinct words: {report.words}, painted: {report.resolved}")
    print(f"[texmap] Approximate matches: {report.approximate}")
    print(f"[texmap] Unknown words: {report.unknown}")
    print(f"[texmap] Output: {report.output_path}")


@app.command()
def lookup(
    word: str = typer.Argument(..., help="Word to look up (normalized before the lookup)."),
    dictionary_path: Path = typer.Option(..., "--dictionary", "-d", help="Dictionary of `word x y` lines."),
    max_distance: int = typer.Option(DEFAULT_MAX_DISTANCE, "--max-distance", help="Edit-distance bound."),
) -> None:
    """
    Show how a single word resolves against the dictionary.
    """
    if max_distance < 0:
        raise typer.BadParameter("max_distance must be non-negative.")

    try:
        dictionary = load_dictionary(dictionary_path)
    except OSError as exc:
        typer.echo(f"[error] {exc}", err=True)
        raise typer.Exit(code=1) from exc

    normalized = normalize_token(word)
    index = dictionary.index
    exact = index.exact_lookup(normalized)
    if exact is not None:
        print(f"{normalized}: exact ({exact.x}, {exact.y})")
        return

    for match in index.approximate_lookup(normalized, max_distance):
        print(f"  {match.word}\tdistance={match.distance}\t({match.coordinate.x}, {match.coordinate.y})")
    coordinate, _ = lookup_coordinate(index, normalized, max_distance)
    if coordinate is None:
        print(f"{normalized}: unknown")
        raise typer.Exit(code=1)
    print(f"{normalized}: approximate ({coordinate.x}, {coordinate.y})")


if __name__ == "__main__":
    app()
