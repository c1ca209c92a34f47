from pathlib import Path

import typer

from .errors import SamplerError

app = typer.Typer(
    help="Randomly sample names, without replacement, from include lists minus exclude lists.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _emit(line: str) -> None:
    # Raw lines usually carry their own terminator; bytes keep non-UTF-8 entries intact.
    typer.echo(line.encode("utf-8", "surrogateescape"), nl=not line.endswith("\n"))


def _run(
    num_samples: int,
    include: list[Path],
    exclude: list[Path],
    seed: int | None,
    strip_newlines: bool,
    verbose: bool,
) -> None:
    from .sampling.draw import sample_from_files

    run = sample_from_files(
        include, exclude, num_samples, seed=seed, strip_newlines=strip_newlines
    )
    if verbose:
        typer.echo(
            f"Population: {run.population_size} entries from {len(include)} include file(s); "
            f"{run.filtered_size} left after {len(exclude)} exclude file(s).",
            err=True,
        )

    for line in run.samples:
        _emit(line)


@app.command()
def sample_command(
    num_samples: int = typer.Option(
        ..., "--num-samples", "-n", min=0, help="Specifies the number of entries to sample"
    ),
    include: list[Path] | None = typer.Option(
        None,
        "--include",
        "-i",
        help="File of names to include in the sample population (repeatable)",
    ),
    exclude: list[Path] | None = typer.Option(
        None,
        "--exclude",
        "-x",
        help="File of names to exclude from the sample population (repeatable)",
    ),
    seed: int | None = typer.Option(None, "--seed", "-s", help="Seed for a repeatable draw"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="YAML file providing include/exclude/seed defaults"
    ),
    strip_newlines: bool | None = typer.Option(
        None,
        "--strip-newlines/--keep-newlines",
        help="Drop trailing line terminators before comparing entries (default: keep)",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Report population sizes on stderr"
    ),
) -> None:
    from .config import SampleConfig, load_config

    try:
        cfg = load_config(config) if config is not None else SampleConfig()
        _run(
            num_samples=num_samples,
            include=[*cfg.include, *(include or [])],
            exclude=[*cfg.exclude, *(exclude or [])],
            seed=seed if seed is not None else cfg.seed,
            strip_newlines=strip_newlines if strip_newlines is not None else cfg.strip_newlines,
            verbose=verbose,
        )
    except SamplerError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def main() -> None:
    app()
