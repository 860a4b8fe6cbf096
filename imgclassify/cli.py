import logging
from pathlib import Path
from typing import List, Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import config
from .core.batch import classify_directory, summarize
from .core.config import Settings
from .core.storage import write_results

app = typer.Typer(help="Batch images through a remote classifier and write the results to CSV",
                  add_completion=False)
console = Console()

EXIT_USAGE = 1
EXIT_NO_DIR = 2

# typer may bundle its own click; take UsageError from whichever one it raises
UsageError = next(c for c in typer.BadParameter.__mro__ if c.__name__ == "UsageError")

def _setup_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

def _check_level(value: str) -> str:
    if not isinstance(logging.getLevelName(value.upper()), int):
        raise typer.BadParameter(f"unknown logging level '{value}'")
    return value

@app.command()
def classify(
    output: str = typer.Option(..., "--file", help="Base name of the output CSV files"),
    directory: Path = typer.Option(..., "--dir", help="Directory holding .jpg/.jpeg/.png images"),
    url: str = typer.Option(..., "--url", envvar="CLASSIFIER_URL", help="Classifier endpoint"),
    user: Optional[str] = typer.Option(None, "--user", envvar="CLASSIFIER_USER", help="Basic-auth user"),
    passwd: Optional[str] = typer.Option(None, "--passwd", envvar="CLASSIFIER_PASSWD", help="Basic-auth password"),
    normalize: bool = typer.Option(False, "--normalize", help="Report 'negative' as 'unclassified' with zero confidence"),
    timeout: float = typer.Option(config.CLASSIFIER_TIMEOUT, "--timeout", help="Per-request timeout in seconds"),
    verify_tls: bool = typer.Option(config.CLASSIFIER_VERIFY_TLS, "--verify-tls/--no-verify-tls",
                                    help="Verify the endpoint's TLS certificate"),
    quiet: bool = typer.Option(False, "--quiet", help="No progress bar or summary table"),
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level", callback=_check_level, help="Logging level"),
):
    _setup_logging(log_level)
    if not directory.is_dir():
        console.print(f"[red]Directory not found: {directory}[/red]")
        raise typer.Exit(EXIT_NO_DIR)

    settings = Settings(directory=directory, output=output, url=url, user=user, passwd=passwd,
                        normalize=normalize, timeout=timeout, verify_tls=verify_tls)
    results = classify_directory(settings, progress=not quiet)
    paths = write_results(settings.output, results)

    if quiet:
        return
    stats = summarize(results)
    table = Table(title="Classification run")
    table.add_column("Images", justify="right", style="cyan")
    table.add_column("Classified", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_row(str(stats.total), str(stats.classified), str(stats.failed))
    console.print(table)
    for p in paths:
        console.print(f"Wrote {p}")

def main(argv: Optional[List[str]] = None) -> int:
    # click reports usage errors with status 2; this tool reserves 2 for a missing directory
    try:
        rv = app(args=argv, prog_name="imgclassify", standalone_mode=False)
    except UsageError as e:
        e.show()
        return EXIT_USAGE
    except typer.Abort:
        console.print("Aborted.")
        return EXIT_USAGE
    return rv if isinstance(rv, int) else 0

if __name__ == "__main__":
    raise SystemExit(main())
