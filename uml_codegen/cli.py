"""
Command-line interface for code generation.

Loads a JSON model document and writes one Java file per interface or
enumeration classifier.
"""

import argparse
from pathlib import Path
from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import GENERATED_KINDS, __version__
from .core.config import ConfigError, GeneratorConfig, load_config
from .core.generator import GenerationResult, generate_code
from .core.model import Classifier, iter_classifiers
from .languages.java import JavaGenerator
from .logging_config import get_logger, setup_logging
from .registry import RegistryError, get_generator_for, list_all_kind_info
from .utils import ModelLoaderError, load_model

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uml-codegen",
        description="Generate Java interfaces and enums from a class-diagram model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uml-codegen model.json
  uml-codegen model.json --root-package Data --output-dir src/main/java
  uml-codegen --url https://example.org/model.json --classifier a::b::Company
  uml-codegen --list-kinds
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="JSON model document")
    input_group.add_argument("--url", help="URL to fetch the model document from")

    parser.add_argument(
        "--root-package",
        metavar="PACKAGE",
        help="Root package stripped from generated packages (a.b or a::b)",
    )
    parser.add_argument(
        "--classifier",
        metavar="QUALIFIED_NAME",
        help="Generate only this classifier",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        help="Write files below DIR instead of printing them",
    )

    # Style options
    style_group = parser.add_argument_group("style options")
    style_group.add_argument("--indent", type=int, metavar="N", help="Indent width")
    style_group.add_argument(
        "--javadoc-style",
        choices=["line", "block"],
        help="One Javadoc tag per comment line or per comment block",
    )
    style_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't transfer model comments into Javadoc",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-kinds",
        action="store_true",
        help="List supported declaration kinds and exit",
    )
    info_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging and generation metadata",
    )
    info_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of the ``uml-codegen`` command.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("debug" if args.verbose else "warning")

    try:
        if args.list_kinds:
            return _list_kinds()

        if not (args.file or args.url):
            console.print("[red]✗[/red] Input source required (file or --url)")
            return 1

        config = _build_config(args)
        classifiers = _load_classifiers(args)
        return _generate_and_output(classifiers, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _list_kinds() -> int:
    """List supported declaration kinds with details."""
    table = Table(
        title="📋 Supported Declarations", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Kind", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for kind, info in sorted(list_all_kind_info().items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {kind}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] uml-codegen [dim]model.json[/dim] "
            "--root-package [cyan]PACKAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI overrides."""
    overrides = {}

    if args.root_package:
        overrides["root_package"] = args.root_package
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.indent is not None:
        overrides["indent_size"] = args.indent
    if args.javadoc_style:
        overrides["javadoc_style"] = args.javadoc_style
    if args.no_comments:
        overrides["add_comments"] = False

    try:
        return load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _load_classifiers(args: argparse.Namespace) -> List[Classifier]:
    """Load the model and pick the classifiers to generate."""
    try:
        source, classifiers = load_model(file_path=args.file, url=args.url)
    except (ModelLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load model: {e}") from e

    console.print(f"📄 Loaded: {source}")

    if args.classifier:
        classifier = classifiers.get(args.classifier)
        if classifier is None:
            raise CLIError(f"Classifier not found: {args.classifier}")
        if classifier.kind not in GENERATED_KINDS:
            raise CLIError(
                f"{args.classifier} is a {classifier.kind.value}; only interfaces "
                "and enumerations are generated"
            )
        return [classifier]

    return list(iter_classifiers(classifiers, GENERATED_KINDS))


def _generate_all(
    classifiers: List[Classifier], config: GeneratorConfig
) -> Dict[Classifier, tuple]:
    """Generator and result per classifier, one generator per kind."""
    generators = {}
    outcomes = {}

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("[green]Generating Java code...", total=len(classifiers))
        for classifier in classifiers:
            if classifier.kind not in generators:
                try:
                    generators[classifier.kind] = get_generator_for(classifier, config)
                except RegistryError as e:
                    raise CLIError(str(e)) from e
            generator = generators[classifier.kind]
            outcomes[classifier] = (
                generator,
                generate_code(generator, classifier, config.root_package),
            )
            progress.advance(task)

    return outcomes


def _generate_and_output(
    classifiers: List[Classifier], config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    if not classifiers:
        console.print("[yellow]⚠️  No interfaces or enumerations in the model[/yellow]")
        return 0

    outcomes = _generate_all(classifiers, config)
    failures = 0

    for classifier, (generator, result) in outcomes.items():
        if not result.success:
            failures += 1
            console.print(
                f"[red]✗ {classifier.qualified_name}:[/red] {result.error_message}"
            )
            continue

        if config.output_dir:
            _write_file(generator, classifier, result, config)
        else:
            _print_code(classifier, result)

        if args.verbose:
            _print_metadata(result)

        if result.warnings:
            console.print("\n[yellow]⚠️  Warnings:[/yellow]")
            for warning in result.warnings:
                console.print(f"  [yellow]•[/yellow] {warning}")
            console.print()

    generated = len(outcomes) - failures
    console.print(
        f"\n[green]✓[/green] {generated} generated"
        + (f", [red]{failures} failed[/red]" if failures else "")
    )
    return 1 if failures else 0


def _write_file(
    generator: JavaGenerator,
    classifier: Classifier,
    result: GenerationResult,
    config: GeneratorConfig,
):
    output_path = Path(config.output_dir) / generator.output_path(
        classifier, config.root_package
    )
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the configured line ending as is
        with output_path.open("w", encoding="utf-8", newline="") as f:
            f.write(result.code)
    except OSError as e:
        raise CLIError(f"Failed to write to {output_path}: {e}") from e

    logger.info("Wrote %s", output_path)
    console.print(f"[green]✓[/green] {classifier.qualified_name} → [cyan]{output_path}[/cyan]")


def _print_code(classifier: Classifier, result: GenerationResult):
    border = "═" * 30
    console.print(f"\n[green]{border} 📄 {classifier.qualified_name} {border}[/green]\n")
    console.print(Syntax(result.code, "java", theme="monokai"))


def _print_metadata(result: GenerationResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)
