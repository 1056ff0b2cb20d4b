"""Command-line interface for jars."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .archive import JarError
from .config import default_config_path, load_config, write_default_config
from .extract import jar
from .log import setup_logger
from .option import CombineMode, ExtensionMatch, JarOption

app = typer.Typer(
    name="jars",
    help="按路径前缀 / 扩展名把 JAR (ZIP) 条目提取到内存并列出",
    add_completion=False,
)
console = Console()


def format_size(size: int) -> str:
    """Byte count with a binary unit suffix: 512, 1K, 1.5K, 3M."""
    value = float(size)
    for unit in ("", "K", "M", "G", "T"):
        if value < 1024 or unit == "T":
            break
        value /= 1024
    return f"{value:.1f}".rstrip("0").rstrip(".") + unit


def build_option(
    config_path: Optional[Path],
    targets: List[str],
    exts: List[str],
    keep_meta_inf: bool = False,
    any_match: bool = False,
    suffix_ext: bool = False,
    legacy: bool = False,
) -> JarOption:
    """配置文件打底，命令行参数追加"""
    builder = load_config(config_path).builder()
    builder.add_path_prefixes(targets).add_extensions(exts)
    if keep_meta_inf:
        builder.keep_meta_info()
    if any_match:
        builder.combine(CombineMode.ANY)
    if suffix_ext:
        builder.extension_match(ExtensionMatch.SUFFIX)
    if legacy:
        builder.legacy()
    return builder.build()


@app.command("list")
def list_entries(
    archive: Path = typer.Argument(..., help="JAR / ZIP 文件路径"),
    target: Optional[List[str]] = typer.Option(
        None,
        "-t",
        "--target",
        help="路径前缀（可多次使用），例如 java/lang",
    ),
    ext: Optional[List[str]] = typer.Option(
        None,
        "-e",
        "--ext",
        help="扩展名（可多次使用，不带点号），例如 class",
    ),
    keep_meta_inf: bool = typer.Option(False, "--keep-meta-inf", help="同时保留 META-INF 目录"),
    any_match: bool = typer.Option(False, "--any", help="前缀或扩展名任一匹配即提取"),
    suffix_ext: bool = typer.Option(False, "--suffix-ext", help="扩展名按后缀匹配（ass 匹配 class）"),
    legacy: bool = typer.Option(False, "--legacy", help="兼容旧行为：等同 --any --suffix-ext"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help="TOML 配置文件"),
    json_output: bool = typer.Option(False, "--json", help="输出 JSON 格式"),
    debug: bool = typer.Option(False, "--debug", help="显示调试日志"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="同时写入日志文件（DEBUG 级别）"),
) -> None:
    """列出按规则提取到的条目及其大小。"""
    setup_logger("DEBUG" if debug else "WARNING", log_file=log_file)

    try:
        option = build_option(
            config,
            target or [],
            ext or [],
            keep_meta_inf=keep_meta_inf,
            any_match=any_match,
            suffix_ext=suffix_ext,
            legacy=legacy,
        )
    except (OSError, ValueError) as e:
        console.print(f"[bold red]配置错误:[/bold red] {e}")
        raise typer.Exit(code=1)

    try:
        result = jar(archive, option)
    except JarError as e:
        console.print(f"[bold red]提取失败:[/bold red] {e}")
        raise typer.Exit(code=1)

    names = result.names()
    if json_output:
        entries = [{"path": name, "size": len(result.files[name])} for name in names]
        typer.echo(json.dumps(entries, ensure_ascii=False, indent=2))
        return

    table = Table(title=str(archive), show_header=True, header_style="bold")
    table.add_column("路径", style="cyan", overflow="fold")
    table.add_column("大小", justify="right")
    for name in names:
        table.add_row(name, format_size(len(result.files[name])))
    console.print(table)
    console.print(
        f"[bold cyan]共 {len(result)} 个条目, 总计 {format_size(result.total_size())}[/bold cyan]"
    )


@app.command("init-config")
def init_config(
    path: Optional[Path] = typer.Argument(None, help="目标路径，默认 ~/.config/jars/config.toml"),
    force: bool = typer.Option(False, "--force", "-f", help="覆盖已存在的配置文件"),
) -> None:
    """写入默认配置文件。"""
    try:
        written = write_default_config(path or default_config_path(), overwrite=force)
    except FileExistsError as e:
        console.print(f"[yellow]{e}[/yellow]，使用 --force 覆盖")
        raise typer.Exit(1)
    console.print(f"[green]默认配置已写入[/green] {written}")


@app.command("version")
def version() -> None:
    """显示版本号。"""
    typer.echo(f"jars {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
