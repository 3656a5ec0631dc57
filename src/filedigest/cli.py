"""Command-line entry points for filedigest."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer

from filedigest.config import ConfigError, FileDigestConfig, dump_example_config, load_config
from filedigest.digest import Algorithm, NotAFileError, hash_file, hash_file_async
from filedigest.util.logging import configure_logging
from filedigest.util.manifest import write_manifest

app = typer.Typer(add_completion=False, help="SHA-2 file digest CLI")


def _load(config_path: Optional[Path]) -> FileDigestConfig:
    try:
        return load_config(config_path)
    except ConfigError as exc:
        typer.echo(f"filedigest: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _describe(exc: OSError) -> str:
    if isinstance(exc, NotAFileError):
        return "not a regular file"
    if isinstance(exc, FileNotFoundError):
        return "no such file"
    return exc.strerror or str(exc)


def _digest_sync(paths: List[Path], algorithm: Algorithm) -> list[str | OSError]:
    results: list[str | OSError] = []
    for path in paths:
        try:
            results.append(hash_file(path, algorithm))
        except OSError as exc:
            results.append(exc)
    return results


async def _digest_async(paths: List[Path], algorithm: Algorithm) -> list[str | OSError]:
    async def _one(path: Path) -> str | OSError:
        try:
            return await hash_file_async(path, algorithm)
        except OSError as exc:
            return exc

    return list(await asyncio.gather(*(_one(path) for path in paths)))


@app.command()
def digest(
    paths: List[Path] = typer.Argument(..., help="Files to hash"),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-a", help="sha224, sha256, sha384 or sha512"),
    use_async: Optional[bool] = typer.Option(None, "--async/--sync", help="Read files on worker threads"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML/TOML/JSON config file"),
    manifest_dir: Optional[Path] = typer.Option(None, help="Write a JSON run manifest under this directory"),
) -> None:
    """Print `<hex>  <path>` for every file, like the coreutils sha*sum tools."""

    cfg = _load(config)
    logger = configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path)

    try:
        algo = Algorithm.parse(algorithm) if algorithm else cfg.hashing.algorithm
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--algorithm") from exc
    mode = cfg.hashing.mode if use_async is None else ("async" if use_async else "sync")

    logger.info("Hashing %d file(s) with %s (%s)", len(paths), algo.value, mode)
    if mode == "async":
        results = asyncio.run(_digest_async(paths, algo))
    else:
        results = _digest_sync(paths, algo)

    digests: dict[str, str] = {}
    failures: dict[str, str] = {}
    for path, result in zip(paths, results):
        if isinstance(result, OSError):
            reason = _describe(result)
            failures[str(path)] = reason
            logger.debug("Failed to hash %s: %s", path, reason)
            typer.echo(f"filedigest: {path}: {reason}", err=True)
        else:
            digests[str(path)] = result
            typer.echo(f"{result}  {path}")

    if manifest_dir is not None:
        dest = write_manifest(
            {"algorithm": algo.value, "mode": mode, "digests": digests, "failures": failures},
            root=manifest_dir,
        )
        logger.info("Wrote manifest %s", dest)

    if failures:
        raise typer.Exit(code=1)


@app.command()
def algorithms() -> None:
    """List supported algorithms and their digest sizes."""

    for algo in Algorithm:
        typer.echo(f"{algo.value}\t{algo.digest_size * 8} bits\t{algo.digest_size * 2} hex chars")


@app.command()
def dump_config(
    dest: Path = typer.Argument(..., help="Destination YAML or JSON file"),
) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except ConfigError as exc:
        typer.echo(f"filedigest: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
