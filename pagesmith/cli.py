"""Cyclopts CLI entrypoint for building pagesmith sites.

The ``pagesmith`` console script renders every page of a site described by a
``site.yaml`` file, writing one HTML file per page (or per pagination window)
and copying static files alongside them.

Examples
--------
Build the site in the current directory:

>>> from pagesmith.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory and fail on any broken page:

>>> from pagesmith.cli import app
>>> app(["build", "--output-dir", "dist", "--strict"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILENAME
from .builder import SiteBuilder
from .config import load_site_config

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILENAME)
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="pagesmith", config=cyclopts.config.Env("PAGESMITH_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        msg = f"Unknown log level '{level}'."
        raise ValueError(msg)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)


@app.command(help="Render every page of the site and copy static files.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="PAGESMITH_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="PAGESMITH_OUTPUT_DIR"),
    ] = None,
    strict: typ.Annotated[
        bool, Parameter(help="Exit non-zero when any page fails to render")
    ] = False,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="PAGESMITH_LOG_LEVEL")
    ] = "warning",
) -> int:
    """Build the site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``PAGESMITH_CONFIG``).
    output_dir : Path or None, optional
        Override for the configured output directory.
    strict : bool, optional
        When ``True`` a page that failed to render makes the command return 1.
    log_level : str, optional
        Name of the logging level, for example ``"info"`` or ``"debug"``.

    Returns
    -------
    int
        ``0`` on success, ``1`` when ``strict`` is set and any page failed.
    """
    _configure_logging(log_level)
    site_config = load_site_config(config)
    if output_dir is not None:
        site_config = site_config.with_output_dir(output_dir)

    report = SiteBuilder(site_config).run()
    for path in report.written:
        print(f"wrote {_format_path(path)}")
    for failure in report.failures:
        for error in failure.errors:
            print(f"failed {failure.page.path}: {error}", file=sys.stderr)
    if strict and not report.ok:
        return 1
    return 0


def main() -> None:
    """Invoke the Cyclopts application that powers the `pagesmith` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    result = app()
    if isinstance(result, int) and result:
        sys.exit(result)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
