"""Nox configuration for artconfig quality assurance tasks."""

import nox  # pyright: ignore[reportMissingImports] # noqa: I001

# Configure nox to use uv for faster package installs
nox.options.default_venv_backend = "uv"

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

LINT_TOOL = ["uv", "tool", "run", "ruff", "check"]
FORMAT_TOOL = ["uv", "tool", "run", "ruff", "format"]
TYPECHECK_TOOL = ["uv", "tool", "run", "mypy"]
SOURCE_PATHS = ["src/", "tests/"]


@nox.session(python=PYTHON_VERSIONS[-1])
def lint(session: nox.Session) -> None:
    """Run linting with ruff check."""
    session.install("-e", ".[dev]")
    session.run(*LINT_TOOL, *SOURCE_PATHS, external=True)


@nox.session(python=PYTHON_VERSIONS[-1])
def mypy(session: nox.Session) -> None:
    """Run type checking with mypy."""
    session.install("-e", ".[dev]")
    session.run(*TYPECHECK_TOOL, "src/", external=True)


@nox.session(python=PYTHON_VERSIONS[-1])
def format_check(session: nox.Session) -> None:
    """Check code formatting with ruff format."""
    session.install("-e", ".[dev]")
    session.run(*FORMAT_TOOL, *SOURCE_PATHS, "--check", "--diff", external=True)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run tests with pytest."""
    session.install("-e", ".[dev]")
    session.run("pytest", "--verbose", *session.posargs)
