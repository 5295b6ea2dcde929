"""Nox sessions for blockjson2md: tests, coverage, ruff and mypy."""

import nox

PYTHON_ALL_VERSIONS = ["3.12", "3.13", "3.14"]
PYTHON_MAIN_VERSION = "3.14"
PYTHON_OTHER_VERSIONS = list(set(PYTHON_ALL_VERSIONS) - {PYTHON_MAIN_VERSION})

nox.options.sessions = [
    "tests_with_coverage",
    "lint",
    "type_check",
    "fmt_check",
    "install_test",
]
nox.options.default_venv_backend = "uv|virtualenv"


@nox.session(python=PYTHON_OTHER_VERSIONS)
def tests(session):
    """Run pytest on the older supported interpreters."""
    session.install("-e", ".[test]")
    session.run("pytest", "tests", *session.posargs)


@nox.session(python=PYTHON_MAIN_VERSION, tags=["pre-commit"])
def tests_main_python(session):
    """Run pytest on the main interpreter, without coverage."""
    session.install("-e", ".[test]")
    session.run("pytest", "tests")


@nox.session(python=PYTHON_MAIN_VERSION)
def tests_with_coverage(session):
    """Run pytest with line coverage of the blockjson2md package."""
    session.install("-e", ".[test]")
    session.run(
        "pytest",
        "--cov=blockjson2md",
        "--cov-report=term-missing",
        "--cov-report=xml",
        "tests/",
        *session.posargs,
    )


@nox.session(python=PYTHON_MAIN_VERSION)
def lint(session):
    """Lint package and tests with ruff."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session(python=PYTHON_MAIN_VERSION)
def type_check(session):
    """Type check package and tests with mypy."""
    session.install("-e", ".")
    session.install("mypy", "pytest")
    session.run("mypy", "blockjson2md", "tests")


@nox.session(python=PYTHON_MAIN_VERSION)
def fmt_check(session):
    """Fail if ruff would reformat anything."""
    session.install("ruff")
    session.run("ruff", "format", "--check", "--diff", ".")


@nox.session(python=PYTHON_MAIN_VERSION)
def fmt(session):
    """Reformat in place with ruff."""
    session.install("ruff")
    session.run("ruff", "format", ".")


@nox.session(python=PYTHON_ALL_VERSIONS, venv_backend="venv")
def install_test(session):
    """Install from a clean venv and check the console script starts."""
    session.install(".")
    session.run("python", "-c", "import blockjson2md.blockjson2md")
    session.run("blockjson2md", "--help")
