from nox import Session, options, param, parametrize, session

options.error_on_external_run = True
options.sessions = ["lint", "type_check", "test"]


@session(python=["3.10", "3.11", "3.12", "3.13"])
def test(s: Session) -> None:
    s.install("-e", ".[test]")
    s.run("pytest", "--cov=fact", "--cov-report=html", "--cov-report=term", "tests", *s.posargs)


# For some sessions, set venv_backend="none" to simply execute tools within the existing
# virtual environment, rather than have nox create a new one for each session.
@session(venv_backend="none")
@parametrize(
    "command",
    [
        param(
            [
                "ruff",
                "check",
                ".",
                "--select",
                "I",
                # Also remove unused imports.
                "--select",
                "F401",
                "--extend-fixable",
                "F401",
                "--fix",
            ],
            id="sort_imports",
        ),
        param(["ruff", "format", "."], id="format"),
    ],
)
def fmt(s: Session, command: list[str]) -> None:
    s.run(*command)


@session(venv_backend="none")
@parametrize(
    "command",
    [
        param(["ruff", "check", "."], id="lint_check"),
        param(["ruff", "format", "--check", "."], id="format_check"),
    ],
)
def lint(s: Session, command: list[str]) -> None:
    s.run(*command)


@session(venv_backend="none")
def lint_fix(s: Session) -> None:
    s.run("ruff", "check", ".", "--extend-fixable", "F401", "--fix")


@session(venv_backend="none")
def type_check(s: Session) -> None:
    s.run("mypy", "src", "tests", "noxfile.py")


@session(venv_backend="none")
def bench(s: Session) -> None:
    """Time every algorithm, e.g. ``nox -s bench -- 2000``."""
    s.run("fact", *(s.posargs or ["1000"]))
