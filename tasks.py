# type: ignore
import os

from invoke import task


@task
def venv(ctx):
    """Create the development environment with uv."""
    ctx.run("uv sync --all-extras")


@task
def lint(ctx):
    """Run ruff and mypy over the package."""
    ctx.run("ruff check src tests", pty=True)
    ctx.run("ruff format --check src tests", pty=True)
    ctx.run("mypy src", pty=True)


@task
def test(ctx):
    """Run the test suite with coverage."""
    ctx.run("pytest --cov=homehub --cov-report=term-missing", pty=True)


@task
def demo(ctx):
    """Show the sample home and run a quick device scan against it."""
    env = {"LOGLEVEL": "DEBUG"}
    ctx.run("homehub devices", env=env, pty=True)
    ctx.run("homehub scan devices --merge", env=env, pty=True)


@task
def build_package(ctx):
    """Build sdist and wheel into dist/."""
    ctx.run("rm -rf dist")
    ctx.run("uv build")


@task
def release(ctx):
    """Build and publish to PyPI."""
    token = os.getenv("PYPI_TOKEN")
    if not token:
        raise ValueError("PYPI_TOKEN environment variable is not set")

    build_package(ctx)
    ctx.run(f"uv publish --token {token}")
