"""Command line entry point for preparing and running Joomla browser tests.

Run it from the root of a Joomla checkout (or point ``--root`` at one)::

    jrobo create-testing-site --use-htaccess
    jrobo run-selenium
    jrobo screenshots --env desktop
"""

import functools
import os
import sys

import click
from munch import Munch

from jrobo import external
from jrobo.browser.selenium_server import run_selenium
from jrobo.browser.webdriver import resolve_suite_driver
from jrobo.config import TESTS_PATH, load_codeception_config, load_settings, load_suite_config
from jrobo.errors import RoboError
from jrobo.site.paths import resolve_testing_path
from jrobo.site.snapshot import materialize_snapshot
from jrobo.site.testing_site import create_testing_site
from jrobo.utils.say_utils import say, yell

SCREENSHOTS_PATH = f"{TESTS_PATH}/screenshots/"
DEFAULT_ENV = "desktop"


def fatal_errors(func):
    """Turn a RoboError raised by a command into a loud message and exit status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except RoboError as e:
            yell(str(e))
            sys.exit(1)

    return wrapper


def webdriver_flag() -> str:
    """The ``-D<driver type>=<path>`` flag for the configured browser."""
    return resolve_suite_driver(load_suite_config(), load_codeception_config()).as_flag()


def run_screenshot_tests(env: str) -> None:
    # generates AcceptanceTester
    external.codecept_build()
    external.codecept_run(SCREENSHOTS_PATH, env)


@click.group()
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    show_default=True,
    help="Joomla checkout to work in; all relative paths are resolved from here",
)
@click.pass_context
def cli(ctx, root):
    """Prepare disposable Joomla sites and run browser tests against them."""
    os.chdir(root)
    settings = load_settings()
    ctx.obj = Munch(settings=settings, testing_path=resolve_testing_path(settings))


@cli.command(name="create-testing-site")
@click.option("--use-htaccess", is_flag=True, help="Rename and enable the embedded Joomla htaccess.txt")
@click.pass_obj
@fatal_errors
def cli_command_create_testing_site(obj, use_htaccess):
    """Create a testing Joomla site for running the tests (use it before running tests)."""
    create_testing_site(obj.settings, obj.testing_path, use_htaccess)


@cli.command(name="run-selenium")
@fatal_errors
def cli_command_run_selenium():
    """Start the standalone Selenium server with the driver for the configured browser."""
    run_selenium(webdriver_flag())


@cli.command(name="get-webdriver")
@fatal_errors
def cli_command_get_webdriver():
    """Print the webdriver flag for the configured browser and this OS."""
    click.echo(webdriver_flag())


@cli.command(name="screenshots")
@click.option("--use-htaccess", is_flag=True, help="Accepted for symmetry with create-testing-site; unused")
@click.option("--env", default=DEFAULT_ENV, show_default=True, help="Codeception environment")
@click.pass_obj
@fatal_errors
def cli_command_screenshots(obj, use_htaccess, env):  # pylint: disable=unused-argument
    """Build a fresh snapshot site, start Selenium and take screenshots."""
    say("Creating Screenshots")
    materialize_snapshot(obj.settings.branch if obj.settings else None)
    run_selenium(webdriver_flag())
    run_screenshot_tests(env)


@cli.command(name="screenshots-noinstall")
@click.option("--env", default=DEFAULT_ENV, show_default=True, help="Codeception environment")
@fatal_errors
def cli_command_screenshots_noinstall(env):
    """Take screenshots against an already installed site."""
    run_screenshot_tests(env)


def main():
    """Console script entry point."""
    cli()  # pylint: disable=no-value-for-parameter


# entry point `jrobo` is defined in pyproject.toml
if __name__ == "__main__":
    main()
