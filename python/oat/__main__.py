"""
CLI interface for oat.
"""

import sys
import logging
import threading
import time
import click
from typing import Optional

from . import __version__
from .exceptions import ValidationError
from .utils.password_generator import (
    DEFAULT_COUNT,
    DEFAULT_LENGTH,
    ConstraintSpec,
    PasswordGenerator,
)
from .utils.validation import get_validation_error_message


logger = logging.getLogger(__name__)

CLIPBOARD_CLEAR_SECONDS = 60


def copy_to_clipboard(value: str) -> bool:
    """Copy a value to the clipboard and schedule clearing it."""
    try:
        import pyperclip
        pyperclip.copy(value)
    except ImportError:
        click.echo("pyperclip not installed. Install with: pip install pyperclip", err=True)
        return False
    except Exception as e:
        click.echo(f"Could not copy to clipboard: {e}", err=True)
        return False

    # Auto-clear clipboard after 60 seconds
    def clear_clipboard() -> None:
        time.sleep(CLIPBOARD_CLEAR_SECONDS)
        try:
            pyperclip.copy("")
        except Exception as e:
            logger.debug("Failed to clear clipboard: %s", e)

    clear_thread = threading.Thread(target=clear_clipboard, daemon=True)
    clear_thread.start()
    return True


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="oat")
def cli(verbose: bool) -> None:
    """oat - generate secure passwords from the command line."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@cli.command()
@click.option("--length", "-l", default=DEFAULT_LENGTH, type=int,
              help=f"Password length (default: {DEFAULT_LENGTH})")
@click.option("--count", "-c", default=DEFAULT_COUNT, type=int,
              help=f"Number of passwords to generate (default: {DEFAULT_COUNT})")
@click.option("--no-uppercase", "-nu", is_flag=True, help="Exclude uppercase letters")
@click.option("--no-lowercase", "-nl", is_flag=True, help="Exclude lowercase letters")
@click.option("--no-numbers", "-nn", is_flag=True, help="Exclude numbers")
@click.option("--no-symbols", "-ns", is_flag=True, help="Exclude symbols")
@click.option("--symbols", "-s", default=None, help="Custom symbol set (overrides default symbols)")
@click.option("--exclude", "-e", default=None, help="Characters to exclude from password")
@click.option("--include", "-i", default=None, help="Additional characters to include")
@click.option("--no-ambiguous", "-na", is_flag=True, help="Exclude ambiguous characters (0, O, l, 1, I)")
@click.option("--copy", is_flag=True, help="Copy the generated password to the clipboard")
def password(length: int, count: int, no_uppercase: bool, no_lowercase: bool,
             no_numbers: bool, no_symbols: bool, symbols: Optional[str],
             exclude: Optional[str], include: Optional[str], no_ambiguous: bool,
             copy: bool) -> None:
    """Generate secure passwords with customizable rules."""
    error_msg = get_validation_error_message(length, count)
    if error_msg:
        click.echo(f"Error: {error_msg}", err=True)
        sys.exit(1)

    if copy and count > 1:
        click.echo("Error: Cannot use --copy with more than one password", err=True)
        sys.exit(1)

    try:
        spec = ConstraintSpec.from_options(
            length=length,
            count=count,
            no_uppercase=no_uppercase,
            no_lowercase=no_lowercase,
            no_numbers=no_numbers,
            no_symbols=no_symbols,
            symbols=symbols,
            exclude=exclude,
            include=include,
            no_ambiguous=no_ambiguous,
        )
        generator = PasswordGenerator(spec)
    except ValidationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.info("Generating from %s", generator.get_charset_info())
    passwords = generator.generate()

    if count == 1:
        click.echo(passwords[0])
    else:
        for i, value in enumerate(passwords, start=1):
            click.echo(f"Password {i}: {value}")

    if copy and copy_to_clipboard(passwords[0]):
        click.echo("🔐 Generated password copied to clipboard.", err=True)


def main() -> None:
    """Main entry point for the CLI application."""
    cli(auto_envvar_prefix="OAT")


if __name__ == "__main__":
    main()
