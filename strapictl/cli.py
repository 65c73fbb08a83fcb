import typer
import logging
import sys
from strapictl.commands import install
from strapictl.config import Config
from strapictl.logging import setup_logger

app = typer.Typer()

# Global debug flag
debug_mode = False

# Configure logging
def setup_logging(debug: bool = False):
    """Configure logging based on debug mode."""
    level = logging.DEBUG if debug else logging.getLevelName(Config.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO
    setup_logger("strapictl", level)

app.command("install")(install.install_plugin)

# Global options callback
@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """strapictl - Strapi project CLI."""
    global debug_mode
    debug_mode = debug
    setup_logging(debug)
    if debug:
        logging.getLogger("strapictl").debug("Debug mode enabled")

if __name__ == "__main__":
    try:
        app()
    except Exception as e:
        if debug_mode:
            import traceback
            logging.getLogger("strapictl").error(f"Unhandled exception: {e}\n{traceback.format_exc()}")
        else:
            logging.getLogger("strapictl").error(f"Error: {e}")
        sys.exit(1)
