import sys

from syntaxfix.cli.app import app
from syntaxfix.config.settings import Settings
from syntaxfix.context import build_context
from syntaxfix.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> snapshot launch args -> build dependencies -> run CLI."""
    settings = Settings()
    Log.configure(settings.log_level)
    launch_args = tuple(sys.argv[1:])
    context = build_context(settings, launch_args)
    app(args=list(launch_args), obj=context)


if __name__ == "__main__":
    main()
