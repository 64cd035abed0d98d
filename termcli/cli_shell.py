import argparse
import logging
import os
import sys
from typing import Callable

from termcli.adapters.output.console_sink import ConsoleSink
from termcli.container import container
from termcli.entities.session import Session
from termcli.ports.output.output_sink_port import OutputSinkPort
from termcli.use_cases.interpreter.run_line import RunLineUseCase

EXIT_COMMAND = "exit"


def prompt_for(user_name: str, session: Session) -> str:
    return f"{user_name}@CLI:{session.current_directory}$ "


def run_session(
    run_line: RunLineUseCase,
    session: Session,
    sink: OutputSinkPort,
    user_name: str,
    read_line: Callable[[str], str] = input,
) -> int:
    """Read, interpret and print until 'exit' (any case) or end of input. Returns the exit status."""
    closing = f"CLI session closed by user ({user_name})"
    while session.active:
        try:
            line = read_line(prompt_for(user_name, session)).strip()
        except (EOFError, KeyboardInterrupt):
            sink.write_line()
            sink.write_line(closing)
            return 0

        if line.lower() == EXIT_COMMAND:
            sink.write_line(closing)
            return 0

        run_line.execute(line, session, sink)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="termcli",
        description="Interactive shell with pwd, cd, ls, mkdir, rmdir, touch, rm, cp, "
        "cat, wc, echo, zip and unzip, plus '>' and '>>' redirection.",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Starting directory (default: TERMCLI_START_DIR or the working directory)",
    )
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=None,
        help="Run this line instead of prompting (repeatable, runs in order)",
    )
    args = parser.parse_args(argv)

    settings = container.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    start = settings.start_directory
    if args.cwd:
        start = os.path.realpath(os.path.expanduser(args.cwd))
        if not os.path.isdir(start):
            print(f"termcli: not a directory: {args.cwd}", file=sys.stderr)
            return 2

    session = container.new_session(start)
    sink = ConsoleSink()
    run_line = container.get_run_line_use_case()
    logger.info(f"Session started in {session.current_directory}")

    if args.command:
        for line in args.command:
            if not run_line.execute(line, session, sink):
                break
        return 0

    return run_session(run_line, session, sink, settings.user_name)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
