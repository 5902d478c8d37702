"""Natural Language Shell

An interactive loop that reads plain English requests and runs them as
Windows shell commands:
- requests are simplified and translated by the command agent
- "quit" (or "bye", "exit") leaves the shell
- "cd X" changes the working directory of this process
- everything else runs as `<shell> /c <command>`
- input history is kept between sessions when readline is available"""

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Optional

from .command_agent import CommandAgent, Interpretation


try:
    import readline
except ImportError:
    readline = None


logger = logging.getLogger(__name__)

PROMPT = "Command -> "
DEFAULT_SHELL = "cmd.exe"


class Colors:
    RESET = "\033[0m"
    DIM = "\033[2m"

    FG_RED = "\033[31m"
    FG_YELLOW = "\033[33m"
    FG_CYAN = "\033[36m"


class NLShell:
    def __init__(
        self,
        agent: Optional[CommandAgent] = None,
        shell_path: Optional[str] = None,
        history_path: Optional[str] = None,
    ) -> None:
        self.env = os.environ.copy()
        self.agent = agent if agent is not None else CommandAgent()
        self.shell_path = shell_path or self.env.get("COMSPEC") or DEFAULT_SHELL
        self.running = True
        self.last_exit_code = 0

        history = history_path or self.env.get("SHELL_NLP_HISTORY")
        self.history_path = Path(history) if history else Path.home() / ".shell_nlp_history"

        self._init_readline()

    def _init_readline(self) -> None:
        if readline is None:
            return

        try:
            readline.read_history_file(str(self.history_path))
        except OSError:
            pass

        readline.set_history_length(1000)

    def _save_history(self) -> None:
        if readline is None:
            return
        try:
            readline.write_history_file(str(self.history_path))
        except OSError:
            pass

    def run(self) -> None:
        print(f"{Colors.FG_CYAN}Natural language shell ready. Say 'quit' to leave.{Colors.RESET}")
        print()

        while self.running:
            try:
                line = input(PROMPT)
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue

            self.handle_line(line)

        self._save_history()

    def handle_line(self, line: str) -> bool:
        """Interpret and dispatch one line of input.
        Takes in:
        line: raw text typed at the prompt
        Gives back:
        false once the shell should stop"""
        interpretation = self.agent.interpret(line)
        self.dispatch(interpretation)
        return self.running

    def dispatch(self, interpretation: Interpretation) -> None:
        if not interpretation.understood:
            self._report_not_understood(interpretation)
            return

        if interpretation.is_quit:
            self.running = False
            return

        command = interpretation.command
        try:
            if command.lower().startswith("cd "):
                self._change_directory(command[3:])
            else:
                self._run_external(command)
        except Exception as exc:
            logger.warning("command %r failed: %s", command, exc)
            print(f"{Colors.FG_RED}Execution error: {exc}{Colors.RESET}")
            self.last_exit_code = 1

    def _report_not_understood(self, interpretation: Interpretation) -> None:
        print(f"I do not understand: {interpretation.canonical}")
        if interpretation.suggestion:
            print(f"{Colors.DIM}Did you mean: \"{interpretation.suggestion}\"?{Colors.RESET}")

    def _change_directory(self, target: str) -> None:
        """Change directory in this process; a child shell would lose the change on exit."""
        try:
            os.chdir(target)
            self.last_exit_code = 0
        except FileNotFoundError:
            print(f"{Colors.FG_RED}No such directory: {target}{Colors.RESET}")
            self.last_exit_code = 1
        except NotADirectoryError:
            print(f"{Colors.FG_RED}Not a directory: {target}{Colors.RESET}")
            self.last_exit_code = 1
        except PermissionError:
            print(f"{Colors.FG_RED}Permission denied: {target}{Colors.RESET}")
            self.last_exit_code = 1

    def _run_external(self, command: str) -> None:
        print(f"{Colors.DIM}→ {command}{Colors.RESET}")

        try:
            proc = subprocess.Popen(
                [self.shell_path, "/c", command],
                text=True,
                errors="replace",
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                env=self.env,
                cwd=os.getcwd(),
            )
        except FileNotFoundError:
            logger.warning("command interpreter %r not found", self.shell_path)
            print(f"{Colors.FG_RED}Command not found: {self.shell_path}{Colors.RESET}")
            self.last_exit_code = 127
            return

        assert proc.stdout is not None
        try:
            for out_line in proc.stdout:
                print(out_line, end="")
        except BaseException:
            proc.kill()
            proc.wait()
            raise

        exit_code = proc.wait()
        self.last_exit_code = exit_code
        if exit_code != 0:
            logger.warning("%r exited with code %d", command, exit_code)
            print(f"{Colors.FG_YELLOW}Command exited with code {exit_code}{Colors.RESET}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shell-nlp",
        description="Run Windows shell commands by asking for them in plain English.",
    )
    parser.add_argument("--shell", help="command interpreter to run commands with (default: %%COMSPEC%%)")
    parser.add_argument("--whole-words", action="store_true",
                        help="only match simplification phrases against whole words")
    parser.add_argument("--no-suggest", action="store_true",
                        help="do not suggest phrasings for requests that are not understood")
    parser.add_argument("--verbose", "-v", action="store_true", help="log every rewrite step")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    agent = CommandAgent(whole_words=args.whole_words, suggest=not args.no_suggest)
    shell = NLShell(agent=agent, shell_path=args.shell)
    shell.run()


if __name__ == "__main__":
    main()
