"""Walks through every prompt: `python -m termprompt`."""

import sys
import time

import termprompt as tp
from termprompt import log


def _min_len(text):
    if len(text) < 6:
        return "Use at least 6 characters"


def main() -> int:
    tp.configure_logging()
    tp.intro("create-app")

    name = tp.Input("Project name").placeholder("my-app").interact()
    if tp.is_cancelled(name):
        tp.outro_cancel("Operation cancelled.")
        return 1

    kind = (tp.Select("Project type")
            .item("py", "Python", "recommended")
            .item("ts", "TypeScript")
            .item("rs", "Rust")
            .interact())
    if tp.is_cancelled(kind):
        tp.outro_cancel("Operation cancelled.")
        return 1

    tools = (tp.MultiSelect("Extra tools")
             .items([("lint", "Linter"), ("fmt", "Formatter"), ("ci", "CI pipeline", "GitHub Actions")])
             .initial_values(["lint"])
             .required(False)
             .interact())
    if tp.is_cancelled(tools):
        tp.outro_cancel("Operation cancelled.")
        return 1

    secret = tp.Password("Deploy token").mask("*").validate(_min_len).interact()
    if tp.is_cancelled(secret):
        tp.outro_cancel("Operation cancelled.")
        return 1

    install = tp.Confirm("Install dependencies?").initial_value(True).interact()
    if tp.is_cancelled(install):
        tp.outro_cancel("Operation cancelled.")
        return 1
    if not install:
        log.warning("Skipping install")
    else:
        spinner = tp.Spinner()
        spinner.start("Installing")
        time.sleep(2)
        spinner.stop("Installed")

    tp.note("Next steps", f"cd {name}\nmake {kind}")
    log.info(f"Tools: {', '.join(tools) or 'none'}")
    tp.outro("You're all set!")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except tp.TerminalError as e:
        print(f"termprompt: {e}", file=sys.stderr)
        sys.exit(2)
