from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

import os
import sys

from cyberlearn_app.core.logging_config import setup_logging
from cyberlearn_app.modules.learner import ContentUnavailableError, create_learner

HELP = (
    "Keys: ArrowRight/n, ArrowLeft/p, Home, End | "
    "a-d select, s submit, q next question, r retake, c continue, restart, exit"
)

KEY_ALIASES = {'n': 'ArrowRight', 'p': 'ArrowLeft'}
OPTION_KEYS = 'abcd'


def run_commands(learner, lines, out=None):
    """Drive a loaded learner from text commands; stops at ``exit``."""
    out = out or sys.stdout
    for line in lines:
        command = line.strip()
        if not command:
            continue
        if command == 'exit':
            break
        try:
            if learner.handle_key(KEY_ALIASES.get(command, command)):
                continue
            if len(command) == 1 and command in OPTION_KEYS:
                learner.select_option(OPTION_KEYS.index(command))
            elif command == 's':
                learner.submit_answer()
            elif command == 'q':
                learner.next_question()
            elif command == 'r':
                learner.retake_quiz()
            elif command == 'c':
                learner.continue_learning()
            elif command == 'restart':
                learner.restart()
            else:
                print(HELP, file=out)
        except RuntimeError as exc:
            # Quiz commands outside a quiz step
            print(exc, file=out)


def main():
    setup_logging(log_level=os.environ.get('LOG_LEVEL', 'INFO'))
    learner = create_learner(storage={})
    try:
        learner.load()
    except ContentUnavailableError:
        return 1
    print(HELP)
    try:
        run_commands(learner, sys.stdin)
    finally:
        learner.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
