"""Terminal front end for the quiz client.

Usage:
    assessment-quiz --base-url http://localhost:5000
"""

import argparse
import sys

from assessment_app.core.logging_config import setup_logging
from .controller import QuizController, QuizPhase
from .errors import LoadError, SubmissionError
from .view import QuestionView, ResultsView

QUIZ_HELP = "Options: number(s) to toggle, [n]ext, [p]revious, [s]ubmit, [q]uit"


class ConsoleQuiz:
    """Binds keyboard commands to ``QuizController`` transitions."""

    def __init__(self, controller: QuizController, input_func=input, output=print):
        self.controller = controller
        self.input = input_func
        self.output = output

    def draw_question(self, view: QuestionView) -> None:
        self.output('')
        self.output(view.progress)
        if view.topic:
            self.output(view.topic)
        self.output(view.text)
        if view.code:
            self.output('')
            for line in view.code.splitlines():
                self.output(f"    {line}")
            self.output('')
        marks = ('[x]', '[ ]') if view.input_type == 'checkbox' else ('(*)', '( )')
        for option in view.options:
            mark = marks[0] if option.checked else marks[1]
            self.output(f"  {option.index + 1}. {mark} {option.label}")
        if view.input_type == 'checkbox':
            self.output("(select all that apply)")
        self.output(QUIZ_HELP)

    def draw_results(self, view: ResultsView) -> None:
        self.output('')
        self.output(view.scoreline)
        for item in view.items:
            self.output('')
            self.output(f"{item.heading} [{item.badge}]")
            if item.code:
                for line in item.code.splitlines():
                    self.output(f"    {line}")
            self.output(f"  Your answer: {item.user_answer}")
            self.output(f"  Correct answer: {item.correct_answer}")
            if item.explanation:
                self.output(f"  {item.explanation}")

    def welcome(self) -> bool:
        command = self.input("Press Enter to start the assessment (q to quit): ").strip().lower()
        if command == 'q':
            return False
        try:
            self.controller.start()
        except LoadError as e:
            self.output(f"Could not load questions. Please try again later. ({e})")
        return True

    def quiz_step(self) -> bool:
        self.draw_question(self.controller.render_current())
        command = self.input("> ").strip().lower()
        if command == 'q':
            return False
        if command == 'n':
            self.controller.go_next()
        elif command == 'p':
            self.controller.go_previous()
        elif command == 's':
            try:
                self.controller.submit()
            except SubmissionError as e:
                self.output(f"Submission failed. Please try again. ({e})")
        else:
            self.toggle_options(command)
        return True

    def toggle_options(self, command: str) -> None:
        question = self.controller.state.current_question
        for token in command.replace(',', ' ').split():
            if not token.isdecimal() or not 1 <= int(token) <= len(question.options):
                self.output(f"Unknown command '{token}'. {QUIZ_HELP}")
                continue
            self.controller.toggle_option(int(token) - 1)

    def results_step(self) -> bool:
        self.draw_results(self.controller.render_results())
        command = self.input("Press Enter to go back to the start (q to quit): ").strip().lower()
        if command == 'q':
            return False
        self.controller.retry()
        return True

    def run(self) -> None:
        steps = {
            QuizPhase.WELCOME: self.welcome,
            QuizPhase.QUIZ: self.quiz_step,
            QuizPhase.RESULTS: self.results_step,
        }
        try:
            while steps[self.controller.state.phase]():
                pass
        except (EOFError, KeyboardInterrupt):
            self.output('')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Take the assessment in the terminal.")
    parser.add_argument('--base-url', default='http://localhost:5000',
                        help="Assessment server URL (default: %(default)s)")
    parser.add_argument('--timeout', type=float, default=10,
                        help="HTTP timeout in seconds (default: %(default)s)")
    parser.add_argument('--log-level', default='WARNING',
                        help="Logging level (default: %(default)s)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_level=args.log_level)
    controller = QuizController(base_url=args.base_url, timeout=args.timeout)
    ConsoleQuiz(controller).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
