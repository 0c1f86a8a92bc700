import io

import pytest

from dynamodb_migrator.prompt import AlwaysConfirm, TerminalConfirmer


def answering(answer):
    def _input():
        return answer
    return _input


def raising(error):
    def _input():
        raise error
    return _input


class TestTerminalConfirmer:

    @pytest.mark.parametrize("answer", ["y", "yes", "YES", " Yes \n"])
    def test_affirmative_answers(self, answer):
        confirmer = TerminalConfirmer(answering(answer), output=io.StringIO())

        assert confirmer.confirm("Continue?") is True

    @pytest.mark.parametrize("answer", ["", "n", "no", "nope", "yess"])
    def test_everything_else_declines(self, answer):
        confirmer = TerminalConfirmer(answering(answer), output=io.StringIO())

        assert confirmer.confirm("Continue?") is False

    @pytest.mark.parametrize("error", [EOFError(), KeyboardInterrupt()])
    def test_prompt_failure_declines(self, error):
        confirmer = TerminalConfirmer(raising(error), output=io.StringIO())

        assert confirmer.confirm("Continue?") is False

    def test_prompt_is_written(self):
        output = io.StringIO()
        confirmer = TerminalConfirmer(answering("no"), output=output)

        confirmer.confirm("This will import data into foo! Do you want to continue?")

        assert output.getvalue() == "This will import data into foo! Do you want to continue? [yes/no]: "


class TestAlwaysConfirm:

    def test_always_yes(self):
        assert AlwaysConfirm().confirm("Continue?") is True
