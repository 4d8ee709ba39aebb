import pytest

from cedis.commands import Command, CommandHandler, Echo, Ping


def test_ping_replies_pong():
    assert Ping().execute(["PING"]) == "+PONG\r\n"


def test_ping_ignores_extra_arguments():
    assert Ping().execute(["PING", "hello"]) == "+PONG\r\n"


def test_echo_returns_first_argument():
    assert Echo().execute(["ECHO", "hello"]) == "hello"


def test_echo_without_argument_raises():
    with pytest.raises(IndexError):
        Echo().execute(["ECHO"])


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_handler_runs_ping():
    assert CommandHandler().execute(["PING"]) == "+PONG\r\n"


@pytest.mark.parametrize("name", ["ping", "Ping", "pInG"])
def test_handler_is_case_insensitive(name):
    assert CommandHandler().execute([name]) == "+PONG\r\n"


def test_handler_empty_input():
    assert CommandHandler().execute([]) == "Command is empty\r\n"


def test_handler_unknown_command():
    assert CommandHandler().execute(["FLUSHALL"]) == "Command not found\r\n"


def test_handler_does_not_register_echo_by_default():
    assert CommandHandler().execute(["ECHO", "hi"]) == "Command not found\r\n"


def test_handler_with_custom_commands():
    handler = CommandHandler({"echo": Echo()})
    assert handler.execute(["ECHO", "value"]) == "value"
    assert handler.execute(["PING"]) == "Command not found\r\n"