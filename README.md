# cedis

cedis is a small server in the style of Redis. It listens on a TCP port and
waits for one client. When that client connects, cedis sends a greeting,
reads one command, writes back a reply, and then exits.

## Installing

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install .[test]
pytest
```

## Running the server

```
cedis [--ip IP] [--port PORT]
```

- `--port` sets the port to listen on. The default is `6969`. The server
  listens on all IPv4 interfaces.
- `--ip` sets only the address that appears in log messages. The default is
  `127.0.0.1`.

A session runs in this order:

1. The server prints `Hello, server!` and waits for a client.
2. When a client connects, the server sends it `Hello\n`.
3. The server reads up to 1024 bytes at a time until the buffered input ends
   with `\r\n`. A read whose data starts with `X` is thrown away.
4. The server parses the input, dispatches it, and sends the reply.
5. The server sends `DISCONNECT`, closes the client socket, stops listening,
   and exits.

The exit status is `0` if a client was accepted and `1` if not.

## Using it as a library

```python
from cedis.commands import CommandHandler, Echo, Ping
from cedis.parser import Parser

parser = Parser()
parser.feed(b"*1\r\n$4\r\nPING\r\n")
parser.is_command_valid()              # True: the buffer ends with CRLF
parser.parse()                         # []

handler = CommandHandler()
handler.execute(["ping"])              # '+PONG\r\n'
handler.execute([])                    # 'Command is empty\r\n'
handler.execute(["GET", "k"])          # 'Command not found\r\n'

custom = CommandHandler({"ping": Ping(), "echo": Echo()})
custom.execute(["ECHO", "hi"])         # 'hi'
```

The modules are:

- `cedis.parser`: `Parser` collects bytes with `feed()`.
  `is_command_valid()` returns True once the buffer ends with `\r\n`.
  `parse()` returns `["Prefix Error"]` when the buffer does not start with one
  of the RESP type prefixes `+ - : * $`, and returns an empty list when it
  does. It raises `ValueError` when the buffer is empty.
- `cedis.commands`: `Command` is the abstract base class. `Ping` replies
  `+PONG\r\n`, and `Echo` replies with its first argument. `CommandHandler`
  looks up a command by its first element, with any letter case. By default it
  knows only `PING`. You can also give it your own mapping of names to
  commands.
- `cedis.connection`: `Connection(server_ip, server_port)` binds a listening
  socket. Pass port `0` to get a free port, which you can then read from the
  `port` property. The class provides `start()`, `read()`,
  `send_response()`, `handle_client()`, `is_connected()`, `disconnect()` and
  `close()`. You can use it as a context manager, which calls `close()` on
  exit.
- `cedis.server`: `main(argv=None)`, the `cedis` command.

## What it does not do

- The parser does not yet decode RESP frames into arguments. A well-formed
  RESP command therefore reaches the dispatcher as an empty list, and the
  reply is `Command is empty\r\n`. Input without a RESP prefix becomes
  `["Prefix Error"]`, and the reply is `Command not found\r\n`. The server
  never produces `+PONG` or any other command reply, even though
  `CommandHandler` can produce it when called directly.
- The server has no data storage and no key-value commands.
- The server serves exactly one client and one command, and then exits. It
  does not handle several clients, several commands on one connection, or
  asynchronous I/O.