# tinkerbox

A collection of small, self-contained pieces of Python: worked exercises on
values, sequences, mappings, records and errors; two console games; and a
minimal line-based TCP chat client and server. It has no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `tinkerbox-intro` | Prints the welcome banner followed by a short walk through the warm-up exercises in `tinkerbox.basics`. |
| `tinkerbox-guess` | Guess a secret number between 1 and 100. Each guess is answered with `Less!`, `Greater!` or `Correct!`; lines that are not integers are ignored. Exits 0 when the number is found, 1 if input ends first. |
| `tinkerbox-hangman` | Hangman with a fixed secret word and at most 7 wrong guesses. Each guess must be a single character. Exits 1 if input ends before the game does. |
| `tinkerbox-tcp` | Line-based TCP chat, as a server or a client. |

### TCP chat

Start a server listening on an address and port:

```
tinkerbox-tcp server 127.0.0.1 7878
```

In another terminal, connect a client to it:

```
tinkerbox-tcp client 127.0.0.1 7878
```

Each line typed in the client is sent to the server. The server prints the
message, shows a `>>> ` prompt and sends the next line typed on its own
standard input back to the client, which prints it as
`[address:port]: reply`. Each client is served in its own thread. Any other
arguments print a usage message and exit with status 1; a failure to connect
or to bind is reported on standard error with status 1.

## Library use

The exercise modules are ordinary importable functions and classes:

```python
from tinkerbox.basics import bigger, calculate_price_of_apples
from tinkerbox.sequences import Command, transformer
from tinkerbox.mappings import build_scores_table, maybe_icecream
from tinkerbox.errors import total_cost, PositiveNonzeroInteger

bigger(32, 42)                      # 42
calculate_price_of_apples(41)       # 41
maybe_icecream(22)                  # 0
maybe_icecream(24)                  # None
total_cost("34")                    # 171

transformer([("hello", Command.uppercase()), ("foo", Command.append(1))])
# ['HELLO', 'foobar']

scores = build_scores_table("England,France,4,2\nGermany,England,2,1")
scores["England"].goals_scored      # 5
```

Invalid input raises an exception rather than returning a status:

- `total_cost("beep boop")` raises `ValueError`.
- `PositiveNonzeroInteger.parse("-555")` raises `ParsePosNonzeroError`,
  whose `creation` attribute holds the `CreationError`.
- `parse_positive_nonzero("-555")` raises `CreationError` directly, and
  `ValueError` for text that is not an integer.
- `Package(...)` with a weight below 10 grams raises `ValueError`.

Other modules: `tinkerbox.records` holds dataclasses such as `Order`,
`Package`, `Wrapper` and a message-driven `State` whose `process` method
accepts `Resize`, `Move`, `Echo`, `ChangeColor` and `Quit` messages.

The games can also be driven programmatically, which is how they are tested:
`tinkerbox.hangman.Hangman` keeps the game state and exposes `guess` and
`render`, and `tinkerbox.guessing.play` takes an iterable of input lines, the
secret number and a function to write output with. The chat pieces are
`tinkerbox.tcp_client.run_client` and `tinkerbox.tcp_server.handle_client` /
`run_server`.

## Limits

The TCP chat is plain, unencrypted text with no authentication. The server
answers every message with exactly one line from its standard input, and all
connected clients share that one input. The hangman secret word is fixed and
cannot be changed from the command line.