# aorta

The parts of a small command shell, as a Python library: built-in commands
(`cd`, `export`, `alias`, `source`, `history`, `exit`), a dispatcher that runs
built-ins or starts external programs, a timestamped command history kept in a
file, aliases, tab completion of command names and paths, option parsing and
ANSI colouring of command lines.

## What it does not do

The package has no interactive prompt and installs no command to run. It does
not read `~/.profile` or `~/.aortarc`, does not expand `$NAME` variables in a
command line, and does not parse or run pipelines (`|`, `&&`, `||`, `;`, `>`).
A program that wants those must build them on top of the pieces below.

## Modules

- `aorta.commands` — `CommandExecutor(flags=None, history_file=None)`.
  `execute(command, args)` runs a registered built-in, or else starts the
  program and waits for it, returning its exit code (`None` for built-ins and
  for programs that do not exist). `is_builtin(name)` and the `builtins`
  property list what is registered. The history file defaults to
  `~/.aorta_history`.
- `aorta.builtins` — the built-in commands, each with `execute(args)`:
  - `CdCommand` — change directory; `~` and `~/...` are expanded, no argument goes home
  - `ExportCommand` — `NAME=VALUE`, with surrounding quotes removed; `PATH`
    is cleaned of quotes, empty parts and duplicate entries
  - `AliasCommand` — `name='command'` defines an alias, no argument lists them
  - `SourceCommand` — runs each non-empty, non-`#` line of a file through an executor
  - `HistoryCommand` — with no argument prints the last ten entries; also
    `search [--prefix|--contains|--last N] QUERY`, `stats`, `clear`
    (forgets the entries held in memory) and `delete INDEX`
  - `ExitCommand` — raises `SystemExit(0)`
  - `format_timestamp(seconds)` — the UTC time of day as `HH:MM:SS`
- `aorta.process` — `ProcessExecutor.spawn_process(args)` starts a program with
  the terminal and current environment, expanding `~` in arguments;
  `setup_signal_handlers()` makes SIGINT leave the caller running.
- `aorta.history` — `History(path, max_entries=1000)` with `add`,
  `add_with_details`, `get_recent`, `search`, `delete_at`, `clear` and
  `calculate_stats`; search modes `SearchPrefix`, `SearchContains`,
  `SearchTimeRange(start, end)` and `SearchLastN(n)`. Each line of the file
  holds command, timestamp, exit code and duration separated by `\x1f`; lines
  without those four fields are read as plain commands.
- `aorta.aliases` — `AliasManager` with `add`, `get`, `expand_command` and `get_all`.
- `aorta.envvars` — `EnvVarManager` (`set`, `get`, `sanitize_path`,
  `expand_value` for `$HOME` and `$PATH`) and `EnvPaths` for `~/.config` and `~/.cache`.
- `aorta.completion` — `ShellCompleter.complete(line, pos)` returns where the
  word at the cursor starts and a list of `Completion(display, replacement)`:
  command names, programs on `PATH` and aliases for the first word, files and
  directories for later ones.
- `aorta.highlight` — `SyntaxHighlighter` colours command names, options,
  errors, success messages and hints; `detect_color_support()` reads
  `NO_COLOR`, `COLORTERM` and `TERM`.
- `aorta.flags` — `Flags` parses `-h/--help`, `-v/--version`, `-q/--quiet`,
  `-d/--debug` and `-c/--config PATH`; the config path is only recorded.
- `aorta.pathexpand` — `PathExpander.expand(path)` for `~` and `~/...`.
- `aorta.errors` — every error derives from `ShellError`.

## Example

```python
from aorta.commands import CommandExecutor
from aorta.completion import ShellCompleter
from aorta.history import History, SearchPrefix

executor = CommandExecutor(history_file="/tmp/aorta_history")
executor.execute("export", ["GREETING=hello"])
executor.execute("cd", ["~"])
code = executor.execute("ls", ["-l"])

history = History("/tmp/aorta_history", 1000)
history.add_with_details("ls -la", 0, 12)
print([entry.command for entry in history.search(SearchPrefix(), "ls")])
print(history.calculate_stats().total_commands)

start, candidates = ShellCompleter().complete("ls ~/Doc", 8)
print(start, [c.replacement for c in candidates])
```