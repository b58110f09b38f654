# shellguard

shellguard decides whether a shell command may run. It checks a command name,
its arguments and its working directory against a JSON policy, and raises
`CommandBlocked` when the policy forbids them.

- **Allow and deny lists.** A command is accepted only if it is on the allow
  list. A command on the deny list is rejected with its own message, or with
  the policy's default message.
- **Subcommand rules.** For tools such as `git` or `npm`, an allow rule can
  list the subcommands that are allowed and those that are denied. The first
  argument is the subcommand.
- **Path confinement.** Every argument that looks like a path and does not
  start with `-` must resolve inside one of the allowed directories.
- **Nested commands.** For `xargs`, the command it would run is validated too.
  For `find`, each command named after `-exec` or `-execdir` must be allowed.
- **Output limits.** `OutputLimiter` wraps a binary stream and stops passing
  bytes through after a limit. When it cuts the output off, it writes a note
  saying how many bytes were dropped.
- **Logging.** `Logger` writes timestamped lines for command attempts, errors
  and information. If the policy sets `blockLogPath`, every blocked command is
  also appended to that file.

## Installation

```
pip install .
```

The package has no third-party dependencies and runs on Python 3.10 and newer.

## Configuration

The policy is a JSON object. Entries in `allowCommands` and `denyCommands` can
be plain strings or objects. Both keys must be present, even if they are empty
lists:

```json
{
  "allowedDirectories": ["/home", "/tmp"],
  "allowCommands": [
    "ls",
    "cat",
    {"command": "git", "subCommands": ["status", "log", "diff"], "denySubCommands": ["push"]}
  ],
  "denyCommands": [
    "rm",
    {"command": "sudo", "message": "Elevated privileges not allowed"}
  ],
  "defaultErrorMessage": "Command not allowed by security policy",
  "blockLogPath": "/tmp/blocked.log",
  "maxExecutionTime": 30,
  "maxOutputSize": 51200
}
```

Some keys have defaults:

| Key | Used when | Default |
| --- | --- | --- |
| `defaultErrorMessage` | missing or empty | `"Command not allowed by security policy"` |
| `maxExecutionTime` | missing or not positive | 30 seconds |
| `maxOutputSize` | missing or not positive | 51200 bytes (50 KiB) |

`shellguard.config.load_config_from_file(path)` reads such a file, and
`ShellCommandConfig.from_dict(data)` builds a configuration from a decoded
object. Both raise `ConfigError` when the data is malformed.
`new_default_config()` returns a built-in policy: `ls`, `cat` and `echo`
allowed in `/home` and `/tmp`, and `rm` denied.

## Usage

```python
from shellguard.config import load_config_from_file
from shellguard.logger import open_logger
from shellguard.validator import CommandBlocked, CommandValidator

config = load_config_from_file("policy.json")
log = open_logger("/tmp/shellguard.log")   # an empty path discards log output

validator = CommandValidator(config, log)

try:
    validator.validate_command("git", ["status"], "/tmp/project")      # passes
    validator.validate_command("rm", ["-rf", "/tmp/project"], "/tmp/project")
except CommandBlocked as exc:
    print(exc)   # command "rm" is denied: Command not allowed by security policy
finally:
    log.close()
```

Other checks on `CommandValidator`:

- `check_directory(directory)` raises unless the directory starts with one of
  the allowed directories.
- `check_path(path, base_dir)` resolves a relative path against `base_dir` and
  returns the absolute path, or raises if it lies outside the allowed
  directories.
- `validate_path_arguments(cmd, args, work_dir)`,
  `validate_xargs_command(args, work_dir)` and
  `validate_find_command(args, work_dir)` run single parts of the checks.

The argument parsers can be used on their own:

```python
from shellguard.findargs import parse_find_exec_args
from shellguard.xargs import parse_xargs_command

parse_find_exec_args(["-name", "*.txt", "-exec", "grep", "x", "{}", "\\;"])  # ["grep"]
parse_xargs_command(["-n", "1", "ls", "-la"])                             # ("ls", ["-la"])
```

`parse_xargs_command` raises `XargsParseError` when no command can be found.

To limit output, wrap any writable binary stream:

```python
import io
from shellguard.limiter import OutputLimiter

sink = io.BytesIO()
limited = OutputLimiter(sink, 100)
limited.write(b"y\n" * 500)
limited.was_truncated()     # True
limited.remaining_bytes()   # 900, the bytes that were dropped
```

`shellguard.fsutil.ensure_log_directory(path)` creates the directory that will
hold a log file if it is missing.

## What shellguard does not do

shellguard only judges commands; it does not run them. It has no shell
interpreter, no command-line program and no server. `maxExecutionTime` and
`maxOutputSize` are read and stored in the configuration, but nothing in the
package enforces a time limit, and output is limited only where you wrap a
stream in `OutputLimiter` yourself.

## Running the tests

```
pip install .[test]
pytest
```