# pipex

`pipex` feeds a file through a chain of commands and writes what comes out
of the last one to another file. It does what this shell line does:

```sh
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" ... outfile
```

Each command is split on spaces, and empty fields are dropped. Its program
is looked up by joining the name to each directory listed in `PATH`, in
order; the first path that exists is run. The output file is created with
mode 0644 if it is missing and truncated if it exists.

Example:

```sh
pipex input.txt "grep error" "sort" "uniq -c" report.txt
```

### Here-document mode

```sh
pipex here_doc LIMITER "cmd1 args" ... outfile
```

Any first argument that begins with `here_doc` selects this mode. Lines are
read from standard input, each after a `heredoc> ` prompt on standard
error, until a line made up of `LIMITER` alone or the end of input. The
collected text is fed to the first command. The output file is opened for
appending, like `cmd1 << LIMITER | ... >> outfile`.

### Errors and exit status

- With fewer than four arguments, or an empty environment, `pipex` does
  nothing and exits with status 0.
- If the input file is missing or unreadable, `Error\n infile doesn't exist`
  is written to standard error, nothing is run, and the status is 0.
- If `PATH` is not set, an error is printed and the status is 1.
- If the output file cannot be opened, an error is printed and the status
  is 0.
- A command whose program cannot be found or started is reported on
  standard error; the command after it receives empty input.

Otherwise `pipex` exits with status 0 whatever the commands return.

## What it does not do

Commands are not run through a shell. Quotes, escapes, globs, variables and
redirections inside a command argument are not interpreted: the argument
is only split on spaces. A program name is always joined to the `PATH`
directories, so a command given by its full path is not run directly.

## Library use

The pieces behind the command can be used on their own:

- `pipex.parsing.parse_args(argv, env)` turns the arguments after the
  program name into a `PipelineSpec` (`commands`, `outfile`, `search_dirs`,
  `infile`, `limiter`, and the `here_doc` property). It raises `InfileError`
  for an unreadable input file, `LookupError` when `PATH` is missing from
  `env`, and `ValueError` for fewer than four arguments.
  `pipex.parsing.find_path_value(env)` returns the `PATH` value.
- `pipex.heredoc.read_heredoc(limiter, stream, prompt_stream)` collects
  here-document text and returns it as one string.
- `pipex.executor.resolve_command(name, search_dirs)` returns the first
  `dir/name` that exists, and raises `CommandNotFound` otherwise.
- `pipex.executor.run_pipeline(spec, stdin, stdout, env)` runs the chain.
  `stdin` may be a file, a descriptor or bytes. It returns each command's
  exit status, `None` for commands that were never started.
- `pipex.linereader.LineReader(stream, buffer_size=1)` reads a text or
  binary stream line by line through a fixed-size buffer, with
  `read_line()` (returning `None` at the end) and iteration.
- `pipex.strings` holds `split`, `strncmp`, `strtrim`, `substr`, `strnstr`,
  `atoi` (wrapping to a signed 32-bit value) and `itoa`.
- `pipex.printf` holds `format_string(fmt, *args)` and
  `printf(fmt, *args, stream=None)`, which understand `%c %s %p %d %i %u
  %x %X %%`. Unknown conversions are dropped, `%s` of `None` gives
  `(null)`, a zero `%p` gives `(nil)`, and a format with no recognised
  conversion at all renders as `N`.

## Running the tests

```sh
pip install ".[test]"
pytest
```