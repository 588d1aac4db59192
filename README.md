# memshell

memshell is a small file system that lives entirely in memory. It has
directories and text files. Each entry records when it was created and when
it was last changed. You can use it from an interactive shell or from Python
code.

## Installation

```
pip install .
```

## The shell

```
memshell
```

The shell prints `Type 'exit' to quit.` and then a prompt that shows the
current directory, for example `/> `. It reads one command per line. It stops
when you type `exit` or when input ends. If an argument contains spaces, put
it in double quotes. The quote characters themselves are dropped.

| Command                 | Effect                                                        |
|-------------------------|---------------------------------------------------------------|
| `mkdir PATH`            | create a directory                                            |
| `touch PATH`            | create an empty file                                          |
| `ls [PATH]`             | list a directory in name order; for a file, print its name    |
| `cat PATH`              | print the contents of a file                                  |
| `append PATH TEXT`      | add text to the end of a file                                 |
| `empty PATH`            | clear a file's contents                                       |
| `rm PATH`               | remove a file or a directory, including everything inside it  |
| `rmdir PATH`            | remove an empty directory                                     |
| `cd PATH`               | change the current directory                                  |
| `meta PATH`             | show the name, type, size and timestamps of an entry          |

A path that begins with `/` starts at the root. Any other path starts at the
current directory. `.` refers to the current directory and `..` refers to its
parent. At the root, `..` stays at the root.

When a command fails, the shell prints a short message such as
`Error creating directory` or `Error removing file`. An unknown command, or a
command with too few arguments, prints
`Unknown command or invalid arguments`. Some commands fail without printing
anything:

- `cd` to a path that does not exist, or to a file, leaves the current
  directory as it was.
- `ls` on a missing path prints nothing.
- `cat` on a missing path or on a directory prints an empty line.

Sizes are counted in bytes of UTF-8 text. A directory's size is the total
size of everything inside it. Timestamps are shown in local time as
`YYYY-MM-DD HH:MM:SS`.

Here is an example session:

```
Type 'exit' to quit.
/> mkdir docs
/> touch docs/notes.txt
/> append docs/notes.txt "hello world"
/> cat docs/notes.txt
hello world
/> cd docs
/docs> ls
notes.txt
/docs> exit
```

## Using it from Python

```python
from memshell.filesystem import FileSystem

fs = FileSystem()
fs.mkdir("docs")
fs.touch("docs/notes.txt")
fs.append("docs/notes.txt", "hello")
print(fs.cat("docs/notes.txt"))   # hello
print(fs.ls("docs"))              # ['notes.txt']
fs.cd("docs")
print(fs.current_path())          # /docs
print(fs.metadata_report("notes.txt"))
```

When an operation fails, `FileSystem` raises the usual built-in exceptions:

- `FileExistsError` when the name is already taken.
- `FileNotFoundError` when the path is missing.
- `NotADirectoryError` or `IsADirectoryError` when the entry is the wrong kind.
- `OSError` from `rmdir` on a directory that is not empty.
- `PermissionError` when you try to remove the root.
- `ValueError` for an empty path.

`ls` and `cat` are the exceptions to this. They return `[]` or `""` instead
of raising.

The module also provides `split_path` and `join_path` for working with
slash-separated paths, and `resolve` to look up the node at a path. `resolve`
returns `None` if there is no node there.

`memshell.nodes` provides the building blocks: `Directory`, `File`, and the
`Metadata` that each one carries. `File` also has `write`, which replaces the
file's whole content. The shell has no command for it.

`memshell.shell.Shell` runs commands. Use `execute` to run one command line
and get back the lines it would print. Use `run` for a whole session: it
reads from an input stream and writes to an output stream.
`memshell.shell.tokenize` splits a command line the same way the shell does.

## What it does not do

Nothing is ever written to disk. All directories and files are lost when the
shell exits or the `FileSystem` object goes away. No command renames or moves
entries.