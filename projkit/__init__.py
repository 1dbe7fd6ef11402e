"""projkit package.

Root of the ``projkit`` command-line tool, which scaffolds a new project
directory from a template document and wires it up with Git and Git LFS
(repository, ignore rules, large-file tracking, initial commit and push).

Package Structure
-----------------
- `pipeline/`:
    The ordered setup steps, the short-circuiting orchestrator and the
    status table rendering.
- `ui/`:
    Console output primitives built on Rich.
- `vcs.py`: Version-control capability interface and the ``git`` adapter.
- `runlog.py`: Timestamped run log (streamed or buffered).
- `cli.py`: Argument parsing, command dispatch and exit codes.
- `config.py`: All configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.

Examples
--------
>>> from projkit.cli import main
>>> main(["--help"])  # doctest: +SKIP
0

"""

__version__ = "1.0.0"
