# aurkit

Small building blocks for a pacman/AUR helper. The library uses only the
standard library.

## Modules

- `aurkit.menu`: `NumberMenu.parse(text)` reads a selection such as
  `1 2-4 ^3 extra ^core`. Entries may be separated by whitespace or commas.
  A leading `^` marks an exclusion, `a-b` is an inclusive range, and anything
  that is not a number counts as a word. `contains(n, word)` then says whether
  an entry is selected. An inclusion wins over an exclusion. An entry that
  matches neither is selected only when the selection has no inclusions.
- `aurkit.prompt`: interactive questions. Each function takes `no_confirm`
  and optional `stdin`/`stdout` (and for `get_provider`, `stderr`) streams.
  They default to the process streams.
  - `ask(question, default)` asks yes/no. `y` or `yes` answers yes, an empty
    answer gives `default`, and any other answer means no.
  - `prompt_input(question)` returns the line as typed. With `no_confirm`
    it returns an empty string.
  - `get_provider(max_value)` asks for a number from 1 to `max_value` and
    returns it zero-based. An empty answer gives 0. It asks again after an
    invalid answer.
- `aurkit.packages`: package metadata.
  - `InstallReason`, `Package`, `Target` and `Mode` describe packages,
    targets and the sources an operation may use. `Target.parse` reads
    `repo/name` or `name`. `Mode` is a flag made of `REPO`, `AUR` and
    `PKGBUILD`.
  - `split_repo_aur_info(targets, mode, sync_pkg_names, aur_namespace)`
    splits targets into a repository list and an AUR list.
  - `unneeded_pkgs(local_pkgs, sync_pkg_names, keep_make, keep_optional)`
    lists installed packages that no explicitly installed package still needs,
    directly or through what packages provide.
  - `pkg_base_or_name(pkg)` gives a package's base, or its name when it has
    no base.
- `aurkit.stdio`: low-level descriptor handling.
  - `redirect_to_stderr()` points stdout at stderr and returns a file for the
    original stdout.
  - `reopen_stdout(file)` points stdout at that file.
  - `reopen_stdin()` attaches stdin to `/dev/tty`.

## Example

```python
from aurkit.menu import NumberMenu

menu = NumberMenu.parse("1-3 ^2")
[n for n in range(1, 6) if menu.contains(n, "")]   # [1, 2, 3]
```

## What it does not do

aurkit has no command-line program. It does not read pacman's databases or
configuration, and it does not query the AUR, build packages or install
anything. The caller supplies the installed packages and the names of
sync-repository packages.

## Tests

```
pip install -e .[test]
pytest
```