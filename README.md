# television

Building blocks for a terminal fuzzy finder: an editable input line, highlight-aware truncation, a small key cache, file-type checks, and shell and clipboard helpers.

## Modules

- `television.input`
  - `Input` is a single-line buffer with a cursor counted in characters.
  - `Input.handle(request)` applies an `InputRequest` and returns a `StateChanged(value, cursor)`, or `None` when nothing changed.
  - An `InputRequest` carries an `InputAction`: moving by character or word, going to the start or end, deleting by character, word, line or up to the end, setting the cursor, or inserting a character. Build the last two with `InputRequest.set_cursor(n)` and `InputRequest.insert_char(c)`.
  - `visual_cursor()` gives the cursor in terminal columns and handles wide characters. `visual_scroll(width)` gives how many columns to scroll so that the cursor stays visible.
- `television.indices`
  - `sep_name_and_value_indices(indices, name_len)` splits match indices between an entry's name and its value. It returns sorted, de-duplicated lists and a flag for each part.
  - `truncate_highlighted_string(s, ranges, max_width)` fits `s` into `max_width` columns using `…`. It cuts the end, the start or both sides, whichever keeps the highlighted ranges visible, and shifts the ranges to match.
- `television.cache`
  - `RingSet(capacity=20)` is a bounded ring buffer of unique keys.
  - `push` ignores keys the buffer already holds. When the buffer is full, `push` evicts the oldest key and returns it.
  - It supports `in` and `len()`. `back_to_front()` iterates from newest to oldest.
- `television.files`
  - `read_into_lines_capped(reader, max_bytes)` reads lines from a text or byte stream until the stream ends or the byte cap is exceeded. It returns a `CappedRead` holding `lines`, `bytes_read` and `partial`.
  - `is_known_text_extension(path)` and `is_accepted_image_extension(path)` check a path's extension.
  - `get_file_size(path)` returns the size in bytes, or `None` when the file cannot be read.
  - `get_default_num_threads()` returns the default thread count and computes it only once.
- `television.threads`: `default_num_threads()` returns the available parallelism, at least 1 and at most 32.
- `television.shell`
  - `Shell` is one of bash, zsh, fish, powershell or cmd.
    - `Shell.parse(value)` recognises a shell from a name or a path, and raises `ValueError` if it recognises none.
    - `Shell.from_env()` reads `$SHELL`. If `$SHELL` is not set, it returns `Shell.default()`: PowerShell on Windows, bash elsewhere.
  - `ctrl_keybinding(shell, character)` gives the Ctrl key binding in the syntax of bash, zsh or fish. It raises `ValueError` for any other shell.
  - `render_autocomplete_script_template(shell, template, autocomplete_character, history_character)` fills in the `{tv_smart_autocomplete_keybinding}` and `{tv_shell_history_keybinding}` placeholders.
- `television.command`
  - `shell_command(interactive)` returns the argument-list prefix for running a command string through the user's shell, for example `["bash", "-c"]`.
  - On Unix, interactive mode adds `-i`.
- `television.stdin`: `is_readable_stdin()` returns true when stdin is not a terminal and is a regular file, a pipe or a socket.
- `television.clipboard`
  - `Clipboard` has async `get()` and `set(content)`.
  - On Unix, both try `pbcopy`/`pbpaste`, `termux-clipboard-*`, `wl-copy`/`wl-paste`, `xclip` and `xsel`, in that order. `set` also writes an OSC 52 sequence to stderr.
  - The last value set is kept in memory. `get` returns it when no tool works, and always returns it on other systems.
  - `osc52_sequence(content)` builds the escape sequence.
  - `CLIPBOARD` is a shared instance.
- `television.rocell`: `RoCell` is a write-once cell with `init`, `init_with`, `get`, `take` and `initialized`. Reading an empty cell or initialising a full one raises `RuntimeError`.
- `television.matching`
  - `Mode` and `MatchingMode` are enums.
  - `preprocess_pattern(mode, pattern)` prefixes every whitespace-separated word with `'` in substring mode, so that each word is matched exactly. In fuzzy mode it leaves the pattern unchanged.
- `television.hashmaps`: `invert_mapping(mapping)` maps each value in each key's collection back to that key.
- `television.metadata`: `AppMetadata(version, current_directory)` is a frozen dataclass.

## Example

```python
from television.input import Input, InputRequest
from television.indices import truncate_highlighted_string
from television.matching import MatchingMode, preprocess_pattern

field = Input("hello")
field.handle(InputRequest.insert_char("!"))
print(field.value())  # hello!

print(truncate_highlighted_string("hello world", [(0, 2), (4, 8), (10, 11)], 6))
# ('…world', [(1, 3), (5, 6)])

print(preprocess_pattern(MatchingMode.SUBSTRING, "this is a test"))
# 'this 'is 'a 'test
```

## What it does not do

This is a library of parts, not a finder. It has:

- no command to run;
- no terminal user interface;
- no channels that produce entries;
- no fuzzy matcher;
- no previewer;
- no configuration or theme loading.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```