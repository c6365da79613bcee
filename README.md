# rim

A small modal text editor for the terminal with vi-style key bindings.
It has normal, insert, command and search modes, undo and redo, a
one-line yank register and `.` to repeat the last change. The screen
is drawn with the standard library's `curses` module. The package has
no other dependencies.

## Running

    rim [FILE]

If you give a file, it is opened at start. If you give none, you start
with an empty buffer and name it when you save with `:w NAME`. If the
file cannot be read, the editor closes and prints `Error: ...`.

## Keys

Normal mode:

| Key       | Action                                      |
|-----------|---------------------------------------------|
| `h j k l` | move left, down, up, right                  |
| `i`       | enter insert mode                           |
| `o` / `O` | open a new line below / above, then insert  |
| `x`       | delete the character under the cursor       |
| `dd`      | delete the current line                     |
| `p`       | put the yanked line below                   |
| `u`       | undo                                        |
| `Ctrl-r`  | redo (a plain `r` does nothing)             |
| `.`       | repeat the last change                      |
| `/`       | search: type the text, then Enter           |
| `n` / `N` | next / previous match, wrapping around      |
| `:`       | enter command mode                          |
| `q`       | quit                                        |

In insert mode you type text. Enter splits the line, Backspace deletes
the character before the cursor (joining lines at the start of a line),
and the arrow keys move the cursor. Esc goes back to normal mode.

In command and search mode, Backspace removes the last typed character
and Esc cancels.

Commands, typed after `:` and run with Enter:

| Command                   | Action                               |
|---------------------------|--------------------------------------|
| `:w [FILE]`, `:write`     | save, or save under a new name       |
| `:e FILE`, `:edit`        | open a file                          |
| `:q`, `:quit`             | quit                                 |

An unknown command or a failed read or write shows `Error: ...` on the
status line.

The screen has two status lines at the bottom, shown in reverse video.
The first gives the cursor position, the line count, the file name
(`[No Name]` if there is none) and the mode. The second shows messages
and what you type in command mode.

## Using it as a library

The editing logic has no terminal code in it, so you can drive it
yourself:

    from rim.editor_model import EditorModel, Direction

    model = EditorModel()
    model.set_content("hello world")
    model.move_cursor(Direction.RIGHT)
    model.insert_char("X")
    model.insert_char("Y")
    model.undo()
    print(model.content())   # hXello world

The pieces:

- `rim.editor_model.EditorModel` holds the lines, cursor, mode, yank
  register, search state and history, and has the editing operations.
- `rim.history.History` and `rim.search.SearchState` (with
  `find_matches`) are the undo history and the search used by the model.
- `rim.editor_service.EditorService` adds file handling, `yank_current_line`
  and `handle_command` for `:` commands on top of the model. It raises
  `NoFilePathError` when saving without a path and `UnknownCommandError`
  for an unknown command. It reads and writes through a
  `rim.file_io.FileIO`; `rim.file_io.LocalFileIO` uses the local disk.
- `rim.normal_commands` has the normal-mode key handlers and
  `build_normal_commands()`; `rim.app.App.handle_key` applies one
  `KeyEvent` in whatever mode the editor is in.
- `rim.terminal_ui.render` returns the screen as a list of strings,
  without touching a terminal.
- `rim.editor.Editor` is a simpler buffer with a cursor that reads and
  writes a file directly, without modes or history.

## Limitations

- There is no scrolling: only as many lines as fit above the status
  lines are shown, and the cursor is kept on screen.
- The first change after opening a file cannot be undone; undo goes
  back to the state after the previous change.
- There is no key that yanks a line. `p` puts whatever is in the yank
  register, which is filled only through
  `EditorService.yank_current_line()`.
- `curses` must be available; on Windows it is not part of Python.

## Tests

    pip install -e .[test]
    pytest