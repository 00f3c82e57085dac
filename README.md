# llcmerge

A small desktop tool for keeping a translated tree of JSON files in step with
a source tree.

Every file below the source directory (subdirectories included) is matched
to a file in the target directory at the same relative path. If the file
name starts with the source prefix, that prefix is removed; the target
prefix is then put in front. Then:

* if the target file does not exist, the source file is copied there and
  any missing directories are created;
* if both files are JSON objects holding a `dataList` array, every source
  entry that is an object with an `id` not yet present in the target's
  `dataList` is appended to it, and the target file is rewritten as UTF-8
  JSON (three-space indentation, keys in their original order);
* otherwise, including when a file cannot be read or parsed, the file is
  left alone.

Entries already in the target are never changed, so existing translations
are kept. Source files are handled in sorted path order.

## Installing

```
pip install .
```

The window is built with Tkinter, which comes with most Python
installations. No other libraries are needed.

## Using the window

```
llcmerge
```

The window has a fixed size. The left panel ("目标文件") takes the target
directory and its file prefix; the right panel ("比对文件") takes the source
directory and its prefix. The "..." button next to each directory field
opens a directory chooser. Press **start** to run the merge; a progress bar
shows how far it has got, and the button is disabled while it runs.

If a directory field is empty or names a directory that does not exist, a
warning is shown and nothing is merged. After a successful run the
directories and prefixes are saved to `last_run.json` in the working
directory, and they are filled in again the next time the window opens.

The `llcmerge` command only opens the window; it takes no command-line
options and has no mode that merges without the window. For unattended use,
call the functions below from Python.

## Using it from Python

```python
from llcmerge.merge import MergeError, merge_directories

try:
    copied = merge_directories(
        "translations/zh",
        "zh_",
        "translations/en",
        "en_",
        lambda total, done: print(f"{done}/{total}"),
    )
    print(f"{copied} files copied")
except MergeError as exc:
    print(exc)
```

In `llcmerge.merge`:

* `merge_directories(dst_dir, dst_prefix, src_dir, src_prefix, on_progress=None)`
  runs the merge described above. `on_progress(total, done)` is called after
  each source file. It returns the number of files copied and raises
  `MergeError` when a directory is empty or does not exist.
* `merge_data_lists(dst_document, src_document)` merges two documents that
  are already loaded. It returns a new dictionary, leaving `dst_document`
  unchanged, or `None` when either document has no `dataList` array.
* `target_name(file_name, src_prefix, dst_prefix)` gives the target file
  name for a source file name.
* `count_files(directory)` counts the files below a directory, recursively.

In `llcmerge.settings`, `load_last_run(path)` and `save_last_run(settings, path)`
read and write the saved settings as a `LastRun` object with the fields
`src_dir`, `dst_dir`, `src_prefix` and `dst_prefix`. `load_last_run` returns
`None` when the file cannot be opened; missing or unusable values come back
as empty strings.

`llcmerge.layout` holds the placement helpers the window uses
(`WidgetPlacement`, `TitleAlignment`, `panel_origin`, `title_anchor`).

## Running the tests

```
pip install .[test]
pytest
```