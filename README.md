# savewatch

savewatch watches a game's save-games folder and keeps a dated copy of each finished save. It reads the in-game date from a small area of the screen. It then files the copy in a folder named after the campaign.

## Install

```
pip install .
```

Text recognition runs the `tesseract` program, which must be on your `PATH`. Screen capture uses Pillow's `ImageGrab`.

## Running it

```
savewatch [--save-path DIR] [--dirs-file FILE] [--interval MS] [--iterations N]
```

- `--save-path`: the folder to watch. Without it, savewatch uses `~/.local/share/Paradox Interactive/Europa Universalis IV/save games` on Linux. On Windows it uses `Documents/Paradox Interactive/Europa Universalis IV/save games` under the home folder.
- `--dirs-file`: a text file of campaign folder names, separated by whitespace. Each folder it names under the save folder is watched as well. The file is opened for appending while savewatch runs. The default is `../data/savefile_dirs.txt`.
- `--interval`: milliseconds to wait between checks. The default is 0.
- `--iterations`: stop after this many checks. Without it, savewatch runs until interrupted with Ctrl-C.

The command exits with status 1 if the save folder cannot be watched.

At start-up savewatch reads the screen width from the `x=` entry in the `settings.txt` file next to the save folder. The date is read from a 116×19 pixel area at `(width - 214, 16)`. Words are corrected against `../data/dictionary.txt` when that file exists.

When a `<name>.tmp` file disappears, savewatch reads `<name>.eu4` and writes a copy to:

```
<campaign>/<campaign>.<n>.<year>_<month>_<day>.eu4
```

`n` starts at 0 and counts successive saves made on the same date. Dates before 1444_11_11 are ignored. For a new date taken from an autosave, the last digit of the day is set to `1`.

## Library pieces

- `savewatch.levenshtein`: `levenshtein_distance`, and `damerau_distance`, which also counts transpositions.
- `savewatch.bktree.BKTree`: a BK-tree. `insert(value)` adds a value, `find(value, limit)` returns `(value, distance)` pairs, and `len()` gives the number of stored values.
- `savewatch.spellcheck`: `SpellCheck(words)` or `SpellCheck.from_file(path)` turns OCR text into `[year, month, day]` strings. Also `join_strings` and `extract_ints`.
- `savewatch.paths`: `make_path` creates a directory and its parents. Also `directory_exists` and `delay_ms`.
- `savewatch.dirlist`: `scan(path)` yields `DirEntry` items, including `.` and `..`. `find_file(path)` looks up one entry. `SortedDirectory(path)` lists directories first, then names in byte order, and `open_subdir(index)` moves into a subdirectory.
- `savewatch.bitmap`: `Bitmap` writes 24-bit BMP files of up to 512×512 pixels. Also `bmp_bytes`, `write_bmp`, the colour helpers `rgb`, `get_r`, `get_g` and `get_b`, `distance_sqrd`, and `Voronoi`, which paints random sites onto a `Bitmap`.
- `savewatch.spherepoints.generate_points(count, rng)`: points spread uniformly over the unit sphere.
- `savewatch.ocr.OCR`: `preprocess` turns an image grey, doubles its size and inverts it with an Otsu threshold. `recognize` runs `tesseract` in single-line mode.
- `savewatch.screenshot.ScreenShot(x, y, width, height)`: calling it grabs that screen region as an RGB image.
- `savewatch.savefiles`: the date helpers `date_to_int`, `compare_date` and `create_date_value`. Also `parse_resolution`, `default_save_path`, the polling `FileWatcher` with `Action`, and `UpdateListener` and `SavefileManager`. `SavefileManager` is a context manager.

```python
from savewatch.spellcheck import SpellCheck

check = SpellCheck(["january", "february", "march", "april", "may", "june", "july",
                    "august", "september", "october", "november", "december"])
print(check("11 Novenber 1444"))  # ['1444', '11', '11']
```

`SavefileManager` accepts `spell_check` and `read_text` callables, so it can run without the screen or `tesseract`.

## What it does not do

- File changes are found by polling directory listings. savewatch does not use operating-system change notifications.
- The screen area and the date format are fixed for one game's interface. They cannot be configured beyond the save folder and the settings file.