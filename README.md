# gamebox

Three small games in one package, drawn with pygame on a 100 × 50 virtual canvas
that is scaled to a 640 × 320 window:

- **Minesweeper**: a 9 × 9 board with 10 mines, laid out after the first click so
  that the first tile opened is never a mine. Left click opens a tile; the
  middle mouse button places or removes a flag. The counters show the flags
  left and the seconds played; the face button starts a new game.
- **Space Invaders**: move with `A` and `D`, fire with `Space`. Protect the three
  towers; the pack of aliens speeds up every time it turns and every time it is
  cleared. The game ends when you lose all three lives, every tower falls, or an
  alien reaches the towers. The `reset` button on the losing screen starts again.
- **Sudoku**: one of three built-in puzzles. Pick a digit with the number
  buttons (0 erases) and click an unlocked cell to write it. The grid lines turn
  green once the puzzle is solved. The `auto` button clears your entries and
  sets the automatic solver to work, a frame's worth of steps at a time; it
  mixes singles elimination with counting through numbers.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
gamebox-minesweeper
gamebox-spaceinvaders
gamebox-sudoku
```

Each command takes two options:

- `--assets DIR`: the directory holding the game's PNG images
  (default `assets/images`, relative to the working directory).
- `--release`: append errors such as a missing image to `errors.log` in the
  working directory instead of raising them.

The images needed are `missing.png` and `icon.png` for every game, plus
`mine.png`, `face.png` and `flag.png` for Minesweeper and `player.png`,
`alien1.png`, `alien2.png`, `alien3.png` and `tower.png` for Space Invaders.

## Using the pieces

The game rules live apart from drawing, so they can be used on their own:

- `gamebox.minesweeper.board.Board`: the minefield, with `open`, `reveal`,
  `toggle_flag` and `check_win`; its `phase` is a `Phase` of `PLAY`, `WIN` or `LOSE`.
- `gamebox.spaceinvaders.world.World`: one frame of play per
  `step(left, right, fire)`, with the entities in `gamebox.spaceinvaders.entities`.
- `gamebox.sudoku.board.Board` and `gamebox.sudoku.solver.AutoSolver`: a grid of
  digits with `load`, `set` and `is_solved`, and the step-by-step solver behind
  the `auto` button (`start`, `step`, `run_frame`).

The screens themselves are `MinesweeperGame`, `SpaceInvadersGame` and
`SudokuGame` in each game's `app` module; they take a drawing helper and the
input for each frame.

The interface toolkit (`gamebox.page.Page`, `gamebox.widgets`,
`gamebox.textbox`, `gamebox.keys`) and the drawing helper
`gamebox.visual.VisualHandler` work in virtual coordinates and can be reused
for other small games. `gamebox.errorlog.save_to_log` raises an error during
development and appends it to a log file in release mode.

## What it does not do

- No images are shipped; the games need the PNG files listed above.
- There is no sound, no high-score table and no saved games.
- The window has a fixed size of 640 × 320.